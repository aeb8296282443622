"""Glyph vocabulary of the analog literal surface syntax.

Every structural rule in the engine is written against these names, never
against raw characters, so the grammar reads the same in the classifier,
the validators and the renderer.
"""

# Horizontal edge fill. One glyph = one unit of width or length.
FILL = "-"

# Rectangle and cuboid corners. Also a valid line terminator.
CORNER = "+"

# Alternative line terminator ("ruler" style).
BAR = "I"

LINE_TERMINATORS = frozenset({CORNER, BAR})

# Vertical edges of rectangle faces and the back edge of a cuboid.
BORDER = "|"

# Receding edges of a cuboid (one glyph per depth step).
DIAGONAL = "/"


def is_blank(char: str) -> bool:
    """Whitespace is layout, never structure."""
    return char.isspace()
