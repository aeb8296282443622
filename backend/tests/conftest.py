"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Well-formed literals

LINE_4 = "+----+"

BAR_LINE_6 = "I------I"

RECT_4_BY_3 = """\
+----+
|    |
+----+"""

MODAL_POPUP = """\
+-----------------------------+
|                             |
|   /* Accept the terms */    |
|   /* and conditions?  */    |
|                             |
|   /* Yes */     /* No */    |
|                             |
|                             |
+-----------------------------+"""

CUBE_10_BY_2_BY_4 = """\
     +----------+
    /          /|
   /          / |
  /          /  +
 /          /  /
+----------+  /
|          | /
|          |/
+----------+"""

TALL_CUBE_8_BY_5_BY_1 = """\
  +--------+
 /        /|
+--------+ |
|        | |
|        | |
|        | |
|        | +
|        |/
+--------+"""

MINING_RIG = """\
                 +---------------------+
                /                     /|
               /                     / +
              /                     / /
             /                     / /
            /                     / /
           /                     / /
          /                     / /
         /                     / /
        /                     / /
       /                     / /
      /                     / /
     /                     / /
    /                     / /
   /                     / /
  /                     / /
 /                     / /
+---------------------+ /
|                     |/
+---------------------+"""

# Literal embedded the way it reads in source: blank first line, indented body
INDENTED_RECT = """
    +--------+
    |        |
    |        |
    +--------+
"""


# Malformed literals

SHORT_BOTTOM_RECT = """\
+----------------+
|                |
|                |
+---------------+"""

STRAY_AFTER_LINE = "+--+ x"


@pytest.fixture
def rect_4_by_3() -> str:
    return RECT_4_BY_3


@pytest.fixture
def modal_popup() -> str:
    return MODAL_POPUP


@pytest.fixture
def cube_10_by_2_by_4() -> str:
    return CUBE_10_BY_2_BY_4


@pytest.fixture
def mining_rig() -> str:
    return MINING_RIG
