"""Stage registry — every stage is a standalone function registered via decorator.

Usage:
    @stage(id="S2.01", layer=Layer.VALIDATION, dependencies=["S1.01"], kinds={ShapeKind.LINE})
    def line_validation(ctx: LiteralContext) -> None:
        ...

A stage with ``kinds`` only runs when the classifier picked one of them.
Adding a new stage = creating one file with the decorator. Nothing else changes.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from analogsight.models.values import ShapeKind

if TYPE_CHECKING:
    from analogsight.engine.context import LiteralContext

logger = logging.getLogger(__name__)


class Layer(enum.IntEnum):
    LOADING = 0
    CLASSIFICATION = 1
    VALIDATION = 2
    EXTRACTION = 3


@dataclass
class StageSpec:
    id: str
    layer: Layer
    fn: Callable[["LiteralContext"], None]
    dependencies: list[str] = field(default_factory=list)
    kinds: frozenset[ShapeKind] = frozenset()
    description: str = ""

    def applies_to(self, kind: ShapeKind) -> bool:
        return not self.kinds or kind in self.kinds


class StageRegistry:
    """Singleton registry of all stages."""

    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.layer.name)

    def get_layer(self, layer: Layer) -> list[StageSpec]:
        specs = [s for s in self._stages.values() if s.layer == layer]
        return sorted(specs, key=lambda s: s.id)

    def resolve_order(self) -> list[StageSpec]:
        """Topological sort respecting dependencies."""
        pool = self._stages

        # Kahn's algorithm
        in_degree: dict[str, int] = {sid: 0 for sid in pool}
        for sid, spec in pool.items():
            for dep in spec.dependencies:
                if dep in pool:
                    in_degree[sid] += 1

        queue = sorted([sid for sid, d in in_degree.items() if d == 0])
        ordered: list[StageSpec] = []

        while queue:
            sid = queue.pop(0)
            ordered.append(pool[sid])
            for other_id, other_spec in pool.items():
                if sid in other_spec.dependencies:
                    in_degree[other_id] -= 1
                    if in_degree[other_id] == 0:
                        queue.append(other_id)
                        queue.sort()

        if len(ordered) != len(pool):
            missing = set(pool.keys()) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._stages)


# Module-level singleton
_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    layer: Layer,
    dependencies: list[str] | None = None,
    kinds: set[ShapeKind] | None = None,
    description: str = "",
):
    """Decorator to register a stage function."""

    def decorator(fn: Callable[["LiteralContext"], None]):
        spec = StageSpec(
            id=id,
            layer=layer,
            fn=fn,
            dependencies=dependencies or [],
            kinds=frozenset(kinds or ()),
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
