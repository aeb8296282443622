"""Pipeline orchestrator — runs stages in dependency order, stopping at the first error."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from analogsight.engine.context import LiteralContext
from analogsight.engine.errors import AnalogLiteralError
from analogsight.engine.registry import Layer, StageRegistry, get_registry

logger = logging.getLogger(__name__)

_STAGE_PACKAGES = ("layer0", "layer1", "layer2", "layer3")


class Pipeline:
    """Orchestrates the stage pipeline for one literal at a time.

    Stages are gated by shape kind at run time: once the classifier has
    picked a kind, validators and extractors for other kinds are skipped.
    An ``AnalogLiteralError`` raised by any stage is recorded on the
    context and ends the run; any other exception is a bug and propagates.
    """

    def __init__(self, registry: StageRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, ctx: LiteralContext) -> LiteralContext:
        """Run the full pipeline on the given context."""
        start = time.perf_counter()
        ordered = self.registry.resolve_order()

        for spec in ordered:
            if not spec.applies_to(ctx.shape_kind):
                ctx.skipped_stages.add(spec.id)
                continue

            t0 = time.perf_counter()
            try:
                spec.fn(ctx)
            except AnalogLiteralError as e:
                ctx.error = e
                logger.debug("  %s rejected literal: %s", spec.id, e)
                break
            ctx.completed_stages.add(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.2fms", spec.id, elapsed)

        total = (time.perf_counter() - start) * 1000
        if ctx.error is not None:
            logger.info(
                "Pipeline rejected %s literal after %d stages in %.1fms: %s",
                ctx.shape_kind.value,
                len(ctx.completed_stages),
                total,
                ctx.error.kind.value,
            )
        else:
            logger.info(
                "Pipeline complete: %s in %d stages, %.1fms",
                ctx.value,
                len(ctx.completed_stages),
                total,
            )
        return ctx

    def run_layer(self, ctx: LiteralContext, layer: Layer) -> LiteralContext:
        """Run only stages in a specific layer. Errors propagate to the caller."""
        for spec in self.registry.get_layer(layer):
            if not spec.applies_to(ctx.shape_kind):
                ctx.skipped_stages.add(spec.id)
                continue
            spec.fn(ctx)
            ctx.completed_stages.add(spec.id)
        return ctx


def register_stages() -> None:
    """Import all stage modules so @stage decorators fire."""
    for layer_name in _STAGE_PACKAGES:
        package_name = f"analogsight.engine.{layer_name}"
        package = importlib.import_module(package_name)
        for _, module_name, _ in pkgutil.iter_modules(package.__path__):
            importlib.import_module(f"{package_name}.{module_name}")


def create_pipeline() -> Pipeline:
    """Factory function for creating a pipeline over the registered stages."""
    register_stages()
    return Pipeline()
