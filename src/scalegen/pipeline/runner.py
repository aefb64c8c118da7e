# topmark:header:start
#
#   project      : ScaleGen
#   file         : runner.py
#   file_relpath : src/scalegen/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run a generation pipeline over one context."""

from __future__ import annotations

from typing import TYPE_CHECKING

from scalegen.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from scalegen.config.logging import ScalegenLogger
    from scalegen.pipeline.context import GenerationContext
    from scalegen.pipeline.contracts import Step

logger: ScalegenLogger = get_logger(__name__)


def run(ctx: GenerationContext, steps: Sequence[Step]) -> GenerationContext:
    """Execute the pipeline sequentially.

    Args:
        ctx (GenerationContext): Mutable context of the run.
        steps (Sequence[Step]): Ordered step instances.

    Returns:
        GenerationContext: The final context after all steps have run.
    """
    logger.info(
        "Running %d step(s) over %d type(s) and %d function(s)",
        len(steps),
        len(ctx.schema),
        len(ctx.schema.functions),
    )
    for step in steps:
        ctx = step(ctx)

    logger.debug("Final status: %s", ctx.status.to_dict())
    return ctx
