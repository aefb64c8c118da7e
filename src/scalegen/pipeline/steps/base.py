# topmark:header:start
#
#   project      : ScaleGen
#   file         : base.py
#   file_relpath : src/scalegen/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: may_proceed → run? → hint
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from scalegen.config.logging import get_logger

if TYPE_CHECKING:
    from scalegen.config.logging import ScalegenLogger
    from scalegen.pipeline.context import GenerationContext
    from scalegen.pipeline.status import Axis

logger: ScalegenLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this and override ``may_proceed()``, ``run()`` and optionally
    ``hint()``. Do not override ``__call__``.

    Attributes:
        name (str): Stable step identifier for logs.
        primary_axis (Axis | None): The axis this step represents in summaries.
        axes_written (tuple[Axis, ...]): Status axes this step is allowed to write.
    """

    name: str
    primary_axis: Axis | None
    axes_written: tuple[Axis, ...] = ()

    def __call__(self, ctx: GenerationContext) -> GenerationContext:
        """Invoke the step lifecycle: gate → run (if allowed) → hint.

        Args:
            ctx (GenerationContext): The mutable context of the current run.

        Returns:
            GenerationContext: The same context instance after mutation.
        """
        ctx.steps.append(self)

        if self.may_proceed(ctx):
            logger.debug("Pipeline step %s - running", self.name)
            self.run(ctx)
            if ctx.flow.halt is True:
                logger.info("Pipeline halted by %s: %s", ctx.flow.at_step, ctx.flow.reason)
        else:
            logger.debug("Pipeline step %s may not proceed", self.name)

        self.hint(ctx)
        return ctx

    def may_proceed(self, ctx: GenerationContext) -> bool:
        """Return whether the step should run; default: unless the flow halted."""
        return not ctx.flow.halt

    def run(self, ctx: GenerationContext) -> None:
        """Perform the step's primary work, mutating ``ctx`` in place."""
        pass

    def hint(self, ctx: GenerationContext) -> None:
        """Attach non-binding diagnostics to ``ctx`` (optional)."""
        pass
