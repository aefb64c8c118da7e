# topmark:header:start
#
#   project      : ScaleGen
#   file         : functions.py
#   file_relpath : src/scalegen/pipeline/steps/functions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Function stub emission step."""

from __future__ import annotations

from typing import TYPE_CHECKING

from scalegen.config.logging import get_logger
from scalegen.emit.functions import FunctionEmitter
from scalegen.pipeline.status import Axis, FunctionsStatus
from scalegen.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from scalegen.config.logging import ScalegenLogger
    from scalegen.pipeline.context import GenerationContext

logger: ScalegenLogger = get_logger(__name__)


class EmitFunctionsStep(BaseStep):
    """Render one stub per function signature, in input order.

    Axes written:
      - functions

    Sets:
      - FunctionsStatus: {EMITTED, NONE}
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.FUNCTIONS,
            axes_written=(Axis.FUNCTIONS,),
        )

    def may_proceed(self, ctx: GenerationContext) -> bool:
        """Run once names are resolved."""
        return not ctx.flow.halt and ctx.names is not None

    def run(self, ctx: GenerationContext) -> None:
        """Emit one stub per function, in input order."""
        assert ctx.names is not None  # guaranteed by may_proceed
        emitter = FunctionEmitter(ctx.names, ctx.config, ctx.namer)
        ctx.function_blocks = [emitter.emit(fn) for fn in ctx.schema.functions]
        ctx.status.functions = (
            FunctionsStatus.EMITTED if ctx.function_blocks else FunctionsStatus.NONE
        )
        logger.debug("Emitted %d function stub(s)", len(ctx.function_blocks))
