# topmark:header:start
#
#   project      : ScaleGen
#   file         : types.py
#   file_relpath : src/scalegen/pipeline/steps/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type emission step.

Walks the emission order and renders one block per type through a
[`TypeEmitter`][scalegen.emit.types.TypeEmitter], threading the run's
[`EmissionAccumulator`][scalegen.emit.types.EmissionAccumulator].
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scalegen.config.logging import get_logger
from scalegen.emit.types import TypeEmitter
from scalegen.pipeline.status import Axis, TypesStatus
from scalegen.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from scalegen.config.logging import ScalegenLogger
    from scalegen.pipeline.context import GenerationContext
    from scalegen.schema.model import TypeInfo

logger: ScalegenLogger = get_logger(__name__)


class EmitTypesStep(BaseStep):
    """Render type definitions in dependency order.

    Axes written:
      - types

    Sets:
      - TypesStatus: {EMITTED, NONE}
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.TYPES,
            axes_written=(Axis.TYPES,),
        )

    def may_proceed(self, ctx: GenerationContext) -> bool:
        """Run only after names and ordering are known."""
        return not ctx.flow.halt and ctx.names is not None and ctx.ordering is not None

    def run(self, ctx: GenerationContext) -> None:
        """Emit one block per type id in dependency order."""
        assert ctx.names is not None and ctx.ordering is not None  # guaranteed by may_proceed
        emitter = TypeEmitter(ctx.schema, ctx.names, ctx.config)
        for type_id in ctx.ordering.order:
            info: TypeInfo | None = ctx.schema.get(type_id)
            if info is None:
                continue
            emitter.emit(type_id, info, ctx.emitted)

        ctx.status.types = TypesStatus.EMITTED if len(ctx.emitted) else TypesStatus.NONE
        logger.debug("Emitted %d type block(s)", len(ctx.emitted))
