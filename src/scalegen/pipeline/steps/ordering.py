# topmark:header:start
#
#   project      : ScaleGen
#   file         : ordering.py
#   file_relpath : src/scalegen/pipeline/steps/ordering.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dependency ordering step."""

from __future__ import annotations

from typing import TYPE_CHECKING

from scalegen.config.logging import get_logger
from scalegen.pipeline.status import Axis, OrderStatus
from scalegen.pipeline.steps.base import BaseStep
from scalegen.resolver.ordering import order_types

if TYPE_CHECKING:
    from scalegen.config.logging import ScalegenLogger
    from scalegen.pipeline.context import GenerationContext

logger: ScalegenLogger = get_logger(__name__)


class OrderTypesStep(BaseStep):
    """Compute the emission order of all type definitions.

    Axes written:
      - order

    Sets:
      - OrderStatus: {ORDERED, CYCLE_BROKEN}
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.ORDER,
            axes_written=(Axis.ORDER,),
        )

    def run(self, ctx: GenerationContext) -> None:
        """Compute the emission order and store it on ``ctx.ordering``."""
        ctx.ordering = order_types(ctx.schema)
        ctx.status.order = (
            OrderStatus.CYCLE_BROKEN if ctx.ordering.cycle_broken else OrderStatus.ORDERED
        )

    def hint(self, ctx: GenerationContext) -> None:
        """Record a warning per id emitted outside dependency order."""
        if ctx.ordering is None:
            return
        for type_id in ctx.ordering.cycle_broken:
            ctx.diagnostics.add_warning(
                f"type {type_id} emitted outside dependency order", type_id=type_id
            )
