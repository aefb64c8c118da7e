# topmark:header:start
#
#   project      : ScaleGen
#   file         : names.py
#   file_relpath : src/scalegen/pipeline/steps/names.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Name resolution step.

Runs the name-analysis pass once for the run and stores the immutable
[`NameResolver`][scalegen.resolver.names.NameResolver] on the context. An empty
schema (no types and no functions) halts the flow: there is nothing to emit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scalegen.config.logging import get_logger
from scalegen.pipeline.status import Axis, NamesStatus
from scalegen.pipeline.steps.base import BaseStep
from scalegen.resolver.names import NameResolver

if TYPE_CHECKING:
    from scalegen.config.logging import ScalegenLogger
    from scalegen.pipeline.context import GenerationContext

logger: ScalegenLogger = get_logger(__name__)


class ResolveNamesStep(BaseStep):
    """Assign one unique display name per type identifier.

    Axes written:
      - names

    Sets:
      - NamesStatus: {RESOLVED, PLACEHOLDERS, EMPTY}
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.NAMES,
            axes_written=(Axis.NAMES,),
        )

    def run(self, ctx: GenerationContext) -> None:
        """Resolve names and store the resolver on ``ctx.names``."""
        ctx.names = NameResolver.from_schema(ctx.schema, ctx.config)

        if not len(ctx.schema) and not ctx.schema.functions:
            ctx.status.names = NamesStatus.EMPTY
            ctx.stop_flow(reason="empty-schema", at_step=self)
            return

        ctx.status.names = (
            NamesStatus.PLACEHOLDERS if ctx.names.placeholders else NamesStatus.RESOLVED
        )
        logger.debug("Resolved %d name(s)", len(ctx.names.names))

    def hint(self, ctx: GenerationContext) -> None:
        """Record a warning per placeholder-named id."""
        if ctx.names is None:
            return
        for type_id in ctx.names.placeholders:
            ctx.diagnostics.add_warning(
                f"undefined type {type_id} named {ctx.names.resolve(type_id)}", type_id=type_id
            )
