# topmark:header:start
#
#   project      : ScaleGen
#   file         : validate.py
#   file_relpath : src/scalegen/pipeline/steps/validate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Validation step.

Builds a [`ValidationReport`][scalegen.validation.report.ValidationReport] from
the run's names and ordering. The step is read-only over the schema and runs
even when the flow halted (an empty schema still gets a report); any artifact
an earlier step did not produce is derived locally.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scalegen.config.logging import get_logger
from scalegen.pipeline.status import Axis, ValidationStatus
from scalegen.pipeline.steps.base import BaseStep
from scalegen.resolver.names import NameResolver
from scalegen.resolver.ordering import order_types
from scalegen.validation.report import build_validation_report

if TYPE_CHECKING:
    from scalegen.config.logging import ScalegenLogger
    from scalegen.pipeline.context import GenerationContext

logger: ScalegenLogger = get_logger(__name__)


class ValidateStep(BaseStep):
    """Derive the structured validation report.

    Axes written:
      - validation

    Sets:
      - ValidationStatus: {CLEAN, ISSUES}
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.VALIDATION,
            axes_written=(Axis.VALIDATION,),
        )

    def may_proceed(self, ctx: GenerationContext) -> bool:
        """Always run; validation needs only the schema."""
        return True

    def run(self, ctx: GenerationContext) -> None:
        """Build the validation report, reusing names and ordering when present."""
        names = ctx.names or NameResolver.from_schema(ctx.schema, ctx.config)
        ordering = ctx.ordering or order_types(ctx.schema)
        ctx.report = build_validation_report(ctx.schema, names, ordering)
        ctx.status.validation = (
            ValidationStatus.CLEAN if ctx.report.is_clean else ValidationStatus.ISSUES
        )
        logger.info("Validation: %s", ctx.status.validation.value)
