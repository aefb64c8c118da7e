# topmark:header:start
#
#   project      : ScaleGen
#   file         : context.py
#   file_relpath : src/scalegen/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mutable per-run state flowing through the generation pipeline.

A `GenerationContext` is built fresh for every run and discarded afterwards;
nothing in it is shared between runs. Each step fills in the artifact it owns
(names, ordering, emitted blocks, text, report) and sets its status axis.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from scalegen.config.logging import get_logger
from scalegen.diagnostic.model import DiagnosticLog
from scalegen.emit.naming import heuristic_argument_name
from scalegen.emit.types import EmissionAccumulator
from scalegen.pipeline.status import GenerationStatus

if TYPE_CHECKING:
    from scalegen.config.logging import ScalegenLogger
    from scalegen.config.model import Config
    from scalegen.emit.naming import ArgumentNamer
    from scalegen.pipeline.contracts import Step
    from scalegen.resolver.names import NameResolver
    from scalegen.resolver.ordering import Ordering
    from scalegen.schema.model import Schema
    from scalegen.validation.report import ValidationReport

logger: ScalegenLogger = get_logger(__name__)


@dataclass
class FlowControl:
    """Execution flow control for the current run."""

    halt: bool = False
    reason: str = ""  # short code, e.g. "empty-schema"
    at_step: str = ""  # step name that requested the halt


@dataclass
class GenerationContext:
    """State of one generation run.

    Attributes:
        schema (Schema): The immutable input.
        config (Config): Effective configuration.
        namer (ArgumentNamer): Stub parameter labelling strategy.
        status (GenerationStatus): Per-axis status.
        flow (FlowControl): Halt flag and reason.
        steps (list[Step]): Steps invoked so far, in order.
        diagnostics (DiagnosticLog): Run-level diagnostics.
        names (NameResolver | None): Set by the name resolution step.
        ordering (Ordering | None): Set by the ordering step.
        emitted (EmissionAccumulator): Type blocks emitted so far.
        function_blocks (list[str]): Stub blocks, in input order.
        text (str): The assembled output.
        report (ValidationReport | None): Set by the validation step.
    """

    schema: Schema
    config: Config
    namer: ArgumentNamer = heuristic_argument_name
    status: GenerationStatus = field(default_factory=GenerationStatus)
    flow: FlowControl = field(default_factory=FlowControl)
    steps: list[Step] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)
    names: NameResolver | None = None
    ordering: Ordering | None = None
    emitted: EmissionAccumulator = field(default_factory=EmissionAccumulator)
    function_blocks: list[str] = field(default_factory=lambda: [])
    text: str = ""
    report: ValidationReport | None = None

    def stop_flow(self, reason: str, at_step: Step) -> None:
        """Request a graceful stop for the rest of the pipeline.

        Args:
            reason (str): Short machine-friendly reason code.
            at_step (Step): Step requesting the halt.
        """
        logger.info("Flow halted in %s: %s", at_step.name, reason)
        self.flow = FlowControl(halt=True, reason=reason, at_step=at_step.name)
