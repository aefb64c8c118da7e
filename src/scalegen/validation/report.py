# topmark:header:start
#
#   project      : ScaleGen
#   file         : report.py
#   file_relpath : src/scalegen/validation/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structured validation report for one schema.

Generation never fails on missing references or dependency cycles; it degrades
to placeholder names and an unordered tail. `ValidationReport` makes each such
degradation observable so callers can reject a malformed schema themselves.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from scalegen.config.logging import get_logger
from scalegen.diagnostic.model import DiagnosticLog, FrozenDiagnosticLog
from scalegen.schema.model import TupleDef

if TYPE_CHECKING:
    from collections.abc import Mapping

    from scalegen.config.logging import ScalegenLogger
    from scalegen.resolver.names import NameResolver
    from scalegen.resolver.ordering import Ordering
    from scalegen.schema.model import Schema

logger: ScalegenLogger = get_logger(__name__)


@dataclass(frozen=True)
class ValidationReport:
    """Consistency facts derived from a schema, its names and its ordering.

    Attributes:
        placeholder_ids (tuple[int, ...]): Referenced ids with no definition.
        cycle_broken_ids (tuple[int, ...]): Ids placed after the ordering queue
            drained (members and dependents of dependency cycles).
        duplicate_function_names (tuple[str, ...]): Function names declared more
            than once, in first-seen order.
        unknown_function_refs (Mapping[str, tuple[int, ...]]): Function name to
            the parameter/return ids it references that are not defined.
        unit_type_ids (tuple[int, ...]): Ids of empty tuples (all share the unit name).
        type_count (int): Number of type entries.
        function_count (int): Number of function signatures.
        diagnostics (FrozenDiagnosticLog): One diagnostic per finding.
    """

    placeholder_ids: tuple[int, ...] = ()
    cycle_broken_ids: tuple[int, ...] = ()
    duplicate_function_names: tuple[str, ...] = ()
    unknown_function_refs: Mapping[str, tuple[int, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    unit_type_ids: tuple[int, ...] = ()
    type_count: int = 0
    function_count: int = 0
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    @property
    def is_clean(self) -> bool:
        """Return True when no warning or error was recorded."""
        stats = self.diagnostics.stats()
        return stats.n_warning == 0 and stats.n_error == 0

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly representation of this report."""
        return {
            "clean": self.is_clean,
            "type_count": self.type_count,
            "function_count": self.function_count,
            "placeholder_ids": list(self.placeholder_ids),
            "cycle_broken_ids": list(self.cycle_broken_ids),
            "duplicate_function_names": list(self.duplicate_function_names),
            "unknown_function_refs": {k: list(v) for k, v in self.unknown_function_refs.items()},
            "unit_type_ids": list(self.unit_type_ids),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "diagnostic_counts": self.diagnostics.to_dict(),
        }


def build_validation_report(
    schema: Schema,
    names: NameResolver,
    ordering: Ordering,
) -> ValidationReport:
    """Derive the validation report for one run.

    Args:
        schema (Schema): The Schema Model.
        names (NameResolver): The run's resolver (source of placeholder ids).
        ordering (Ordering): The run's ordering (source of cycle-broken ids).

    Returns:
        ValidationReport: The frozen report.
    """
    log = DiagnosticLog()

    for type_id in names.placeholders:
        log.add_warning(
            f"type {type_id} is referenced but not defined; named {names.resolve(type_id)}",
            type_id=type_id,
        )
    for type_id in ordering.cycle_broken:
        log.add_warning(
            f"type {type_id} ({names.resolve(type_id)}) is part of a dependency cycle; "
            "emitted out of order",
            type_id=type_id,
        )

    name_counts: Counter[str] = Counter(fn.name for fn in schema.functions)
    duplicates: tuple[str, ...] = tuple(
        dict.fromkeys(fn.name for fn in schema.functions if name_counts[fn.name] > 1)
    )
    for name in duplicates:
        log.add_warning(f"function {name!r} is declared {name_counts[name]} times")

    unknown_refs: dict[str, tuple[int, ...]] = {}
    for fn in schema.functions:
        missing: tuple[int, ...] = tuple(
            dict.fromkeys(t for t in (*fn.param_types, fn.return_type) if t not in schema)
        )
        if missing:
            unknown_refs.setdefault(fn.name, missing)
            log.add_warning(
                f"function {fn.name!r} references undefined type(s) "
                f"{', '.join(str(t) for t in missing)}"
            )

    unit_ids: tuple[int, ...] = tuple(
        info.id
        for info in schema
        if isinstance(info.definition, TupleDef) and not info.definition.types
    )

    log.add_info(f"{len(schema)} type(s), {len(schema.functions)} function(s)")

    report = ValidationReport(
        placeholder_ids=names.placeholders,
        cycle_broken_ids=ordering.cycle_broken,
        duplicate_function_names=duplicates,
        unknown_function_refs=MappingProxyType(unknown_refs),
        unit_type_ids=unit_ids,
        type_count=len(schema),
        function_count=len(schema.functions),
        diagnostics=log.freeze(),
    )
    logger.debug("Validation report: clean=%s, %d diagnostic(s)", report.is_clean, len(log))
    return report
