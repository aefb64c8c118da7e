# topmark:header:start
#
#   project      : ScaleGen
#   file         : ordering.py
#   file_relpath : src/scalegen/resolver/ordering.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dependency graph and topological emission order.

A type depends on the non-primitive types it directly references: composite
fields, variant fields, the element of a sequence or array, tuple slots and,
for tagged unions only, bound generic parameters.

`order_types` runs Kahn's algorithm with a FIFO queue seeded in input order, so
ready ids keep their relative input order. References to ids missing from the
schema are not edges: they resolve to placeholder names and need no definition.
When the queue drains before every id is placed (a dependency cycle), the
remaining ids are appended in input order and reported in
`Ordering.cycle_broken`. Ordering never raises.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING

from scalegen.config.logging import get_logger
from scalegen.schema.model import (
    ArrayDef,
    CompositeDef,
    SequenceDef,
    TupleDef,
    VariantDef,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from scalegen.config.logging import ScalegenLogger
    from scalegen.schema.model import Schema, TypeInfo

logger: ScalegenLogger = get_logger(__name__)


@dataclass(frozen=True)
class Ordering:
    """Result of `order_types`.

    Attributes:
        order (tuple[int, ...]): Every type id of the schema exactly once.
        cycle_broken (tuple[int, ...]): Ids appended after the queue drained,
            in input order (empty for an acyclic schema).
    """

    order: tuple[int, ...]
    cycle_broken: tuple[int, ...] = ()


def _direct_refs(info: TypeInfo) -> Iterator[int]:
    definition = info.definition
    if isinstance(definition, CompositeDef):
        for f in definition.fields:
            yield f.type
    elif isinstance(definition, VariantDef):
        for variant in definition.variants:
            for f in variant.fields:
                yield f.type
        for param in info.params:
            if param.type is not None:
                yield param.type
    elif isinstance(definition, (SequenceDef, ArrayDef)):
        yield definition.type
    elif isinstance(definition, TupleDef):
        yield from definition.types


def dependencies(info: TypeInfo, schema: Schema) -> tuple[int, ...]:
    """Return the direct, non-primitive dependencies of a type.

    Args:
        info (TypeInfo): The dependent type.
        schema (Schema): Used to tell primitives and undefined ids apart.

    Returns:
        tuple[int, ...]: Dependency ids, deduplicated in first-seen order.
        Primitives and ids missing from ``schema`` are skipped.
    """
    deps: dict[int, None] = {}
    for ref in _direct_refs(info):
        target: TypeInfo | None = schema.get(ref)
        if target is None or target.is_primitive:
            continue
        deps.setdefault(ref)
    return tuple(deps)


def order_types(schema: Schema) -> Ordering:
    """Return an emission order in which dependencies precede dependents.

    Args:
        schema (Schema): The Schema Model.

    Returns:
        Ordering: A permutation of all ids plus the cycle-broken tail.
    """
    deps: dict[int, tuple[int, ...]] = {info.id: dependencies(info, schema) for info in schema}

    in_degree: dict[int, int] = {}
    dependents: dict[int, list[int]] = {}
    for type_id, type_deps in deps.items():
        in_degree[type_id] = len(type_deps)
        for dep in type_deps:
            # Appended in input order of the dependent.
            dependents.setdefault(dep, []).append(type_id)

    queue: deque[int] = deque(type_id for type_id, degree in in_degree.items() if degree == 0)
    order: list[int] = []
    while queue:
        current: int = queue.popleft()
        order.append(current)
        for dependent in dependents.get(current, ()):
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                queue.append(dependent)

    placed: set[int] = set(order)
    tail: tuple[int, ...] = tuple(type_id for type_id in schema.ids if type_id not in placed)
    if tail:
        logger.info("Dependency cycle: %d type(s) appended unordered", len(tail))
        logger.debug("Cycle-broken type ids: %s", ", ".join(str(t) for t in tail))
    return Ordering(order=(*order, *tail), cycle_broken=tail)
