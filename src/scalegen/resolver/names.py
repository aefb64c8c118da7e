# topmark:header:start
#
#   project      : ScaleGen
#   file         : names.py
#   file_relpath : src/scalegen/resolver/names.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Name Resolver: one unique, stable display name per type identifier.

The resolver runs a single name-analysis pass over the schema in population
order and is immutable afterwards. Each id is named by the first matching rule:

    1. result wrapper (``{Ok, Err}``)          -> ``CustomResult<id>``
    2. optional wrapper (``{None, Some}``)     -> ``CustomOption<id>``
    3. path present                            -> last segment, with ``<id>`` appended
       when the entry carries generic params or another id shares that segment
    4. primitive                               -> primitive lexicon (``str`` -> ``Text``)
    5. fixed array                             -> ``U8Array<len>``
    6. sequence                                -> ``Vec<element name>``
    7. tuple                                   -> unit name when empty, else ``TupleType<id>``
    8. anything else                           -> ``Type<id>``

Synthetic names built from content rather than from the id (``U8Array32``,
``VecFoo``...) can be claimed by several ids. The first id to claim a name keeps
it; a later claimant gets ``_<id>`` appended. The unit name belongs to the path-less
empty tuples, which all share it; any other type whose name would be the unit
name gets the suffix. A path-less primitive always keeps its lexicon name since
primitives are library codecs that are never emitted.

Referenced ids that have no definition resolve to ``Type<id>`` and are listed in
`NameResolver.placeholders`.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from scalegen.config.logging import get_logger
from scalegen.constants import PRIMITIVE_NAMES
from scalegen.schema.model import (
    ArrayDef,
    CompositeDef,
    PrimitiveDef,
    SequenceDef,
    TupleDef,
    VariantDef,
)
from scalegen.schema.shapes import Shape, classify

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from scalegen.config.logging import ScalegenLogger
    from scalegen.config.model import Config
    from scalegen.schema.model import Schema, TypeInfo

logger: ScalegenLogger = get_logger(__name__)


def referenced_ids(info: TypeInfo) -> Iterator[int]:
    """Yield every type id referenced by an entry, params included, in declaration order."""
    definition = info.definition
    if isinstance(definition, CompositeDef):
        for f in definition.fields:
            yield f.type
    elif isinstance(definition, VariantDef):
        for variant in definition.variants:
            for f in variant.fields:
                yield f.type
    elif isinstance(definition, (SequenceDef, ArrayDef)):
        yield definition.type
    elif isinstance(definition, TupleDef):
        yield from definition.types
    for param in info.params:
        if param.type is not None:
            yield param.type


def _collect_missing(schema: Schema) -> tuple[int, ...]:
    """Return ids referenced by types or functions but absent from the schema.

    The result is deduplicated and ordered by first reference.
    """
    missing: dict[int, None] = {}
    for info in schema:
        for ref in referenced_ids(info):
            if ref not in schema:
                missing.setdefault(ref)
    for fn in schema.functions:
        for ref in (*fn.param_types, fn.return_type):
            if ref not in schema:
                missing.setdefault(ref)
    return tuple(missing)


def _is_unit_tuple(info: TypeInfo) -> bool:
    return isinstance(info.definition, TupleDef) and not info.definition.types

class _NameBuilder:
    """Single-use helper performing the name-analysis pass for one schema."""

    def __init__(self, schema: Schema, config: Config) -> None:
        self.schema = schema
        self.config = config
        self.names: dict[int, str] = {}
        self.owners: dict[str, int] = {}
        self.in_progress: set[int] = set()
        self.base_counts: Counter[str] = Counter(
            info.base_name for info in schema if info.base_name is not None
        )

    def placeholder(self, type_id: int) -> str:
        return f"{self.config.placeholder_prefix}{type_id}"

    def build(self) -> dict[int, str]:
        for info in self.schema:
            self.name_of(info.id)
        return self.names

    def name_of(self, type_id: int) -> str:
        """Return the final name of ``type_id``, computing it on first use."""
        known: str | None = self.names.get(type_id)
        if known is not None:
            return known
        info: TypeInfo | None = self.schema.get(type_id)
        if info is None or type_id in self.in_progress:
            # Unknown id, or a sequence that (indirectly) contains itself.
            return self.placeholder(type_id)

        self.in_progress.add(type_id)
        try:
            candidate: str = self._candidate(info)
        finally:
            self.in_progress.discard(type_id)

        if info.base_name is None and (info.is_primitive or _is_unit_tuple(info)):
            final: str = candidate
        else:
            final = self._claim(type_id, candidate)
        self.names[type_id] = final
        logger.trace("Type %d -> %s", type_id, final)
        return final

    def _claim(self, type_id: int, candidate: str) -> str:
        owner: int | None = self.owners.get(candidate)
        if candidate != self.config.unit_name and (owner is None or owner == type_id):
            self.owners[candidate] = type_id
            return candidate
        unique: str = f"{candidate}_{type_id}"
        while unique in self.owners:
            unique = f"{unique}_{type_id}"
        if owner is None:
            logger.debug("Name %r is the unit name; type %d becomes %r", candidate, type_id, unique)
        else:
            logger.debug(
                "Name %r already taken by type %d; type %d becomes %r", candidate, owner, type_id, unique
            )
        self.owners[unique] = type_id
        return unique

    def _candidate(self, info: TypeInfo) -> str:
        shape: Shape = classify(info)
        if shape is Shape.RESULT_WRAPPER:
            return f"{self.config.result_prefix}{info.id}"
        if shape is Shape.OPTIONAL_WRAPPER:
            return f"{self.config.option_prefix}{info.id}"

        base: str | None = info.base_name
        if base is not None:
            if info.params or self.base_counts[base] > 1:
                return f"{base}{info.id}"
            return base

        definition = info.definition
        if isinstance(definition, PrimitiveDef):
            if definition.name == "str":
                return self.config.text_name
            return PRIMITIVE_NAMES.get(definition.name, definition.name)
        if isinstance(definition, ArrayDef):
            return f"U8Array{definition.len}"
        if isinstance(definition, SequenceDef):
            return f"Vec{self.name_of(definition.type)}"
        if isinstance(definition, TupleDef):
            if not definition.types:
                return self.config.unit_name
            return f"TupleType{info.id}"
        # Composite or plain tagged union without a path.
        return self.placeholder(info.id)


@dataclass(frozen=True)
class NameResolver:
    """Immutable ``type id -> resolved name`` map for one generation run.

    Build it with `NameResolver.from_schema`; `resolve` is total.

    Attributes:
        names (Mapping[int, str]): Resolved names of every defined type id, in
            schema order.
        placeholders (tuple[int, ...]): Referenced ids with no definition; they
            resolve to ``<placeholder_prefix><id>``.
        placeholder_prefix (str): Prefix used for unknown ids.
    """

    names: Mapping[int, str]
    placeholders: tuple[int, ...] = ()
    placeholder_prefix: str = "Type"

    @classmethod
    def from_schema(cls, schema: Schema, config: Config) -> NameResolver:
        """Run the name-analysis pass over ``schema``.

        Args:
            schema (Schema): The Schema Model.
            config (Config): Supplies the naming prefixes, unit and text names.

        Returns:
            NameResolver: The resolver for this run.
        """
        builder = _NameBuilder(schema, config)
        names: dict[int, str] = builder.build()
        ordered: dict[int, str] = {type_id: names[type_id] for type_id in schema.ids}
        placeholders: tuple[int, ...] = _collect_missing(schema)
        if placeholders:
            logger.info("%d referenced type id(s) have no definition", len(placeholders))
        return cls(
            names=MappingProxyType(ordered),
            placeholders=placeholders,
            placeholder_prefix=config.placeholder_prefix,
        )

    def resolve(self, type_id: int) -> str:
        """Return the resolved name of ``type_id``.

        Unknown ids yield the synthetic placeholder name instead of raising.
        """
        name: str | None = self.names.get(type_id)
        if name is None:
            return f"{self.placeholder_prefix}{type_id}"
        return name

    def __contains__(self, type_id: object) -> bool:
        return type_id in self.names
