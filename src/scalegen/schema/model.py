# topmark:header:start
#
#   project      : ScaleGen
#   file         : model.py
#   file_relpath : src/scalegen/schema/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory Schema Model: type definitions and function signatures.

The model is a faithful, immutable image of the input schema:

    * `TypeDef`: closed union of the six structural definition kinds
      (`PrimitiveDef`, `CompositeDef`, `VariantDef`, `SequenceDef`,
      `ArrayDef`, `TupleDef`).
    * `TypeInfo`: one registry entry (id + definition + optional path/params).
    * `FunctionInfo`: one remote-callable function signature.
    * `Schema`: the insertion-ordered ``id -> TypeInfo`` mapping plus the
      ordered function list.

Instances are populated once by [`scalegen.schema.loader`][scalegen.schema.loader]
and never mutated afterwards. Structural shape classification (including the
optional/result wrapper shapes) lives in [`scalegen.schema.shapes`][scalegen.schema.shapes].
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping


@dataclass(frozen=True, slots=True)
class Field:
    """A field of a composite or of a variant.

    Attributes:
        type (int): Type identifier of the field's type.
        name (str | None): Field name; ``None`` for positional fields.
        type_name (str | None): Source-type-name string (e.g. ``"[u8; 32]"``).
    """

    type: int
    name: str | None = None
    type_name: str | None = None


@dataclass(frozen=True, slots=True)
class VariantItem:
    """One case of a tagged union."""

    name: str
    index: int
    fields: tuple[Field, ...] = ()


@dataclass(frozen=True, slots=True)
class PrimitiveDef:
    """A leaf numeric / boolean / text kind (``"u32"``, ``"bool"``, ``"str"``...)."""

    name: str


@dataclass(frozen=True, slots=True)
class CompositeDef:
    """A product type ("struct")."""

    fields: tuple[Field, ...] = ()


@dataclass(frozen=True, slots=True)
class VariantDef:
    """A sum type ("enum")."""

    variants: tuple[VariantItem, ...] = ()

    @property
    def variant_names(self) -> tuple[str, ...]:
        """Return the variant names in declaration order."""
        return tuple(v.name for v in self.variants)

    def find(self, name: str) -> VariantItem | None:
        """Return the first variant called ``name``, if any."""
        return next((v for v in self.variants if v.name == name), None)


@dataclass(frozen=True, slots=True)
class SequenceDef:
    """A variable-length homogeneous list."""

    type: int


@dataclass(frozen=True, slots=True)
class ArrayDef:
    """A fixed-length homogeneous list; ``len`` counts elements."""

    len: int
    type: int


@dataclass(frozen=True, slots=True)
class TupleDef:
    """A positional product; the empty tuple is the canonical unit type."""

    types: tuple[int, ...] = ()


TypeDef = Union[PrimitiveDef, CompositeDef, VariantDef, SequenceDef, ArrayDef, TupleDef]


@dataclass(frozen=True, slots=True)
class TypeParam:
    """A generic type argument; ``type`` is ``None`` for an unbound parameter."""

    name: str
    type: int | None = None


@dataclass(frozen=True, slots=True)
class TypeInfo:
    """One entry of the type registry.

    Attributes:
        id (int): Type identifier, unique within the schema.
        definition (TypeDef): Structural definition.
        path (tuple[str, ...]): Namespace segments; the last one is the preferred
            display name. Empty when the schema carries no path.
        params (tuple[TypeParam, ...]): Generic arguments of an instantiated
            generic shape. Empty when absent.
    """

    id: int
    definition: TypeDef
    path: tuple[str, ...] = ()
    params: tuple[TypeParam, ...] = ()

    @property
    def base_name(self) -> str | None:
        """Return the last path segment, or ``None`` when there is no path."""
        return self.path[-1] if self.path else None

    @property
    def is_primitive(self) -> bool:
        """Return True for a primitive definition."""
        return isinstance(self.definition, PrimitiveDef)


@dataclass(frozen=True, slots=True)
class FunctionInfo:
    """A remote-callable function signature.

    Attributes:
        method (str): Dispatch method tag (e.g. ``"get"``, ``"post"``).
        name (str): Function name.
        param_types (tuple[int, ...]): Parameter type identifiers, in order.
        return_type (int): Return type identifier.
    """

    method: str
    name: str
    param_types: tuple[int, ...]
    return_type: int


@dataclass(frozen=True)
class Schema:
    """The complete Schema Model for one generation run.

    ``types`` preserves input order; it is exposed as a read-only mapping.
    """

    types: Mapping[int, TypeInfo] = field(default_factory=lambda: MappingProxyType({}))
    functions: tuple[FunctionInfo, ...] = ()

    @classmethod
    def from_parts(
        cls,
        types: Iterable[TypeInfo],
        functions: Iterable[FunctionInfo] = (),
    ) -> Schema:
        """Build a schema from type entries (input order kept) and functions.

        A later entry with an id already seen replaces the earlier definition but
        keeps the earlier position, like a dict update. The loader rejects
        duplicate ids before reaching this point.
        """
        table: dict[int, TypeInfo] = {}
        for info in types:
            table[info.id] = info
        return cls(types=MappingProxyType(table), functions=tuple(functions))

    def get(self, type_id: int) -> TypeInfo | None:
        """Return the entry for ``type_id``, or ``None`` when it is not defined."""
        return self.types.get(type_id)

    @property
    def ids(self) -> tuple[int, ...]:
        """Return all type identifiers in input order."""
        return tuple(self.types)

    def __contains__(self, type_id: object) -> bool:
        return type_id in self.types

    def __iter__(self) -> Iterator[TypeInfo]:
        return iter(self.types.values())

    def __len__(self) -> int:
        return len(self.types)
