# topmark:header:start
#
#   project      : ScaleGen
#   file         : shapes.py
#   file_relpath : src/scalegen/schema/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural shape classification of type definitions.

Every `TypeInfo` falls into exactly one of eight `Shape` members. Six mirror the
definition kinds of the Schema Model; two are structural specializations of a
tagged union that need dedicated names and templates:

    * ``OPTIONAL_WRAPPER``: exactly two variants named ``None`` and ``Some``.
    * ``RESULT_WRAPPER``: exactly two variants named ``Ok`` and ``Err``.

Wrapper detection looks at variant names only, never at the path, so an
``Option<T>`` instantiation is recognized whether or not the schema carries
path information.

The inner type(s) of a wrapper are resolved params-first: bound generic
parameters win over the variant field list; the field list is the fallback.

Dispatch sites over `Shape` end with `assert_never` so a static checker flags
any member that is not handled.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, Final, NoReturn

from scalegen.constants import HASH_ALIAS_WIDTHS
from scalegen.schema.model import (
    ArrayDef,
    CompositeDef,
    PrimitiveDef,
    SequenceDef,
    TupleDef,
    VariantDef,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Collection

    from scalegen.schema.model import TypeInfo

    TypeLookup = Callable[[int], "TypeInfo | None"]

OPTION_VARIANTS: Final[frozenset[str]] = frozenset({"None", "Some"})
RESULT_VARIANTS: Final[frozenset[str]] = frozenset({"Ok", "Err"})

# Source-type-name of a fixed-size byte array, e.g. "[u8; 32]".
BYTE_ARRAY_TYPE_NAME_RE: Final[re.Pattern[str]] = re.compile(r"\[u8;\s*(\d+)\]")


class Shape(str, Enum):
    """The closed set of structural shapes a type definition can take."""

    PRIMITIVE = "primitive"
    COMPOSITE = "composite"
    TAGGED_UNION = "tagged_union"
    SEQUENCE = "sequence"
    FIXED_ARRAY = "fixed_array"
    TUPLE = "tuple"
    OPTIONAL_WRAPPER = "optional_wrapper"
    RESULT_WRAPPER = "result_wrapper"


def assert_never(value: NoReturn) -> NoReturn:
    """Mark an unreachable branch of an exhaustive dispatch.

    Static checkers reject calls whose argument type is not ``Never``, so a new
    `Shape` member (or `TypeDef` kind) that is not handled surfaces as a type error.

    Raises:
        AssertionError: Always, if reached at runtime.
    """
    raise AssertionError(f"Unhandled shape: {value!r}")


def _has_exact_variants(definition: VariantDef, expected: frozenset[str]) -> bool:
    names: tuple[str, ...] = definition.variant_names
    return len(names) == len(expected) and frozenset(names) == expected


def is_option_variant(definition: VariantDef) -> bool:
    """Return True if the tagged union is shaped as ``{None, Some}``."""
    return _has_exact_variants(definition, OPTION_VARIANTS)


def is_result_variant(definition: VariantDef) -> bool:
    """Return True if the tagged union is shaped as ``{Ok, Err}``."""
    return _has_exact_variants(definition, RESULT_VARIANTS)


def classify(info: TypeInfo) -> Shape:
    """Return the structural shape of a type entry.

    Args:
        info (TypeInfo): The entry to classify.

    Returns:
        Shape: Exactly one of the eight shapes. Result wrappers are checked
        before optional wrappers; the two variant sets are disjoint, so the
        order never changes the outcome.
    """
    definition = info.definition
    if isinstance(definition, PrimitiveDef):
        return Shape.PRIMITIVE
    if isinstance(definition, CompositeDef):
        return Shape.COMPOSITE
    if isinstance(definition, VariantDef):
        if is_result_variant(definition):
            return Shape.RESULT_WRAPPER
        if is_option_variant(definition):
            return Shape.OPTIONAL_WRAPPER
        return Shape.TAGGED_UNION
    if isinstance(definition, SequenceDef):
        return Shape.SEQUENCE
    if isinstance(definition, ArrayDef):
        return Shape.FIXED_ARRAY
    if isinstance(definition, TupleDef):
        return Shape.TUPLE
    assert_never(definition)


def _first_field_type(definition: VariantDef, variant_name: str) -> int | None:
    variant = definition.find(variant_name)
    if variant is None or not variant.fields:
        return None
    return variant.fields[0].type


def option_inner_type(info: TypeInfo) -> int | None:
    """Return the wrapped type of an optional wrapper, params-first.

    Returns:
        int | None: The first generic parameter when bound, else the type of the
        ``Some`` variant's first field, else ``None`` (the emitter substitutes the
        text type).
    """
    if info.params and info.params[0].type is not None:
        return info.params[0].type
    definition = info.definition
    if isinstance(definition, VariantDef):
        return _first_field_type(definition, "Some")
    return None


def result_inner_types(info: TypeInfo) -> tuple[int | None, int | None]:
    """Return the ``(ok, err)`` types of a result wrapper, params-first.

    Both generic parameters must be bound for the params route to be taken;
    otherwise each side comes from the first field of its variant (``None``
    when the variant carries no field).
    """
    if len(info.params) >= 2 and info.params[0].type is not None and info.params[1].type is not None:
        return info.params[0].type, info.params[1].type
    definition = info.definition
    if isinstance(definition, VariantDef):
        return _first_field_type(definition, "Ok"), _first_field_type(definition, "Err")
    return None, None


def wrapper_inner_types(info: TypeInfo) -> tuple[int | None, ...]:
    """Return the inner type(s) of a wrapper shape.

    Returns:
        tuple[int | None, ...]: ``(inner,)`` for an optional wrapper,
        ``(ok, err)`` for a result wrapper, and ``()`` for any other shape.
    """
    shape: Shape = classify(info)
    if shape is Shape.OPTIONAL_WRAPPER:
        return (option_inner_type(info),)
    if shape is Shape.RESULT_WRAPPER:
        return result_inner_types(info)
    return ()


def is_fixed_bytes_wrapper(
    info: TypeInfo,
    lookup: TypeLookup,
    hash_aliases: Collection[str],
) -> bool:
    """Return True if a composite should be emitted as a fixed-width byte wrapper.

    A composite qualifies when its path names a known hash alias (``H160``...),
    or when it has exactly one field whose source-type-name reads ``[u8; N]`` or
    whose own definition is a fixed array.
    """
    definition = info.definition
    if not isinstance(definition, CompositeDef):
        return False
    if info.base_name is not None and info.base_name in hash_aliases:
        return True
    if len(definition.fields) != 1:
        return False
    only = definition.fields[0]
    if only.type_name and BYTE_ARRAY_TYPE_NAME_RE.search(only.type_name):
        return True
    inner: TypeInfo | None = lookup(only.type)
    return inner is not None and isinstance(inner.definition, ArrayDef)


def fixed_bytes_length(
    info: TypeInfo,
    lookup: TypeLookup,
    hash_aliases: Collection[str],
) -> int | None:
    """Return the element count of a fixed-width byte wrapper.

    The single field's array definition wins; then the count spelled in its
    ``[u8; N]`` source-type-name; then the width of a well-known hash alias.

    Returns:
        int | None: The element count, or ``None`` when ``info`` is not a
        fixed-bytes wrapper or no length can be determined.
    """
    if not is_fixed_bytes_wrapper(info, lookup, hash_aliases):
        return None
    definition = info.definition
    assert isinstance(definition, CompositeDef)  # guaranteed by is_fixed_bytes_wrapper
    if len(definition.fields) == 1:
        only = definition.fields[0]
        inner: TypeInfo | None = lookup(only.type)
        if inner is not None and isinstance(inner.definition, ArrayDef):
            return inner.definition.len
        match = BYTE_ARRAY_TYPE_NAME_RE.search(only.type_name or "")
        if match is not None:
            return int(match.group(1))
    if info.base_name is not None:
        return HASH_ALIAS_WIDTHS.get(info.base_name)
    return None
