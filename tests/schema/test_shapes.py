# topmark:header:start
#
#   project      : ScaleGen
#   file         : test_shapes.py
#   file_relpath : tests/schema/test_shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural shape classification and wrapper inner-type resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from scalegen.schema.shapes import (
    Shape,
    classify,
    fixed_bytes_length,
    is_fixed_bytes_wrapper,
    option_inner_type,
    result_inner_types,
    wrapper_inner_types,
)
from tests.conftest import array, composite, make_schema, parametrize, prim, sequence, tuple_, variant

HASH_ALIAS_DEFAULTS: tuple[str, ...] = ("H160", "H256", "H512")

if TYPE_CHECKING:
    from scalegen.schema.model import Schema, TypeInfo


def _info(schema: Schema, type_id: int) -> TypeInfo:
    info: TypeInfo | None = schema.get(type_id)
    assert info is not None
    return info


@parametrize(
    "entry, expected",
    [
        (prim(1, "u32"), Shape.PRIMITIVE),
        (composite(1, [{"type": 0}]), Shape.COMPOSITE),
        (variant(1, [{"name": "A"}, {"name": "B"}]), Shape.TAGGED_UNION),
        (variant(1, [{"name": "None"}, {"name": "Some", "fields": [{"type": 0}]}]), Shape.OPTIONAL_WRAPPER),
        (variant(1, [{"name": "Ok", "fields": [{"type": 0}]}, {"name": "Err"}]), Shape.RESULT_WRAPPER),
        (variant(1, [{"name": "Err"}, {"name": "Ok"}]), Shape.RESULT_WRAPPER),
        (variant(1, [{"name": "None"}, {"name": "Some"}, {"name": "Other"}]), Shape.TAGGED_UNION),
        (variant(1, [{"name": "Ok"}]), Shape.TAGGED_UNION),
        (sequence(1, 0), Shape.SEQUENCE),
        (array(1, 4, 0), Shape.FIXED_ARRAY),
        (tuple_(1, []), Shape.TUPLE),
    ],
)
def test_classify(entry: dict[str, Any], expected: Shape) -> None:
    """Every entry maps to exactly one shape; wrappers need exactly two variants."""
    assert classify(_info(make_schema([entry]), 1)) is expected


def test_option_inner_prefers_bound_params() -> None:
    """A bound generic parameter wins over the ``Some`` field type."""
    schema = make_schema(
        [
            variant(
                5,
                [{"name": "None"}, {"name": "Some", "fields": [{"type": 2}]}],
                params=[{"name": "T", "type": 3}],
            )
        ]
    )
    assert option_inner_type(_info(schema, 5)) == 3


def test_option_inner_falls_back_to_field() -> None:
    """Without params the ``Some`` variant's first field gives the inner type."""
    schema = make_schema([variant(5, [{"name": "None"}, {"name": "Some", "fields": [{"type": 2}]}])])
    assert option_inner_type(_info(schema, 5)) == 2


def test_option_inner_unbound_param_falls_back_to_field() -> None:
    """An unbound parameter is ignored."""
    schema = make_schema(
        [
            variant(
                5,
                [{"name": "None"}, {"name": "Some", "fields": [{"type": 2}]}],
                params=[{"name": "T"}],
            )
        ]
    )
    assert option_inner_type(_info(schema, 5)) == 2


def test_option_inner_absent() -> None:
    """A fieldless ``Some`` with no params has no inner type."""
    schema = make_schema([variant(5, [{"name": "None"}, {"name": "Some"}])])
    assert option_inner_type(_info(schema, 5)) is None


def test_result_inner_types_params_and_fields() -> None:
    """Both params must be bound to win; otherwise each side comes from its variant."""
    variants: list[dict[str, Any]] = [
        {"name": "Ok", "fields": [{"type": 10}]},
        {"name": "Err", "fields": [{"type": 11}]},
    ]
    schema = make_schema(
        [
            variant(1, variants, params=[{"name": "T", "type": 20}, {"name": "E", "type": 21}]),
            variant(2, variants, params=[{"name": "T", "type": 20}, {"name": "E"}]),
            variant(3, [{"name": "Ok"}, {"name": "Err", "fields": [{"type": 11}]}]),
        ]
    )

    assert result_inner_types(_info(schema, 1)) == (20, 21)
    assert result_inner_types(_info(schema, 2)) == (10, 11)
    assert result_inner_types(_info(schema, 3)) == (None, 11)


def test_wrapper_inner_types_is_stable() -> None:
    """Repeated queries return the same answer."""
    schema = make_schema(
        [variant(7, [{"name": "None"}, {"name": "Some", "fields": [{"type": 1}]}])]
    )
    info = _info(schema, 7)

    assert wrapper_inner_types(info) == (1,)
    assert wrapper_inner_types(info) == wrapper_inner_types(info)
    assert wrapper_inner_types(_info(make_schema([prim(7, "u8")]), 7)) == ()


def test_fixed_bytes_from_hash_alias_path() -> None:
    """A composite named after a hash alias is a fixed-bytes wrapper of known width."""
    schema = make_schema([composite(4, [{"type": 9}], path=["primitive_types", "H256"])])
    info = _info(schema, 4)

    assert is_fixed_bytes_wrapper(info, schema.get, HASH_ALIAS_DEFAULTS)
    assert fixed_bytes_length(info, schema.get, HASH_ALIAS_DEFAULTS) == 32


def test_fixed_bytes_from_type_name() -> None:
    """A single ``[u8; N]`` field makes a fixed-bytes wrapper of width N."""
    schema = make_schema([composite(4, [{"type": 9, "typeName": "[u8; 20]"}], path=["pkg", "Key"])])
    info = _info(schema, 4)

    assert fixed_bytes_length(info, schema.get, HASH_ALIAS_DEFAULTS) == 20


def test_fixed_bytes_array_definition_wins() -> None:
    """The inner array length takes precedence over the type name and the alias width."""
    schema = make_schema(
        [
            prim(0, "u8"),
            array(1, 16, 0),
            composite(4, [{"type": 1, "typeName": "[u8; 20]"}], path=["pkg", "H256"]),
        ]
    )
    assert fixed_bytes_length(_info(schema, 4), schema.get, HASH_ALIAS_DEFAULTS) == 16


def test_not_fixed_bytes() -> None:
    """Multi-field composites and other shapes are not byte wrappers."""
    schema = make_schema(
        [
            prim(0, "u8"),
            composite(4, [{"type": 0}, {"type": 0}], path=["pkg", "Pair"]),
            composite(5, [{"type": 0, "typeName": "u8"}]),
        ]
    )

    assert not is_fixed_bytes_wrapper(_info(schema, 4), schema.get, HASH_ALIAS_DEFAULTS)
    assert not is_fixed_bytes_wrapper(_info(schema, 5), schema.get, HASH_ALIAS_DEFAULTS)
    assert fixed_bytes_length(_info(schema, 0), schema.get, HASH_ALIAS_DEFAULTS) is None
