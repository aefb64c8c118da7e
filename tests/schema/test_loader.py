# topmark:header:start
#
#   project      : ScaleGen
#   file         : test_loader.py
#   file_relpath : tests/schema/test_loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Schema loading: accepted document shapes and structural errors."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from scalegen.core.errors import SchemaError
from scalegen.schema.loader import load_schema, load_schema_file, load_schema_text
from scalegen.schema.model import (
    ArrayDef,
    CompositeDef,
    Field,
    PrimitiveDef,
    SequenceDef,
    TupleDef,
    TypeParam,
    VariantDef,
)
from tests.conftest import composite, function, parametrize, prim, tuple_, variant

if TYPE_CHECKING:
    from pathlib import Path


def test_flat_entries_keep_input_order() -> None:
    """Type entries are kept in input order, not sorted by id."""
    schema = load_schema({"types": [prim(9, "u32"), prim(2, "bool"), tuple_(5, [])]})

    assert schema.ids == (9, 2, 5)
    assert len(schema) == 3
    assert 2 in schema and 3 not in schema
    assert schema.get(3) is None


def test_all_definition_kinds_are_decoded() -> None:
    """Each of the six ``def`` keys maps to its definition class."""
    schema = load_schema(
        {
            "types": [
                prim(0, "u8"),
                composite(1, [{"name": "x", "type": 0, "typeName": "u8"}]),
                variant(2, [{"name": "A"}, {"name": "B", "fields": [{"type": 0}]}]),
                {"id": 3, "def": {"sequence": {"type": 0}}},
                {"id": 4, "def": {"array": {"len": 32, "type": 0}}},
                tuple_(5, [0, 1]),
            ]
        }
    )

    assert schema.get(0).definition == PrimitiveDef("u8")  # type: ignore[union-attr]
    assert schema.get(1).definition == CompositeDef(  # type: ignore[union-attr]
        fields=(Field(type=0, name="x", type_name="u8"),)
    )
    union = schema.get(2).definition  # type: ignore[union-attr]
    assert isinstance(union, VariantDef)
    assert union.variant_names == ("A", "B")
    assert union.variants[1].index == 1
    assert union.variants[0].fields == ()
    assert schema.get(3).definition == SequenceDef(type=0)  # type: ignore[union-attr]
    assert schema.get(4).definition == ArrayDef(len=32, type=0)  # type: ignore[union-attr]
    assert schema.get(5).definition == TupleDef(types=(0, 1))  # type: ignore[union-attr]


def test_nested_registry_entries_are_accepted() -> None:
    """``{"id", "type": {"def", "path", "params"}}`` entries load like flat ones."""
    schema = load_schema(
        {
            "types": [
                {"id": 0, "type": {"def": {"primitive": "u32"}}},
                {
                    "id": 1,
                    "ty": {
                        "path": ["pkg", "Foo"],
                        "params": [{"name": "T", "type": 0}],
                        "def": {"composite": {"fields": []}},
                    },
                },
            ]
        }
    )

    info = schema.get(1)
    assert info is not None
    assert info.path == ("pkg", "Foo")
    assert info.base_name == "Foo"
    assert info.params == (TypeParam(name="T", type=0),)


def test_params_without_type_are_unbound() -> None:
    """A generic parameter with no ``type`` is kept, unbound."""
    schema = load_schema({"types": [composite(1, [], params=[{"name": "T"}])]})

    info = schema.get(1)
    assert info is not None
    assert info.params == (TypeParam(name="T", type=None),)


def test_functions_are_loaded_in_order() -> None:
    """Function signatures keep their input order and parameter order."""
    schema = load_schema(
        {"functions": [function("b", [3, 1], 2, method="post"), function("a", [], 0)]}
    )

    assert [fn.name for fn in schema.functions] == ["b", "a"]
    assert schema.functions[0].method == "post"
    assert schema.functions[0].param_types == (3, 1)
    assert schema.functions[1].return_type == 0


def test_missing_sections_default_to_empty() -> None:
    """An empty document is a valid, empty schema."""
    schema = load_schema({})

    assert len(schema) == 0
    assert schema.functions == ()


@parametrize(
    "document, location",
    [
        ([], "/"),
        ({"types": {}}, "/types"),
        ({"types": [{"def": {"primitive": "u8"}}]}, "/types/0"),
        ({"types": [{"id": "1", "def": {"primitive": "u8"}}]}, "/types/0/id"),
        ({"types": [{"id": True, "def": {"primitive": "u8"}}]}, "/types/0/id"),
        ({"types": [{"id": 1, "def": {}}]}, "/types/0/def"),
        ({"types": [{"id": 1, "def": {"primitive": "u8", "tuple": []}}]}, "/types/0/def"),
        ({"types": [{"id": 1, "def": {"array": {"len": -1, "type": 0}}}]}, "/types/0/def/array/len"),
        (
            {"types": [{"id": 1, "def": {"composite": {"fields": [{"name": "x"}]}}}]},
            "/types/0/def/composite/fields/0",
        ),
        ({"functions": [{"name": "f", "param_types": [], "return_type": 0}]}, "/functions/0"),
        (
            {"functions": [{"method": "m", "name": "f", "param_types": ["x"], "return_type": 0}]},
            "/functions/0/param_types/0",
        ),
    ],
)
def test_structural_errors_carry_a_location(document: Any, location: str) -> None:
    """Malformed documents raise SchemaError pointing at the offending value."""
    with pytest.raises(SchemaError) as excinfo:
        load_schema(document)

    assert excinfo.value.location == location
    assert str(excinfo.value).startswith(location)


def test_duplicate_type_id_is_rejected() -> None:
    """Type identifiers must be unique."""
    with pytest.raises(SchemaError, match="duplicate type id 1"):
        load_schema({"types": [prim(1, "u8"), prim(1, "u16")]})


def test_invalid_json_text() -> None:
    """Undecodable JSON is reported as a SchemaError, not a JSONDecodeError."""
    with pytest.raises(SchemaError, match="invalid JSON"):
        load_schema_text("{ not json")


def test_load_schema_file(tmp_path: Path) -> None:
    """A JSON file on disk loads through the same path as text."""
    path: Path = tmp_path / "schema.json"
    path.write_text(json.dumps({"types": [prim(0, "str")]}), encoding="utf-8")

    schema = load_schema_file(path)
    assert schema.ids == (0,)


def test_load_schema_file_missing_raises_oserror(tmp_path: Path) -> None:
    """File acquisition failures propagate as OSError."""
    with pytest.raises(FileNotFoundError):
        load_schema_file(tmp_path / "missing.json")
