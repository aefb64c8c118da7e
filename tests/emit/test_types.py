# topmark:header:start
#
#   project      : ScaleGen
#   file         : test_types.py
#   file_relpath : tests/emit/test_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type Emitter: exact block text per shape and per-name idempotence."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from scalegen.emit.types import SHAPE_RENDERERS, EmissionAccumulator, TypeEmitter
from scalegen.resolver.names import NameResolver
from scalegen.schema.shapes import Shape
from tests.conftest import (
    array,
    composite,
    make_config,
    make_schema,
    prim,
    sequence,
    tuple_,
    variant,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from scalegen.config.model import Config


def _emit_one(
    types: Sequence[dict[str, Any]], type_id: int, config: Config | None = None
) -> str | None:
    cfg: Config = config or make_config()
    schema = make_schema(types)
    emitter = TypeEmitter(schema, NameResolver.from_schema(schema, cfg), cfg)
    info = schema.get(type_id)
    assert info is not None
    return emitter.emit(type_id, info, EmissionAccumulator())


def test_every_shape_has_a_renderer() -> None:
    """The dispatch table is total over Shape."""
    assert set(SHAPE_RENDERERS) == set(Shape)


def test_primitive_emits_nothing() -> None:
    """Primitives map to library codecs and never yield a block."""
    assert _emit_one([prim(5, "bool")], 5) is None


def test_struct_block() -> None:
    """A single-field composite renders a Struct subclass referencing ``bool``."""
    block = _emit_one(
        [prim(5, "bool"), composite(7, [{"name": "x", "type": 5}], path=["pkg", "Foo"])], 7
    )
    assert block == (
        "export class Foo extends Struct {\n"
        "  constructor(registry: Registry, value?: any) {\n"
        "    super(registry, {\n"
        "    x: bool,\n"
        "    }, value);\n"
        "  }\n"
        "}"
    )


def test_struct_unnamed_fields_are_positional() -> None:
    """Fields without a name are labelled ``field<i>``."""
    block = _emit_one(
        [prim(0, "u32"), prim(1, "str"), composite(2, [{"type": 0}, {"type": 1}], path=["Pair"])],
        2,
    )
    assert block is not None
    assert "    field0: u32,\n    field1: Text,\n" in block


def test_fixed_bytes_block() -> None:
    """Byte wrappers and plain arrays render as U8aFixed with a bit length."""
    hashed = _emit_one([prim(0, "u8"), composite(3, [{"type": 0}], path=["primitive_types", "H160"])], 3)
    arr = _emit_one([prim(0, "u8"), array(4, 32, 0)], 4)

    assert hashed == "export const H160 = U8aFixed.with(160 as U8aBitLength);"
    assert arr == "export const U8Array32 = U8aFixed.with(256 as U8aBitLength);"


def test_enum_block_variant_forms() -> None:
    """Unit, alias, single named field and multi-field variants."""
    block = _emit_one(
        [
            prim(0, "u32"),
            prim(1, "str"),
            variant(
                9,
                [
                    {"name": "Idle"},
                    {"name": "Count", "fields": [{"type": 0}]},
                    {"name": "Named", "fields": [{"name": "label", "type": 1}]},
                    {"name": "Both", "fields": [{"name": "a", "type": 0}, {"name": "b", "type": 1}]},
                ],
                path=["pkg", "State"],
            ),
        ],
        9,
    )
    assert block == (
        "export class State extends Enum {\n"
        "  constructor(registry: Registry, value?: any) {\n"
        "    super(registry, {\n"
        "      Idle: Null,\n"
        "      Count: u32,\n"
        "      Named: Struct.with({\n"
        "        label: Text\n"
        "      }),\n"
        "      Both: Struct.with({\n"
        "        a: u32,\n"
        "        b: Text,\n"
        "      }),\n"
        "    }, value);\n"
        "  }\n"
        "}"
    )


def test_option_block_uses_resolved_inner_name() -> None:
    """A None/Some union without params wraps the resolved name of its Some field."""
    block = _emit_one(
        [
            composite(3, [], path=["pkg", "Thing"]),
            variant(6, [{"name": "None"}, {"name": "Some", "fields": [{"type": 3}]}]),
        ],
        6,
    )
    assert block == (
        "export class CustomOption6 extends Option.with(Thing) {\n"
        "  constructor(registry: Registry, value?: any) {\n"
        "    super(registry, value);\n"
        "  }\n"
        "}"
    )


def test_option_without_inner_defaults_to_text() -> None:
    """A wrapper with nothing to wrap falls back to the text type."""
    block = _emit_one([variant(6, [{"name": "None"}, {"name": "Some"}])], 6)
    assert block is not None
    assert block.startswith("export class CustomOption6 extends Option.with(Text) {")


def test_result_block() -> None:
    """Result wrappers render both sides; a missing Ok side is the unit type."""
    full = _emit_one(
        [
            prim(0, "u64"),
            prim(1, "str"),
            variant(8, [{"name": "Ok", "fields": [{"type": 0}]}, {"name": "Err", "fields": [{"type": 1}]}]),
        ],
        8,
    )
    unit_ok = _emit_one(
        [prim(1, "str"), variant(8, [{"name": "Ok"}, {"name": "Err", "fields": [{"type": 1}]}])], 8
    )

    assert full is not None and unit_ok is not None
    assert full.splitlines()[0] == "export class CustomResult8 extends Result.with({ Ok: u64, Err: Text }) {"
    assert unit_ok.splitlines()[0] == "export class CustomResult8 extends Result.with({ Ok: Null, Err: Text }) {"


def test_sequence_and_tuple_blocks() -> None:
    """Sequences and non-empty tuples are constant aliases."""
    types = [prim(0, "u8"), prim(1, "bool"), sequence(2, 0), tuple_(3, [0, 1])]

    assert _emit_one(types, 2) == "export const Vecu8 = Vec.with(u8);"
    assert _emit_one(types, 3) == "export const TupleType3 = Tuple.with([u8, bool]);"


def test_unit_tuple_emits_nothing() -> None:
    """The empty tuple is the library's unit codec."""
    assert _emit_one([tuple_(1, [])], 1) is None


def test_placeholder_references() -> None:
    """References to undefined ids use the placeholder name."""
    block = _emit_one([composite(2, [{"name": "x", "type": 99}], path=["Holder"])], 2)
    assert block is not None
    assert "    x: Type99,\n" in block


def test_emission_is_idempotent_per_name() -> None:
    """Emitting the same id twice through one accumulator yields one block."""
    cfg = make_config()
    schema = make_schema([prim(0, "u8"), sequence(1, 0)])
    emitter = TypeEmitter(schema, NameResolver.from_schema(schema, cfg), cfg)
    info = schema.get(1)
    assert info is not None
    seen = EmissionAccumulator()

    first = emitter.emit(1, info, seen)
    second = emitter.emit(1, info, seen)

    assert first == "export const Vecu8 = Vec.with(u8);"
    assert second is None
    assert list(seen) == [first]
    assert "Vecu8" in seen
    assert len(seen) == 1


def test_custom_unit_and_hash_aliases() -> None:
    """Unit name and hash alias set come from the configuration."""
    config = make_config(unit_name="Unit", hash_aliases=("Digest",))
    block = _emit_one(
        [prim(0, "u8"), composite(3, [{"type": 0}], path=["pkg", "Digest"]), variant(4, [{"name": "A"}], path=["E"])],
        4,
        config,
    )
    assert block is not None
    assert "      A: Unit,\n" in block
    # Without a length source a configured alias is emitted as a plain struct.
    digest = _emit_one([prim(0, "u8"), composite(3, [{"type": 0}], path=["pkg", "Digest"])], 3, config)
    assert digest is not None
    assert digest.startswith("export class Digest extends Struct {")
