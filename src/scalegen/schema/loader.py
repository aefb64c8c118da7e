# topmark:header:start
#
#   project      : ScaleGen
#   file         : loader.py
#   file_relpath : src/scalegen/schema/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Schema loading: plain JSON data to the immutable Schema Model.

The loader is the only component that raises for data-shape reasons. Everything
downstream (name resolution, ordering, emission) takes a well-formed
[`Schema`][scalegen.schema.model.Schema] and never fails.

Two shapes are accepted for each entry of ``types``:

    * flat: ``{"id": 3, "path": [...], "params": [...], "def": {...}}``
    * nested (portable registry): ``{"id": 3, "type": {"def": {...}, "path": [...]}}``
      (``"ty"`` is accepted as an alias of ``"type"``)

Errors are reported as [`SchemaError`][scalegen.core.errors.SchemaError] with a
JSON-pointer-like location such as ``/types/4/def/composite/fields/0/type``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from scalegen.config.logging import get_logger
from scalegen.core.errors import SchemaError
from scalegen.schema.model import (
    ArrayDef,
    CompositeDef,
    Field,
    FunctionInfo,
    PrimitiveDef,
    Schema,
    SequenceDef,
    TupleDef,
    TypeInfo,
    TypeParam,
    VariantDef,
    VariantItem,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from scalegen.config.logging import ScalegenLogger
    from scalegen.schema.model import TypeDef

logger: ScalegenLogger = get_logger(__name__)

DEF_KEYS: Final[tuple[str, ...]] = (
    "primitive",
    "composite",
    "variant",
    "sequence",
    "array",
    "tuple",
)


def _expect_mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise SchemaError(f"expected an object, got {type(value).__name__}", location=where)
    return value


def _expect_list(value: Any, where: str) -> list[Any]:
    if not isinstance(value, list):
        raise SchemaError(f"expected an array, got {type(value).__name__}", location=where)
    return value


def _expect_int(value: Any, where: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaError(f"expected an integer, got {type(value).__name__}", location=where)
    return value


def _expect_str(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise SchemaError(f"expected a string, got {type(value).__name__}", location=where)
    return value


def _optional_str(table: Mapping[str, Any], key: str, where: str) -> str | None:
    value: Any | None = table.get(key)
    if value is None:
        return None
    return _expect_str(value, f"{where}/{key}")


def _require(table: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in table:
        raise SchemaError(f"missing required key {key!r}", location=where)
    return table[key]


def _load_field(data: Any, where: str) -> Field:
    table: Mapping[str, Any] = _expect_mapping(data, where)
    return Field(
        type=_expect_int(_require(table, "type", where), f"{where}/type"),
        name=_optional_str(table, "name", where),
        type_name=_optional_str(table, "typeName", where),
    )


def _load_fields(data: Any, where: str) -> tuple[Field, ...]:
    if data is None:
        return ()
    items: list[Any] = _expect_list(data, where)
    return tuple(_load_field(item, f"{where}/{i}") for i, item in enumerate(items))


def _load_variant_item(data: Any, where: str) -> VariantItem:
    table: Mapping[str, Any] = _expect_mapping(data, where)
    return VariantItem(
        name=_expect_str(_require(table, "name", where), f"{where}/name"),
        index=_expect_int(table.get("index", 0), f"{where}/index"),
        fields=_load_fields(table.get("fields"), f"{where}/fields"),
    )


def _load_definition(data: Any, where: str) -> TypeDef:
    table: Mapping[str, Any] = _expect_mapping(data, where)
    present: list[str] = [key for key in DEF_KEYS if key in table]
    if len(present) != 1:
        raise SchemaError(
            f"expected exactly one of {', '.join(DEF_KEYS)}; found {present or 'none'}",
            location=where,
        )
    kind: str = present[0]
    body: Any = table[kind]
    at: str = f"{where}/{kind}"

    if kind == "primitive":
        return PrimitiveDef(name=_expect_str(body, at))
    if kind == "composite":
        composite: Mapping[str, Any] = _expect_mapping(body, at)
        return CompositeDef(fields=_load_fields(composite.get("fields"), f"{at}/fields"))
    if kind == "variant":
        variant: Mapping[str, Any] = _expect_mapping(body, at)
        items: list[Any] = _expect_list(variant.get("variants", []), f"{at}/variants")
        return VariantDef(
            variants=tuple(
                _load_variant_item(item, f"{at}/variants/{i}") for i, item in enumerate(items)
            )
        )
    if kind == "sequence":
        sequence: Mapping[str, Any] = _expect_mapping(body, at)
        return SequenceDef(type=_expect_int(_require(sequence, "type", at), f"{at}/type"))
    if kind == "array":
        array: Mapping[str, Any] = _expect_mapping(body, at)
        length: int = _expect_int(_require(array, "len", at), f"{at}/len")
        if length < 0:
            raise SchemaError("array length must not be negative", location=f"{at}/len")
        return ArrayDef(len=length, type=_expect_int(_require(array, "type", at), f"{at}/type"))
    # kind == "tuple"
    slots: list[Any] = _expect_list(body, at)
    return TupleDef(types=tuple(_expect_int(slot, f"{at}/{i}") for i, slot in enumerate(slots)))


def _load_params(data: Any, where: str) -> tuple[TypeParam, ...]:
    if data is None:
        return ()
    params: list[TypeParam] = []
    for i, item in enumerate(_expect_list(data, where)):
        at: str = f"{where}/{i}"
        table: Mapping[str, Any] = _expect_mapping(item, at)
        raw_type: Any | None = table.get("type")
        params.append(
            TypeParam(
                name=_optional_str(table, "name", at) or "",
                type=None if raw_type is None else _expect_int(raw_type, f"{at}/type"),
            )
        )
    return tuple(params)


def _load_path(data: Any, where: str) -> tuple[str, ...]:
    if data is None:
        return ()
    return tuple(_expect_str(seg, f"{where}/{i}") for i, seg in enumerate(_expect_list(data, where)))


def _load_type_entry(data: Any, where: str) -> TypeInfo:
    entry: Mapping[str, Any] = _expect_mapping(data, where)
    type_id: int = _expect_int(_require(entry, "id", where), f"{where}/id")

    # Nested portable-registry form: {"id": .., "type": {"def": ..}}
    body: Mapping[str, Any] = entry
    body_where: str = where
    for alias in ("type", "ty"):
        if alias in entry and "def" not in entry:
            body = _expect_mapping(entry[alias], f"{where}/{alias}")
            body_where = f"{where}/{alias}"
            break

    return TypeInfo(
        id=type_id,
        definition=_load_definition(_require(body, "def", body_where), f"{body_where}/def"),
        path=_load_path(body.get("path"), f"{body_where}/path"),
        params=_load_params(body.get("params"), f"{body_where}/params"),
    )


def _load_function(data: Any, where: str) -> FunctionInfo:
    table: Mapping[str, Any] = _expect_mapping(data, where)
    raw_params: list[Any] = _expect_list(table.get("param_types", []), f"{where}/param_types")
    return FunctionInfo(
        method=_expect_str(_require(table, "method", where), f"{where}/method"),
        name=_expect_str(_require(table, "name", where), f"{where}/name"),
        param_types=tuple(
            _expect_int(p, f"{where}/param_types/{i}") for i, p in enumerate(raw_params)
        ),
        return_type=_expect_int(_require(table, "return_type", where), f"{where}/return_type"),
    )


def load_schema(data: Any) -> Schema:
    """Build a [`Schema`][scalegen.schema.model.Schema] from decoded JSON data.

    Both ``types`` and ``functions`` default to empty lists when absent.

    Args:
        data (Any): The decoded document (normally a ``dict``).

    Returns:
        Schema: The immutable Schema Model, types kept in input order.

    Raises:
        SchemaError: If the document does not have the expected structure or a
            type identifier is defined twice.
    """
    root: Mapping[str, Any] = _expect_mapping(data, "/")
    raw_types: list[Any] = _expect_list(root.get("types", []), "/types")
    raw_functions: list[Any] = _expect_list(root.get("functions", []), "/functions")

    types: list[TypeInfo] = []
    seen: set[int] = set()
    for i, item in enumerate(raw_types):
        info: TypeInfo = _load_type_entry(item, f"/types/{i}")
        if info.id in seen:
            raise SchemaError(f"duplicate type id {info.id}", location=f"/types/{i}/id")
        seen.add(info.id)
        types.append(info)

    functions: list[FunctionInfo] = [
        _load_function(item, f"/functions/{i}") for i, item in enumerate(raw_functions)
    ]

    logger.debug("Loaded schema: %d type(s), %d function(s)", len(types), len(functions))
    return Schema.from_parts(types, functions)


def load_schema_text(text: str) -> Schema:
    """Parse JSON text and build the Schema Model.

    Raises:
        SchemaError: If the text is not valid JSON or not a valid schema.
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaError(
            f"invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})"
        ) from exc
    return load_schema(data)


def load_schema_file(path: Path | str) -> Schema:
    """Read a UTF-8 JSON schema file and build the Schema Model.

    ``OSError`` (missing file, permissions) propagates unchanged so callers can
    tell acquisition failures apart from malformed content.
    """
    text: str = Path(path).read_text(encoding="utf-8")
    logger.debug("Read schema file %s (%d chars)", path, len(text))
    return load_schema_text(text)
