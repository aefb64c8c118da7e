# topmark:header:start
#
#   project      : ScaleGen
#   file         : types.py
#   file_relpath : src/scalegen/emit/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type Emitter: one codec definition per type identifier.

`TypeEmitter.emit` dispatches on the entry's [`Shape`][scalegen.schema.shapes.Shape]
through `SHAPE_RENDERERS`, a table that must name a renderer for every shape;
a missing entry fails at import time.

Emission is idempotent per resolved name: the caller threads one
`EmissionAccumulator` through the whole pass and a name already present in it
yields no block. Primitives never yield a block.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from scalegen.config.logging import get_logger
from scalegen.emit.templates import (
    render_alias_variant,
    render_enum,
    render_fixed_bytes,
    render_named_field_variant,
    render_option,
    render_result,
    render_sequence,
    render_struct,
    render_struct_variant,
    render_tuple,
    render_unit_alias,
    render_unit_variant,
)
from scalegen.schema.model import (
    ArrayDef,
    CompositeDef,
    SequenceDef,
    TupleDef,
    VariantDef,
)
from scalegen.schema.shapes import (
    Shape,
    classify,
    fixed_bytes_length,
    option_inner_type,
    result_inner_types,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from scalegen.config.logging import ScalegenLogger
    from scalegen.config.model import Config
    from scalegen.resolver.names import NameResolver
    from scalegen.schema.model import Field, Schema, TypeInfo, VariantItem

logger: ScalegenLogger = get_logger(__name__)


@dataclass
class EmissionAccumulator:
    """Names emitted so far in one run, plus the emitted blocks in order."""

    seen: set[str] = field(default_factory=lambda: set())
    blocks: list[str] = field(default_factory=lambda: [])

    def claim(self, name: str) -> bool:
        """Mark ``name`` as emitted; return False if it already was."""
        if name in self.seen:
            return False
        self.seen.add(name)
        return True

    def __contains__(self, name: object) -> bool:
        return name in self.seen

    def __iter__(self) -> Iterator[str]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)


class TypeEmitter:
    """Render codec definitions for the types of one schema."""

    def __init__(self, schema: Schema, names: NameResolver, config: Config) -> None:
        self.schema = schema
        self.names = names
        self.config = config

    def emit(self, type_id: int, info: TypeInfo, seen: EmissionAccumulator) -> str | None:
        """Render the definition of one type.

        Args:
            type_id (int): Identifier of the type.
            info (TypeInfo): Its schema entry.
            seen (EmissionAccumulator): The run's accumulator. The block, if any,
                is appended to ``seen.blocks``.

        Returns:
            str | None: The rendered block, or ``None`` for primitives, names
            already emitted and the suppressed unit tuple.
        """
        shape: Shape = classify(info)
        if shape is Shape.PRIMITIVE:
            return None
        name: str = self.names.resolve(type_id)
        if not seen.claim(name):
            logger.trace("Type %d (%s) already emitted", type_id, name)
            return None
        renderer: str = SHAPE_RENDERERS[shape]
        block: str | None = getattr(self, renderer)(name, info)
        logger.trace("Type %d (%s) emitted as %s", type_id, name, shape.value)
        if block is not None:
            seen.blocks.append(block)
        return block

    # ------------------------------ renderers ------------------------------

    def _field_type(self, f: Field) -> str:
        return self.names.resolve(f.type)

    def _emit_composite(self, name: str, info: TypeInfo) -> str | None:
        definition = info.definition
        assert isinstance(definition, CompositeDef)
        length: int | None = fixed_bytes_length(info, self.schema.get, self.config.hash_aliases)
        if length is not None:
            return render_fixed_bytes(name, length)
        return render_struct(
            name,
            ((f.name or f"field{i}", self._field_type(f)) for i, f in enumerate(definition.fields)),
        )

    def _variant_line(self, variant: VariantItem) -> str:
        if not variant.fields:
            return render_unit_variant(variant.name, self.config.unit_name)
        if len(variant.fields) == 1:
            only: Field = variant.fields[0]
            if only.name:
                return render_named_field_variant(variant.name, only.name, self._field_type(only))
            return render_alias_variant(variant.name, self._field_type(only))
        return render_struct_variant(
            variant.name,
            ((f.name or f.type_name or f"field{f.type}", self._field_type(f)) for f in variant.fields),
        )

    def _emit_tagged_union(self, name: str, info: TypeInfo) -> str | None:
        definition = info.definition
        assert isinstance(definition, VariantDef)
        return render_enum(name, (self._variant_line(v) for v in definition.variants))

    def _emit_option(self, name: str, info: TypeInfo) -> str | None:
        inner: int | None = option_inner_type(info)
        return render_option(
            name, self.config.text_name if inner is None else self.names.resolve(inner)
        )

    def _emit_result(self, name: str, info: TypeInfo) -> str | None:
        ok, err = result_inner_types(info)
        return render_result(
            name,
            self.config.unit_name if ok is None else self.names.resolve(ok),
            self.config.text_name if err is None else self.names.resolve(err),
        )

    def _emit_fixed_array(self, name: str, info: TypeInfo) -> str | None:
        definition = info.definition
        assert isinstance(definition, ArrayDef)
        return render_fixed_bytes(name, definition.len)

    def _emit_sequence(self, name: str, info: TypeInfo) -> str | None:
        definition = info.definition
        assert isinstance(definition, SequenceDef)
        return render_sequence(name, self.names.resolve(definition.type))

    def _emit_tuple(self, name: str, info: TypeInfo) -> str | None:
        definition = info.definition
        assert isinstance(definition, TupleDef)
        if not definition.types:
            if name == self.config.unit_name:
                return None
            return render_unit_alias(name, self.config.unit_name)
        return render_tuple(name, [self.names.resolve(t) for t in definition.types])

    def _emit_nothing(self, name: str, info: TypeInfo) -> str | None:
        return None


# Renderer method per shape; every Shape member must be present.
SHAPE_RENDERERS: Final = MappingProxyType(
    {
        Shape.PRIMITIVE: "_emit_nothing",
        Shape.COMPOSITE: "_emit_composite",
        Shape.TAGGED_UNION: "_emit_tagged_union",
        Shape.SEQUENCE: "_emit_sequence",
        Shape.FIXED_ARRAY: "_emit_fixed_array",
        Shape.TUPLE: "_emit_tuple",
        Shape.OPTIONAL_WRAPPER: "_emit_option",
        Shape.RESULT_WRAPPER: "_emit_result",
    }
)

_unhandled: set[Shape] = set(Shape) - set(SHAPE_RENDERERS)
if _unhandled:
    raise RuntimeError(f"No renderer for shape(s): {sorted(s.value for s in _unhandled)}")
_unbound: list[str] = [m for m in SHAPE_RENDERERS.values() if not hasattr(TypeEmitter, m)]
if _unbound:
    raise RuntimeError(f"Unknown renderer method(s): {_unbound}")
