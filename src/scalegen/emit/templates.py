# topmark:header:start
#
#   project      : ScaleGen
#   file         : templates.py
#   file_relpath : src/scalegen/emit/templates.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text templates for generated Polkadot.js TypeScript.

Every function here is a pure renderer: it receives already-resolved names and
returns one block of text without a trailing newline. Block separation is the
orchestrator's concern.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

# Shared constructor tail of codec subclasses that forward ``value`` unchanged.
_PASSTHROUGH_BODY = """ {
  constructor(registry: Registry, value?: any) {
    super(registry, value);
  }
}"""


def render_struct(name: str, fields: Iterable[tuple[str, str]]) -> str:
    """Render a ``Struct`` subclass; ``fields`` are ``(field name, type name)`` pairs."""
    lines: list[str] = [
        f"export class {name} extends Struct {{",
        "  constructor(registry: Registry, value?: any) {",
        "    super(registry, {",
    ]
    lines.extend(f"    {field_name}: {type_name}," for field_name, type_name in fields)
    lines.extend(
        [
            "    }, value);",
            "  }",
            "}",
        ]
    )
    return "\n".join(lines)


def render_enum(name: str, variant_lines: Iterable[str]) -> str:
    """Render an ``Enum`` subclass from pre-rendered variant lines."""
    lines: list[str] = [
        f"export class {name} extends Enum {{",
        "  constructor(registry: Registry, value?: any) {",
        "    super(registry, {",
    ]
    lines.extend(variant_lines)
    lines.extend(
        [
            "    }, value);",
            "  }",
            "}",
        ]
    )
    return "\n".join(lines)


def render_unit_variant(variant: str, unit_name: str) -> str:
    """Render a variant without fields as the unit type."""
    return f"      {variant}: {unit_name},"


def render_alias_variant(variant: str, type_name: str) -> str:
    """Render a variant carrying one unnamed field as that field's type."""
    return f"      {variant}: {type_name},"


def render_named_field_variant(variant: str, field_name: str, type_name: str) -> str:
    """Render a variant carrying exactly one named field (no trailing comma inside)."""
    return "\n".join(
        [
            f"      {variant}: Struct.with({{",
            f"        {field_name}: {type_name}",
            "      }),",
        ]
    )


def render_struct_variant(variant: str, fields: Iterable[tuple[str, str]]) -> str:
    """Render a variant carrying several fields as an inline struct."""
    lines: list[str] = [f"      {variant}: Struct.with({{"]
    lines.extend(f"        {field_name}: {type_name}," for field_name, type_name in fields)
    lines.append("      }),")
    return "\n".join(lines)


def render_option(name: str, inner: str) -> str:
    """Render an ``Option`` subclass around ``inner``."""
    return f"export class {name} extends Option.with({inner}){_PASSTHROUGH_BODY}"


def render_result(name: str, ok: str, err: str) -> str:
    """Render a ``Result`` subclass with ``Ok`` and ``Err`` types."""
    return f"export class {name} extends Result.with({{ Ok: {ok}, Err: {err} }}){_PASSTHROUGH_BODY}"


def render_fixed_bytes(name: str, length: int) -> str:
    """Render a fixed-width byte wrapper; ``length`` counts bytes."""
    return f"export const {name} = U8aFixed.with({length * 8} as U8aBitLength);"


def render_sequence(name: str, element: str) -> str:
    """Render a ``Vec`` constant."""
    return f"export const {name} = Vec.with({element});"


def render_tuple(name: str, slots: Sequence[str]) -> str:
    """Render a ``Tuple`` constant over the slot types, in order."""
    return f"export const {name} = Tuple.with([{', '.join(slots)}]);"


def render_unit_alias(name: str, unit_name: str) -> str:
    """Render an alias of the unit type."""
    return f"export const {name} = {unit_name};"


def render_function(
    *,
    name: str,
    method: str,
    target_param: str,
    api_name: str,
    rpc_prefix: str,
    registry_name: str,
    arg_labels: Sequence[str],
    param_types: Sequence[str],
    return_type: str,
) -> str:
    """Render one async RPC stub.

    The encoding line and call payload depend on the parameter count:

        * 0: no encoding line; payload is a single zero byte.
        * 1: one codec value built from its argument.
        * 2+: all arguments packed into one ``Tuple`` in declared order.

    Args:
        name (str): Function name (also sent as the call's selector).
        method (str): Dispatch method tag, appended to ``rpc_prefix``.
        target_param (str): Leading stub parameter identifying the call target.
        api_name (str): Variable holding the API client.
        rpc_prefix (str): RPC method prefix.
        registry_name (str): Registry variable passed to codec constructors.
        arg_labels (Sequence[str]): One label per parameter.
        param_types (Sequence[str]): Resolved parameter type names.
        return_type (str): Resolved return type name.

    Returns:
        str: The stub source text.
    """
    params: str = "".join(f", {label}Arg: any" for label in arg_labels)
    if not param_types:
        encoding = ""
        payload = ", u8aToHex(new Uint8Array([0]))"
    elif len(param_types) == 1:
        label: str = arg_labels[0]
        encoding = f"  const {label} = new {param_types[0]}({registry_name}, {label}Arg);"
        payload = f", u8aToHex({label}?.toU8a())"
    else:
        arg_values: str = ", ".join(f"{label}Arg" for label in arg_labels)
        encoding = (
            f"  const args = new Tuple({registry_name}, [{', '.join(param_types)}], [{arg_values}]);"
        )
        payload = ", u8aToHex(args?.toU8a())"

    return "\n".join(
        [
            f"export async function {name}({target_param}: string{params}): Promise<any> {{",
            f"  if (!{api_name}) throw new Error('API not initialized');",
            encoding,
            f"  const response = await {api_name}.rpc('{rpc_prefix}{method}', {target_param}, "
            f"'{name}'{payload});",
            "",
            '  const responseBytes = Buffer.from(response as string, "hex");',
            f"  return new {return_type}({registry_name}, responseBytes);",
            "}",
        ]
    )


def render_imports(names: Iterable[str]) -> str:
    """Render the codec import preamble."""
    joined: str = ", ".join(names)
    return "\n".join(
        [
            f"import {{ {joined} }} from '@polkadot/types';",
            "import type { Registry, U8aBitLength } from '@polkadot/types/types';",
            "import { u8aToHex } from '@polkadot/util';",
        ]
    )
