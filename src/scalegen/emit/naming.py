# topmark:header:start
#
#   project      : ScaleGen
#   file         : naming.py
#   file_relpath : src/scalegen/emit/naming.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Argument labels for generated function stubs.

Labels only affect the readability of generated identifiers, never the encoded
bytes. The strategy is pluggable through the `ArgumentNamer` protocol; the
default is `heuristic_argument_name`.
"""

from __future__ import annotations

from typing import Final, Protocol


class ArgumentNamer(Protocol):
    """Strategy mapping a parameter position to a label."""

    def __call__(self, function_name: str, position: int, count: int) -> str:
        """Return the label of parameter ``position`` out of ``count``."""
        ...


# Checked in order against the function name of single-parameter functions.
SINGLE_PARAM_HINTS: Final[tuple[tuple[str, str], ...]] = (
    ("account", "account_id"),
    ("community", "community_id"),
    ("user", "user"),
    ("key", "key"),
    ("mode", "args"),
    ("alias", "args"),
    ("thread", "args"),
    ("comment", "args"),
    ("invite", "args"),
    ("create", "args"),
    ("activate", "arg"),
    ("pay", "arg"),
    ("set", "args"),
    ("post", "args"),
    ("generate", "args"),
    ("get", "id"),
)

SINGLE_PARAM_FALLBACK: Final[str] = "arg"

# Cycled by position for multi-parameter functions.
MULTI_PARAM_LABELS: Final[tuple[str, ...]] = (
    "id",
    "arg",
    "args",
    "param",
    "data",
    "value",
    "account_id",
    "community_id",
    "user",
    "limit",
    "gt",
    "account_ids",
    "community",
    "tx",
)


def heuristic_argument_name(function_name: str, position: int, count: int) -> str:
    """Return a readable label for one stub parameter.

    Args:
        function_name (str): Name of the function being emitted.
        position (int): Zero-based parameter position.
        count (int): Total number of parameters.

    Returns:
        str: For a single parameter, the label of the first hint contained in
        ``function_name`` (else ``"arg"``); otherwise the positional label from
        `MULTI_PARAM_LABELS`, cycling when there are more parameters than labels.
    """
    if count == 1:
        for needle, label in SINGLE_PARAM_HINTS:
            if needle in function_name:
                return label
        return SINGLE_PARAM_FALLBACK
    return MULTI_PARAM_LABELS[position % len(MULTI_PARAM_LABELS)]


def argument_labels(namer: ArgumentNamer, function_name: str, count: int) -> tuple[str, ...]:
    """Return one distinct label per parameter.

    A label the namer already produced for an earlier position gets the position
    appended (``id`` ... ``id14``).
    """
    labels: list[str] = []
    used: set[str] = set()
    for position in range(count):
        label: str = namer(function_name, position, count)
        while label in used:
            label = f"{label}{position}"
        used.add(label)
        labels.append(label)
    return tuple(labels)
