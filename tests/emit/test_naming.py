# topmark:header:start
#
#   project      : ScaleGen
#   file         : test_naming.py
#   file_relpath : tests/emit/test_naming.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Argument label heuristics."""

from __future__ import annotations

from scalegen.emit.naming import (
    MULTI_PARAM_LABELS,
    argument_labels,
    heuristic_argument_name,
)
from tests.conftest import parametrize


@parametrize(
    "function_name, expected",
    [
        ("get_account_balance", "account_id"),
        ("community_info", "community_id"),
        ("get_user", "user"),
        ("rotate_key", "key"),
        ("set_mode", "args"),
        ("create_thread", "args"),
        ("activate", "arg"),
        ("pay_invoice", "arg"),
        ("post_message", "args"),
        ("get_value", "id"),
        ("ping", "arg"),
    ],
)
def test_single_parameter_hints(function_name: str, expected: str) -> None:
    """The first hint contained in the function name wins."""
    assert heuristic_argument_name(function_name, 0, 1) == expected


def test_hint_order_matters() -> None:
    """``account`` is checked before ``get``."""
    assert heuristic_argument_name("get_account", 0, 1) == "account_id"


def test_multi_parameter_labels_are_positional() -> None:
    """Multi-parameter labels ignore the function name."""
    assert [heuristic_argument_name("get_account", i, 3) for i in range(3)] == ["id", "arg", "args"]


def test_labels_cycle_and_stay_distinct() -> None:
    """Past the label table the sequence repeats, deduplicated by position."""
    count = len(MULTI_PARAM_LABELS) + 2
    labels = argument_labels(heuristic_argument_name, "many", count)

    assert len(labels) == count
    assert len(set(labels)) == count
    assert labels[: len(MULTI_PARAM_LABELS)] == MULTI_PARAM_LABELS
    assert labels[-2:] == ("id14", "arg15")


def test_constant_namer_is_deduplicated() -> None:
    """A namer returning the same label everywhere still yields distinct labels."""

    def same(function_name: str, position: int, count: int) -> str:
        return "x"

    assert argument_labels(same, "f", 3) == ("x", "x1", "x2")
