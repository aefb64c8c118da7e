# topmark:header:start
#
#   project      : ScaleGen
#   file         : enum_mixins.py
#   file_relpath : src/scalegen/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic Enum utilities for ScaleGen (typing-friendly, UI-agnostic).

Provided:
    - ``enum_from_value(enum_cls, value, *, case_insensitive=True)``:
        Typed lookup by ``.value``. Returns ``None`` on miss.
    - ``EnumIntrospectionMixin``:
        Adds ``.value_length`` (cached) to any Enum subclass for formatting.
"""

from __future__ import annotations

from enum import Enum
from functools import cached_property
from typing import TypeVar

_E = TypeVar("_E", bound=Enum)


def enum_from_value(
    enum_cls: type[_E],
    value: str | None,
    *,
    case_insensitive: bool = True,
) -> _E | None:
    """Return the enum member of ``enum_cls`` whose string value equals ``value``.

    Args:
        enum_cls (type[_E]): The Enum class to search.
        value (str | None): The candidate value. If ``None``, returns ``None``.
        case_insensitive (bool): Compare values case-insensitively (default).

    Returns:
        _E | None: The matching enum member, or ``None`` if not found.
    """
    if value is None:
        return None
    target: str = value.lower() if case_insensitive else value
    for member in enum_cls:
        candidate = str(member.value)
        if (candidate.lower() if case_insensitive else candidate) == target:
            return member
    return None


class EnumIntrospectionMixin:
    """Small, UI-agnostic mixin that adds introspection conveniences to Enums.

    When mixed into an Enum class, provides ``value_length`` (cached_property):
    the maximum length of all ``.value`` strings for the enum class. Useful for
    printing aligned labels.
    """

    @cached_property
    def value_length(self) -> int:
        """Maximum length of the enum's ``.value`` strings."""
        # Pyright doesn't know 'self' is an Enum member; runtime guarantees it.
        return max(len(member.value) for member in type(self))  # type: ignore[attr-defined]
