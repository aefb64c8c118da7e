# topmark:header:start
#
#   project      : ScaleGen
#   file         : status.py
#   file_relpath : src/scalegen/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status enums for each axis of the generation pipeline.

Each axis corresponds to one step and has its own status enum. Steps **must
only** write to the axes listed in their ``axes_written`` contract.

Conventions:
  * All enums inherit from `EnumIntrospectionMixin` and `ColoredStrEnum` for
    shared utilities and colors.
  * Values are human-readable strings used in CLI output; prefer equality
    (``==``) over identity checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from yachalk import chalk

from scalegen.core.enum_mixins import EnumIntrospectionMixin
from scalegen.rendering.colored_enum import ColoredStrEnum


class Axis(EnumIntrospectionMixin, str, Enum):
    """Pipeline axes, one per step, in execution order."""

    NAMES = "names"
    ORDER = "order"
    TYPES = "types"
    FUNCTIONS = "functions"
    ASSEMBLY = "assembly"
    VALIDATION = "validation"


class NamesStatus(EnumIntrospectionMixin, ColoredStrEnum):
    """Status of name resolution."""

    PENDING = ("name resolution pending", chalk.gray)
    RESOLVED = ("all names resolved", chalk.green)
    PLACEHOLDERS = ("resolved with placeholder names", chalk.yellow)
    EMPTY = ("nothing to resolve", chalk.blue)


class OrderStatus(EnumIntrospectionMixin, ColoredStrEnum):
    """Status of dependency ordering."""

    PENDING = ("ordering pending", chalk.gray)
    ORDERED = ("dependency order found", chalk.green)
    CYCLE_BROKEN = ("ordered with cycle-broken tail", chalk.yellow)


class TypesStatus(EnumIntrospectionMixin, ColoredStrEnum):
    """Status of type emission."""

    PENDING = ("type emission pending", chalk.gray)
    EMITTED = ("type definitions emitted", chalk.green)
    NONE = ("no type definitions needed", chalk.blue)


class FunctionsStatus(EnumIntrospectionMixin, ColoredStrEnum):
    """Status of function stub emission."""

    PENDING = ("function emission pending", chalk.gray)
    EMITTED = ("function stubs emitted", chalk.green)
    NONE = ("no functions declared", chalk.blue)


class AssemblyStatus(EnumIntrospectionMixin, ColoredStrEnum):
    """Status of output assembly."""

    PENDING = ("assembly pending", chalk.gray)
    ASSEMBLED = ("output assembled", chalk.green)


class ValidationStatus(EnumIntrospectionMixin, ColoredStrEnum):
    """Status of the validation pass."""

    PENDING = ("validation pending", chalk.gray)
    CLEAN = ("schema is consistent", chalk.green)
    ISSUES = ("schema has issues", chalk.yellow)


@dataclass
class GenerationStatus:
    """Current status of every pipeline axis for one run."""

    names: NamesStatus = NamesStatus.PENDING
    order: OrderStatus = OrderStatus.PENDING
    types: TypesStatus = TypesStatus.PENDING
    functions: FunctionsStatus = FunctionsStatus.PENDING
    assembly: AssemblyStatus = AssemblyStatus.PENDING
    validation: ValidationStatus = ValidationStatus.PENDING

    def get(self, axis: Axis) -> ColoredStrEnum:
        """Return the status recorded for ``axis``."""
        return getattr(self, axis.value)

    def to_dict(self) -> dict[str, str]:
        """Return ``axis -> status label`` for all axes."""
        return {axis.value: self.get(axis).value for axis in Axis}
