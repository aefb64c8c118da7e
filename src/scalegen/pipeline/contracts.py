# topmark:header:start
#
#   project      : ScaleGen
#   file         : contracts.py
#   file_relpath : src/scalegen/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contracts for pipeline steps.

Steps are instantiated, callable objects; the runner invokes them as
``step(ctx)`` where ``ctx`` is a `GenerationContext`.

Lifecycle
---------
1) ``step.may_proceed(ctx)`` gates execution.
2) If allowed, ``step.run(ctx)`` mutates ``ctx`` in place.
3) Regardless, ``step.hint(ctx)`` may attach non-binding diagnostics.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from scalegen.pipeline.context import GenerationContext
    from scalegen.pipeline.status import Axis


class Step(Protocol):
    """Protocol for a single pipeline step.

    Implementations typically subclass
    [`scalegen.pipeline.steps.base.BaseStep`][scalegen.pipeline.steps.base.BaseStep].
    """

    name: str
    axes_written: tuple[Axis, ...]

    def may_proceed(self, ctx: GenerationContext) -> bool:
        """Return whether the step should run given the current context."""
        ...

    def run(self, ctx: GenerationContext) -> None:
        """Execute the step, mutating the context in place.

        Implementations must only write to the axes they declare and must not
        raise for data-shape reasons.
        """
        ...

    def hint(self, ctx: GenerationContext) -> None:
        """Attach non-binding diagnostics to the context."""
        ...

    def __call__(self, ctx: GenerationContext) -> GenerationContext:
        """Run the step lifecycle: gate, run (optional), hint."""
        ...
