# topmark:header:start
#
#   project      : ScaleGen
#   file         : pipelines.py
#   file_relpath : src/scalegen/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named pipeline variants (immutable, typed step sequences).

Overview
--------
- ``GENERATE``: names → order → types → functions → assemble
- ``GENERATE_VALIDATE``: GENERATE + validate
- ``VALIDATE``: names → order → validate

Notes:
* Pipelines are immutable (``Final[tuple[Step, ...]]``) and steps are
  instantiated objects (not functions).
* Steps only write to the status axes they declare.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from scalegen.pipeline.contracts import Step
from scalegen.pipeline.steps import assemble, functions, names, ordering, types, validate

ANALYZE_PIPELINE: Final[tuple[Step, ...]] = (
    names.ResolveNamesStep(),  # One unique name per type id
    ordering.OrderTypesStep(),  # Dependencies before dependents
)

GENERATE_PIPELINE: Final[tuple[Step, ...]] = ANALYZE_PIPELINE + (
    types.EmitTypesStep(),  # Type definitions in emission order
    functions.EmitFunctionsStep(),  # Function stubs in input order
    assemble.AssembleStep(),  # Final text
)

GENERATE_VALIDATE_PIPELINE: Final[tuple[Step, ...]] = GENERATE_PIPELINE + (
    validate.ValidateStep(),
)

VALIDATE_PIPELINE: Final[tuple[Step, ...]] = ANALYZE_PIPELINE + (validate.ValidateStep(),)


class Pipeline(tuple[Step, ...], Enum):
    """Available execution pipelines, mapped to their step sequences."""

    GENERATE = GENERATE_PIPELINE
    GENERATE_VALIDATE = GENERATE_VALIDATE_PIPELINE
    VALIDATE = VALIDATE_PIPELINE

    @property
    def steps(self) -> tuple[Step, ...]:
        """Return the ordered step instances of this pipeline."""
        return self.value
