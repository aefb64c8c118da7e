# topmark:header:start
#
#   project      : ScaleGen
#   file         : __init__.py
#   file_relpath : src/scalegen/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public ScaleGen API (stable surface).

This module exposes a **small, typed API** for running the generator
programmatically without going through the CLI.

Versioning policy
-----------------
- The signatures and dataclass shapes in this module follow semver.
- Adding optional parameters with defaults is allowed in minor releases.

Configuration contract
----------------------
- Functions accept either a plain **mapping** mirroring the TOML shape or a
  frozen [`Config`][scalegen.config.model.Config]. Unlike the CLI, the API
  never discovers configuration files.

```python
from scalegen import api

text = api.generate(
    {"types": [...], "functions": [...]},
    config={"generator": {"include_imports": True}},
)
```

Errors
------
- Plain-data input that does not have the schema structure raises
  [`SchemaError`][scalegen.core.errors.SchemaError].
- Undefined references and dependency cycles never raise; they are reported by
  `validate` and `generate_with_report`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from scalegen.api.runtime import debug_logging, run_pipeline
from scalegen.config.logging import get_logger
from scalegen.pipeline.pipelines import Pipeline
from scalegen.validation.report import ValidationReport

if TYPE_CHECKING:
    from scalegen.api.runtime import ConfigLike, SchemaLike
    from scalegen.config.logging import ScalegenLogger
    from scalegen.emit.naming import ArgumentNamer
    from scalegen.pipeline.context import GenerationContext

logger: ScalegenLogger = get_logger(__name__)

__all__ = [
    "GenerationResult",
    "ValidationReport",
    "generate",
    "generate_with_report",
    "validate",
]


@dataclass(frozen=True)
class GenerationResult:
    """Generated text together with the validation report of the same run."""

    text: str
    report: ValidationReport


def generate(
    data: SchemaLike,
    debug: bool = False,
    *,
    config: ConfigLike | None = None,
    namer: ArgumentNamer | None = None,
) -> str:
    """Generate type definitions and function stubs for one schema.

    Args:
        data (SchemaLike): Decoded schema document or a built Schema Model.
        debug (bool): Log the run at DEBUG level; the output is unaffected.
        config (ConfigLike | None): Configuration (defaults when ``None``).
        namer (ArgumentNamer | None): Stub parameter labelling strategy
            (the substring heuristic when ``None``).

    Returns:
        str: Type blocks in dependency order, then function blocks in input
        order, each followed by a blank line.

    Raises:
        SchemaError: If ``data`` does not have the schema structure.
    """
    with debug_logging(debug):
        ctx: GenerationContext = run_pipeline(
            Pipeline.GENERATE, data, config=config, namer=namer
        )
    return ctx.text


def validate(data: SchemaLike, *, config: ConfigLike | None = None) -> ValidationReport:
    """Return the validation report for one schema without generating code.

    Raises:
        SchemaError: If ``data`` does not have the schema structure.
    """
    ctx: GenerationContext = run_pipeline(Pipeline.VALIDATE, data, config=config)
    assert ctx.report is not None  # ValidateStep always runs
    return ctx.report


def generate_with_report(
    data: SchemaLike,
    *,
    config: ConfigLike | None = None,
    namer: ArgumentNamer | None = None,
    debug: bool = False,
) -> GenerationResult:
    """Generate code and validate the schema in a single run.

    Raises:
        SchemaError: If ``data`` does not have the schema structure.
    """
    with debug_logging(debug):
        ctx: GenerationContext = run_pipeline(
            Pipeline.GENERATE_VALIDATE, data, config=config, namer=namer
        )
    assert ctx.report is not None  # ValidateStep always runs
    return GenerationResult(text=ctx.text, report=ctx.report)
