# topmark:header:start
#
#   project      : ScaleGen
#   file         : runtime.py
#   file_relpath : src/scalegen/api/runtime.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime helpers behind the public API.

Normalizes inputs (schema data, configuration) and runs a named pipeline over a
fresh [`GenerationContext`][scalegen.pipeline.context.GenerationContext].
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from scalegen.config.logging import ChalkFormatter, DEBUG_LOG_FORMAT, get_logger
from scalegen.config.model import Config, MutableConfig
from scalegen.emit.naming import heuristic_argument_name
from scalegen.pipeline import runner
from scalegen.pipeline.context import GenerationContext
from scalegen.schema.loader import load_schema
from scalegen.schema.model import Schema

if TYPE_CHECKING:
    from collections.abc import Iterator

    from scalegen.config.logging import ScalegenLogger
    from scalegen.emit.naming import ArgumentNamer
    from scalegen.pipeline.pipelines import Pipeline

logger: ScalegenLogger = get_logger(__name__)

PACKAGE_LOGGER_NAME = "scalegen"

# Anything `load_schema` accepts, or an already built Schema Model.
SchemaLike = Schema | Mapping[str, Any]
ConfigLike = Config | Mapping[str, Any]


def ensure_schema(data: SchemaLike) -> Schema:
    """Return ``data`` as a Schema Model, loading it when given plain data.

    Raises:
        SchemaError: If plain data does not have the expected structure.
    """
    if isinstance(data, Schema):
        return data
    return load_schema(data)


def ensure_config(config: ConfigLike | None) -> Config:
    """Return an immutable config from ``None`` (defaults), a mapping or a `Config`.

    A mapping mirrors the TOML shape, e.g. ``{"generator": {"unit_name": "Unit"}}``.
    No configuration file is discovered.
    """
    if config is None:
        return Config.from_defaults()
    if isinstance(config, Config):
        return config
    base: MutableConfig = MutableConfig.from_defaults()
    return base.merge_with(MutableConfig.from_toml_dict(dict(config), source="api")).freeze()


@contextmanager
def debug_logging(enabled: bool) -> Iterator[None]:
    """Raise the package loggers to DEBUG for the duration of the block.

    When no handler is configured anywhere, a temporary stderr handler is
    attached so the records are visible.
    """
    if not enabled:
        yield
        return
    package_logger: logging.Logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    previous_level: int = package_logger.level
    handler: logging.Handler | None = None
    if not package_logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(ChalkFormatter(DEBUG_LOG_FORMAT))
        package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    try:
        yield
    finally:
        package_logger.setLevel(previous_level)
        if handler is not None:
            package_logger.removeHandler(handler)


def run_pipeline(
    pipeline: Pipeline,
    data: SchemaLike,
    *,
    config: ConfigLike | None = None,
    namer: ArgumentNamer | None = None,
) -> GenerationContext:
    """Run ``pipeline`` over a fresh context and return the final context.

    Raises:
        SchemaError: If ``data`` is plain data with an unexpected structure.
    """
    ctx = GenerationContext(
        schema=ensure_schema(data),
        config=ensure_config(config),
        namer=namer or heuristic_argument_name,
    )
    logger.debug("Running pipeline %s", pipeline.name)
    return runner.run(ctx, pipeline.steps)
