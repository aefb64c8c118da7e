# topmark:header:start
#
#   project      : ScaleGen
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ScaleGen test suite.

This file sets up global fixtures, typed pytest-mark wrappers and small schema
builders shared across test packages.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `scalegen.config.model.MutableConfig` (mutable), then
      `freeze()` into a `scalegen.config.model.Config` for API calls.
    - Do **not** mutate a frozen `Config`. If you need to tweak one, call
      `Config.thaw()`, edit the returned `MutableConfig`, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from scalegen.config import logging
from scalegen.config.model import Config, MutableConfig
from scalegen.constants import LOG_LEVEL_ENV_VAR
from scalegen.schema.loader import load_schema

if TYPE_CHECKING:
    from collections.abc import Sequence

    from scalegen.schema.model import Schema

F = TypeVar("F", bound=Callable[..., object])

# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_scalegen_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure ScaleGen's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    SCALEGEN_LOG_LEVEL in their shell.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so failing tests show the full run."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


# ------------------------------ schema builders ------------------------------


def prim(type_id: int, name: str) -> dict[str, Any]:
    """Return a primitive type entry."""
    return {"id": type_id, "def": {"primitive": name}}


def composite(
    type_id: int,
    fields: Sequence[dict[str, Any]],
    *,
    path: Sequence[str] | None = None,
    params: Sequence[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Return a composite type entry."""
    entry: dict[str, Any] = {"id": type_id, "def": {"composite": {"fields": list(fields)}}}
    if path is not None:
        entry["path"] = list(path)
    if params is not None:
        entry["params"] = list(params)
    return entry


def variant(
    type_id: int,
    variants: Sequence[dict[str, Any]],
    *,
    path: Sequence[str] | None = None,
    params: Sequence[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Return a tagged-union type entry; variant indexes default to their position."""
    items: list[dict[str, Any]] = [{"index": i, **v} for i, v in enumerate(variants)]
    entry: dict[str, Any] = {"id": type_id, "def": {"variant": {"variants": items}}}
    if path is not None:
        entry["path"] = list(path)
    if params is not None:
        entry["params"] = list(params)
    return entry


def sequence(type_id: int, element: int) -> dict[str, Any]:
    """Return a sequence type entry."""
    return {"id": type_id, "def": {"sequence": {"type": element}}}


def array(type_id: int, length: int, element: int) -> dict[str, Any]:
    """Return a fixed-array type entry."""
    return {"id": type_id, "def": {"array": {"len": length, "type": element}}}


def tuple_(type_id: int, slots: Sequence[int]) -> dict[str, Any]:
    """Return a tuple type entry (``[]`` is the unit type)."""
    return {"id": type_id, "def": {"tuple": list(slots)}}


def function(
    name: str, param_types: Sequence[int], return_type: int, method: str = "query"
) -> dict[str, Any]:
    """Return a function signature entry."""
    return {
        "method": method,
        "name": name,
        "param_types": list(param_types),
        "return_type": return_type,
    }


def make_schema(
    types: Sequence[dict[str, Any]] = (),
    functions: Sequence[dict[str, Any]] = (),
) -> Schema:
    """Load a Schema Model from entry dicts."""
    return load_schema({"types": list(types), "functions": list(functions)})


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides."""
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()
