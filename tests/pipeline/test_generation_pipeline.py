# topmark:header:start
#
#   project      : ScaleGen
#   file         : test_generation_pipeline.py
#   file_relpath : tests/pipeline/test_generation_pipeline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline composition, step statuses and flow control."""

from __future__ import annotations

from typing import TYPE_CHECKING

from scalegen.api.runtime import run_pipeline
from scalegen.pipeline.pipelines import Pipeline
from scalegen.pipeline.status import (
    AssemblyStatus,
    Axis,
    FunctionsStatus,
    NamesStatus,
    OrderStatus,
    TypesStatus,
    ValidationStatus,
)
from scalegen.pipeline.steps.base import BaseStep
from tests.conftest import composite, function, make_schema, mark_pipeline, prim, tuple_

if TYPE_CHECKING:
    from scalegen.pipeline.context import GenerationContext


@mark_pipeline
def test_pipelines_share_the_analysis_prefix() -> None:
    """Every pipeline starts with name resolution then ordering."""
    for pipeline in Pipeline:
        assert [s.name for s in pipeline.steps[:2]] == ["ResolveNamesStep", "OrderTypesStep"]
    assert Pipeline.VALIDATE.steps[-1].name == "ValidateStep"
    assert Pipeline.GENERATE.steps[-1].name == "AssembleStep"


@mark_pipeline
def test_steps_write_only_their_own_axis() -> None:
    """Each step declares exactly its primary axis."""
    for pipeline in Pipeline:
        for step in pipeline.steps:
            assert isinstance(step, BaseStep)
            assert step.axes_written == (step.primary_axis,)


@mark_pipeline
def test_generate_statuses_on_clean_schema() -> None:
    """A fully defined acyclic schema goes green on every axis."""
    schema = make_schema(
        [prim(0, "u32"), composite(1, [{"name": "v", "type": 0}], path=["Wrapper"])],
        [function("get_value", [0], 1)],
    )
    ctx: GenerationContext = run_pipeline(Pipeline.GENERATE_VALIDATE, schema)

    assert ctx.status.names is NamesStatus.RESOLVED
    assert ctx.status.order is OrderStatus.ORDERED
    assert ctx.status.types is TypesStatus.EMITTED
    assert ctx.status.functions is FunctionsStatus.EMITTED
    assert ctx.status.assembly is AssemblyStatus.ASSEMBLED
    assert ctx.status.validation is ValidationStatus.CLEAN
    assert [s.name for s in ctx.steps] == [s.name for s in Pipeline.GENERATE_VALIDATE.steps]
    assert ctx.text.endswith("}\n\n")


@mark_pipeline
def test_generate_statuses_on_degraded_schema() -> None:
    """Placeholders and cycles are recorded, never raised."""
    schema = make_schema(
        [composite(1, [{"type": 2}]), composite(2, [{"type": 1}, {"type": 50}])],
    )
    ctx = run_pipeline(Pipeline.GENERATE_VALIDATE, schema)

    assert ctx.status.names is NamesStatus.PLACEHOLDERS
    assert ctx.status.order is OrderStatus.CYCLE_BROKEN
    assert ctx.status.functions is FunctionsStatus.NONE
    assert ctx.status.validation is ValidationStatus.ISSUES
    assert ctx.diagnostics.has_warning()
    assert ctx.report is not None and ctx.report.placeholder_ids == (50,)


@mark_pipeline
def test_unit_only_schema_needs_no_type_blocks() -> None:
    """A schema of primitives and the unit tuple emits no type definitions."""
    ctx = run_pipeline(Pipeline.GENERATE, make_schema([prim(0, "u8"), tuple_(1, [])]))

    assert ctx.status.types is TypesStatus.NONE
    assert ctx.text == ""


@mark_pipeline
def test_empty_schema_halts_after_names() -> None:
    """Nothing to emit: the flow stops but validation still reports."""
    ctx = run_pipeline(Pipeline.GENERATE_VALIDATE, make_schema())

    assert ctx.flow.halt
    assert ctx.flow.reason == "empty-schema"
    assert ctx.flow.at_step == "ResolveNamesStep"
    assert ctx.status.names is NamesStatus.EMPTY
    assert ctx.status.get(Axis.TYPES) is TypesStatus.PENDING
    assert ctx.status.assembly is AssemblyStatus.PENDING
    assert ctx.text == ""
    assert ctx.report is not None
    assert ctx.report.is_clean


@mark_pipeline
def test_status_to_dict_covers_every_axis() -> None:
    """Status export has one human-readable label per axis."""
    ctx = run_pipeline(Pipeline.VALIDATE, make_schema([prim(0, "u8")]))
    exported = ctx.status.to_dict()

    assert list(exported) == [axis.value for axis in Axis]
    assert exported["validation"] == ValidationStatus.CLEAN.value
    assert exported["types"] == TypesStatus.PENDING.value
