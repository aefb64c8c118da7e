# topmark:header:start
#
#   project      : ScaleGen
#   file         : assemble.py
#   file_relpath : src/scalegen/pipeline/steps/assemble.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output assembly step.

The output is every type block (emission order) then every function block
(input order), each followed by a blank line. With ``include_imports`` the
import preamble comes first, as one more block.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scalegen.config.logging import get_logger
from scalegen.emit.preamble import import_preamble
from scalegen.pipeline.status import AssemblyStatus, Axis
from scalegen.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from scalegen.config.logging import ScalegenLogger
    from scalegen.pipeline.context import GenerationContext

logger: ScalegenLogger = get_logger(__name__)

BLOCK_SEPARATOR = "\n\n"


class AssembleStep(BaseStep):
    """Concatenate the emitted blocks into the final text.

    Axes written:
      - assembly

    Sets:
      - AssemblyStatus: {ASSEMBLED}
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.ASSEMBLY,
            axes_written=(Axis.ASSEMBLY,),
        )

    def run(self, ctx: GenerationContext) -> None:
        """Join the preamble, type blocks and function stubs into ``ctx.text``."""
        blocks: list[str] = []
        if ctx.config.include_imports:
            blocks.append(import_preamble())
        blocks.extend(ctx.emitted)
        blocks.extend(ctx.function_blocks)
        ctx.text = "".join(block + BLOCK_SEPARATOR for block in blocks)
        ctx.status.assembly = AssemblyStatus.ASSEMBLED
        logger.debug("Assembled %d block(s), %d chars", len(blocks), len(ctx.text))
