# topmark:header:start
#
#   project      : ScaleGen
#   file         : functions.py
#   file_relpath : src/scalegen/emit/functions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Function Emitter: one async RPC stub per function signature."""

from __future__ import annotations

from typing import TYPE_CHECKING

from scalegen.config.logging import get_logger
from scalegen.emit.naming import argument_labels, heuristic_argument_name
from scalegen.emit.templates import render_function

if TYPE_CHECKING:
    from scalegen.config.logging import ScalegenLogger
    from scalegen.config.model import Config
    from scalegen.emit.naming import ArgumentNamer
    from scalegen.resolver.names import NameResolver
    from scalegen.schema.model import FunctionInfo

logger: ScalegenLogger = get_logger(__name__)


class FunctionEmitter:
    """Render stubs that encode arguments, call the runtime and decode the reply.

    Args:
        names (NameResolver): Resolves parameter and return type names.
        config (Config): Supplies the variable names used in generated code.
        namer (ArgumentNamer): Labelling strategy for stub parameters.
    """

    def __init__(
        self,
        names: NameResolver,
        config: Config,
        namer: ArgumentNamer = heuristic_argument_name,
    ) -> None:
        self.names = names
        self.config = config
        self.namer = namer

    def emit(self, fn: FunctionInfo) -> str:
        """Return the stub text for ``fn``."""
        labels: tuple[str, ...] = argument_labels(self.namer, fn.name, len(fn.param_types))
        logger.trace("Function %s(%s)", fn.name, ", ".join(labels))
        return render_function(
            name=fn.name,
            method=fn.method,
            target_param=self.config.target_param,
            api_name=self.config.api_name,
            rpc_prefix=self.config.rpc_prefix,
            registry_name=self.config.registry_name,
            arg_labels=labels,
            param_types=[self.names.resolve(t) for t in fn.param_types],
            return_type=self.names.resolve(fn.return_type),
        )
