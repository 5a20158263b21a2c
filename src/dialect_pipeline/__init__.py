"""Route content through chains of transforms between file-extension dialects."""

from .core import (
    DialectGraph,
    FileState,
    PipelineRunner,
    TransformFn,
    TransformRegistry,
    Transpiler,
    TranspilerInterface,
    edge_key,
    split_extension,
)
from .exceptions import NoPathError, TransformError, TranspilerError
from .logging_config import configure_logging

__all__ = [
    "DialectGraph",
    "FileState",
    "NoPathError",
    "PipelineRunner",
    "TransformError",
    "TransformFn",
    "TransformRegistry",
    "Transpiler",
    "TranspilerError",
    "TranspilerInterface",
    "configure_logging",
    "edge_key",
    "split_extension",
]
