"""Core dialect graph, transform registry and pipeline execution."""

from .dialect_graph import DialectGraph
from .file_state import FileState, split_extension
from .pipeline_runner import PipelineRunner
from .protocols import TransformFn, TranspilerInterface
from .transform_registry import TransformRegistry, edge_key
from .transpiler import Transpiler

__all__ = [
    "DialectGraph",
    "FileState",
    "PipelineRunner",
    "TransformFn",
    "TransformRegistry",
    "Transpiler",
    "TranspilerInterface",
    "edge_key",
    "split_extension",
]
