"""Dispatcher for converting content between file-extension dialects."""

import logging
import os
from typing import Any

from ..exceptions import NoPathError
from .dialect_graph import DialectGraph
from .file_state import FileState, split_extension
from .pipeline_runner import PipelineRunner
from .protocols import TransformFn
from .transform_registry import TransformRegistry

logger = logging.getLogger(__name__)


class Transpiler:
    """
    Generic multi-step tool for transpiling content from one dialect to another.

    Transforms are registered per (from, to) dialect pair. Pairs of distinct
    dialects become edges of a DialectGraph; pairs of the same dialect are
    refinements that run whenever the pipeline passes through that dialect.
    Transpiling follows the route with the fewest hops.

    Registration is expected to finish before transpile() is used. The
    instance does no locking of its own.
    """

    def __init__(self):
        """Initialize an empty transpiler."""
        self._graph = DialectGraph()
        self._registry = TransformRegistry()
        self._runner = PipelineRunner(self._registry)
        self._logger = logger.getChild(self.__class__.__name__)

    def register(
        self, from_dialect: str, to_dialect: str, transform: TransformFn
    ) -> None:
        """
        Register a transform from one dialect to another.

        Args:
            from_dialect: Dialect the transform reads (e.g., '.svelte')
            to_dialect: Dialect the transform produces (e.g., '.jsx')
            transform: Callable receiving the FileState to modify

        Raises:
            TypeError: If transform is not callable
        """
        self._registry.register(from_dialect, to_dialect, transform)

        # Refinements never take part in routing
        if from_dialect == to_dialect:
            return

        from_id = self._graph.ensure_vertex(from_dialect)
        to_id = self._graph.ensure_vertex(to_dialect)
        self._graph.add_edge(from_id, to_id)

    add = register

    def resolve_path(self, from_dialect: str, to_dialect: str) -> list[str]:
        """
        Find the shortest route of dialects between two dialects.

        A dialect always resolves to itself, registered or not.

        Args:
            from_dialect: Starting dialect
            to_dialect: Target dialect

        Returns:
            Dialects along the route, both ends included

        Raises:
            NoPathError: If either dialect is unknown or no route exists
        """
        if from_dialect == to_dialect:
            return [from_dialect]

        from_id = self._graph.vertex_id(from_dialect)
        to_id = self._graph.vertex_id(to_dialect)
        if from_id is None or to_id is None:
            raise NoPathError(from_dialect, to_dialect)

        route = self._graph.shortest_path(from_id, to_id)
        return [self._graph.dialect_of(vertex_id) for vertex_id in route]

    path = resolve_path

    def can_transpile(self, from_dialect: str, to_dialect: str) -> bool:
        """Check whether a route exists between two dialects."""
        try:
            self.resolve_path(from_dialect, to_dialect)
        except NoPathError:
            return False
        return True

    def transpile(
        self,
        source_path: str | os.PathLike[str],
        target_dialect: str,
        source_bytes: bytes,
    ) -> bytes:
        """
        Transpile content from the dialect of ``source_path`` to ``target_dialect``.

        Args:
            source_path: Path of the source; its extension is the source dialect
            target_dialect: Dialect to produce
            source_bytes: Source content

        Returns:
            The transformed content

        Raises:
            NoPathError: If no route leads to the target dialect
            TransformError: If a transform fails along the way
        """
        _, source_dialect = split_extension(source_path)
        hops = self.resolve_path(source_dialect, target_dialect)
        self._logger.info(
            f"Transpiling {os.fspath(source_path)} via {' -> '.join(hops)}"
        )

        file = FileState.from_source(source_path, source_bytes)
        return self._runner.run(hops, file)

    def get_pipeline_info(self) -> dict[str, Any]:
        """
        Get information about the registered dialects and transforms.

        Returns:
            Dictionary with dialects, routing edges and transform counts per key
        """
        return {
            "transpiler_class": self.__class__.__name__,
            "dialects": self._graph.dialects(),
            "edges": self._graph.edges(),
            "transforms": self._registry.counts(),
        }
