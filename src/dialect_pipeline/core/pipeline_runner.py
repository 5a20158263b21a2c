"""Pipeline runner that walks a dialect route and applies transforms."""

import logging

from ..exceptions import TransformError
from .file_state import FileState
from .transform_registry import TransformRegistry, transform_name

logger = logging.getLogger(__name__)


class PipelineRunner:
    """
    Executes the registered transforms along a route of dialects.

    For each hop the runner first applies the transition transforms
    (previous -> current) while the file still reports the previous
    dialect, then moves the file to the current dialect and applies its
    refinement transforms (current -> current). The first dialect of the
    route only gets its refinements.
    """

    def __init__(self, registry: TransformRegistry):
        """
        Initialize the pipeline runner.

        Args:
            registry: Registry the transforms are looked up in
        """
        self._registry = registry
        self._logger = logger.getChild(self.__class__.__name__)

    def run(self, hops: list[str], file: FileState) -> bytes:
        """
        Run every hop of the route against the file.

        Args:
            hops: Dialect route, starting with the file's own dialect
            file: File state owned by this run

        Returns:
            The transformed content

        Raises:
            TransformError: If any transform raises; nothing is returned
        """
        self._logger.debug(f"Running {len(hops)} hop(s) for {file.path()}")

        for i, ext in enumerate(hops):
            if i > 0:
                self._apply(hops[i - 1], ext, file)
            file.advance(ext)
            self._apply(ext, ext, file)

        return file.data

    def _apply(self, from_dialect: str, to_dialect: str, file: FileState) -> None:
        """Apply the transforms for one dialect pair, in registration order."""
        for transform in self._registry.lookup(from_dialect, to_dialect):
            name = transform_name(transform)
            self._logger.debug(
                f"Applying '{name}' ({from_dialect} -> {to_dialect}) to {file.path()}"
            )
            try:
                transform(file)
            except Exception as e:
                self._logger.error(f"Transform '{name}' failed on {file.path()}: {e}")
                raise TransformError(
                    from_dialect, to_dialect, name, file.path(), e
                ) from e
