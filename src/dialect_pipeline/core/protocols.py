from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .file_state import FileState


class TransformFn(Protocol):
    """Defines the contract for a single registered transform."""

    def __call__(self, file: "FileState") -> None:
        """
        Transform the file in place.

        Implementations read ``file.data`` and may replace it. ``file.path()``
        and ``file.ext`` report the dialect the pipeline is currently in.
        Any exception raised aborts the pipeline.
        """
        ...


class TranspilerInterface(Protocol):
    """
    Read-only contract for resolving and running dialect pipelines.

    Registration lives on the concrete Transpiler; consumers that only need
    to convert content should depend on this protocol instead.
    """

    def resolve_path(self, from_dialect: str, to_dialect: str) -> list[str]:
        """
        Return the dialect hops from one dialect to another.

        Raises:
            NoPathError: If no route connects the two dialects
        """
        ...

    def transpile(
        self, source_path: str, target_dialect: str, source_bytes: bytes
    ) -> bytes:
        """Convert ``source_bytes`` from the dialect of ``source_path``."""
        ...
