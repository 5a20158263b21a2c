"""Mutable file record threaded through a single pipeline run."""

import os

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


def split_extension(path: str | os.PathLike[str]) -> tuple[str, str]:
    """
    Split a path into its base and extension.

    The extension starts at the last dot of the final path element and
    includes it, so only the last suffix counts ("hello.ssr.js" -> ".js").
    A final element without a dot has an empty extension.

    Args:
        path: File path to split

    Returns:
        Tuple of (base, extension) where base + extension == path
    """
    path = os.fspath(path)
    for i in range(len(path) - 1, -1, -1):
        char = path[i]
        if char == ".":
            return path[:i], path[i:]
        if char in ("/", os.sep):
            break
    return path, ""


class FileState(BaseModel):
    """
    The file being transpiled.

    ``data`` belongs to the transforms: each one reads it and may replace it.
    ``base`` is fixed from the original source path, while ``ext`` is moved
    forward by the pipeline runner as hops are taken.
    """

    data: bytes = Field(..., description="Current content of the file.")

    _base: str = PrivateAttr(default="")
    _ext: str = PrivateAttr(default="")

    model_config = ConfigDict(validate_assignment=True)

    @classmethod
    def from_source(
        cls, source_path: str | os.PathLike[str], data: bytes
    ) -> "FileState":
        """Create the state for a run starting at ``source_path``."""
        base, ext = split_extension(source_path)
        state = cls(data=data)
        state._base = base
        state._ext = ext
        return state

    @property
    def base(self) -> str:
        return self._base

    @property
    def ext(self) -> str:
        """Dialect of the current pipeline step."""
        return self._ext

    def path(self) -> str:
        """Return the path of the file the current step is producing."""
        return self._base + self._ext

    def advance(self, ext: str) -> None:
        """Move the file to the next dialect. Only the pipeline runner calls this."""
        self._ext = ext
