"""
exceptions.py

Typed exception hierarchy raised by the dialect pipeline.
"""

from __future__ import annotations

# --------------------------------------------------------------------------- #
#                              Base hierarchy                                 #
# --------------------------------------------------------------------------- #


class TranspilerError(Exception):
    """
    Root of all errors raised by this project.
    """


class NoPathError(TranspilerError):
    """
    Raised when no chain of transforms connects two dialects.

    Examples
    --------
    * Source or target dialect was never registered (and they differ)
    * Both dialects are known but no directed route links them
    """

    def __init__(self, from_dialect: str, to_dialect: str):
        self.from_dialect = from_dialect
        self.to_dialect = to_dialect
        super().__init__(f"no path from '{from_dialect}' to '{to_dialect}'")


class TransformError(TranspilerError):
    """
    Raised when a registered transform fails while a pipeline is running.

    The exception raised by the transform is chained as ``__cause__``. The
    pipeline is aborted and no partially transformed content is returned.
    """

    def __init__(
        self,
        from_dialect: str,
        to_dialect: str,
        transform_name: str,
        path: str,
        cause: BaseException,
    ):
        self.from_dialect = from_dialect
        self.to_dialect = to_dialect
        self.transform_name = transform_name
        self.path = path
        super().__init__(
            f"transform '{transform_name}' ({from_dialect} -> {to_dialect}) "
            f"failed on '{path}': {cause}"
        )
