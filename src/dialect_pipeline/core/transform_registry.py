"""Registry of transforms keyed by ordered dialect pairs."""

import logging
from collections.abc import Iterator

from .protocols import TransformFn

logger = logging.getLogger(__name__)


def edge_key(from_dialect: str, to_dialect: str) -> str:
    """
    Return the registry key for a pair of dialects.

    (e.g. edge_key(".svelte", ".html") => ".svelte>.html")
    """
    return f"{from_dialect}>{to_dialect}"


def transform_name(transform: TransformFn) -> str:
    """Best-effort readable name for a transform, used in logs and errors."""
    return getattr(
        transform, "__qualname__", getattr(transform, "__name__", repr(transform))
    )


class TransformRegistry:
    """
    Registry of transforms for each ordered (from, to) dialect pair.

    Transforms for one pair are kept in registration order and replayed
    in that order. Entries are only ever appended.
    """

    def __init__(self):
        """Initialize the transform registry."""
        self._transforms: dict[str, list[TransformFn]] = {}
        self._logger = logger.getChild(self.__class__.__name__)

    def register(
        self, from_dialect: str, to_dialect: str, transform: TransformFn
    ) -> None:
        """
        Append a transform to the list for (from_dialect, to_dialect).

        Args:
            from_dialect: Dialect the transform reads (e.g., '.svelte')
            to_dialect: Dialect the transform produces (e.g., '.jsx');
                        equal to from_dialect for a refinement
            transform: Callable taking the FileState to transform

        Raises:
            TypeError: If transform is not callable
        """
        if not callable(transform):
            raise TypeError(
                f"Transform for '{from_dialect}' -> '{to_dialect}' must be callable, "
                f"got {type(transform).__name__}"
            )

        key = edge_key(from_dialect, to_dialect)
        transforms = self._transforms.setdefault(key, [])
        transforms.append(transform)
        self._logger.info(
            f"Registered transform '{transform_name(transform)}' for '{key}' "
            f"(position {len(transforms)})"
        )

    def lookup(self, from_dialect: str, to_dialect: str) -> list[TransformFn]:
        """
        Get the transforms registered for a dialect pair.

        Returns:
            Transforms in registration order; empty if none are registered
        """
        return list(self._transforms.get(edge_key(from_dialect, to_dialect), ()))

    def count(self, from_dialect: str, to_dialect: str) -> int:
        """Return how many transforms are registered for a dialect pair."""
        return len(self._transforms.get(edge_key(from_dialect, to_dialect), ()))

    def counts(self) -> dict[str, int]:
        """Return the number of transforms registered under each key."""
        return {key: len(fns) for key, fns in self._transforms.items()}

    def keys(self) -> list[str]:
        """Return registered keys in first-registration order."""
        return list(self._transforms)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        """Return the number of registered dialect pairs."""
        return len(self._transforms)

    def __contains__(self, pair: tuple[str, str]) -> bool:
        """Check if a (from, to) pair has any transforms (supports 'in')."""
        from_dialect, to_dialect = pair
        return edge_key(from_dialect, to_dialect) in self._transforms
