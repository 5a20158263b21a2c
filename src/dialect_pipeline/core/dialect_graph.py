"""Directed graph of dialects and the direct transforms between them."""

import logging

import networkx as nx

from ..exceptions import NoPathError

logger = logging.getLogger(__name__)


class DialectGraph:
    """
    Graph whose vertices are dialects and whose edges are direct transforms.

    Each dialect gets an integer vertex id on first sight (0, 1, 2, ...).
    Ids are never reassigned. Edges carry a uniform weight of 1, so the
    shortest path is the one with the fewest hops.

    Among several equally short routes, the first one reached by
    Dijkstra's search wins; that follows edge registration order.
    """

    def __init__(self):
        """Initialize an empty dialect graph."""
        self._graph: nx.DiGraph = nx.DiGraph()
        self._ids: dict[str, int] = {}
        self._dialects: dict[int, str] = {}
        self._logger = logger.getChild(self.__class__.__name__)

    def ensure_vertex(self, dialect: str) -> int:
        """
        Return the vertex id for a dialect, allocating one if needed.

        Args:
            dialect: The dialect identifier (e.g., '.svelte')

        Returns:
            The vertex id of the dialect
        """
        vertex_id = self._ids.get(dialect)
        if vertex_id is not None:
            return vertex_id

        vertex_id = len(self._ids)
        self._ids[dialect] = vertex_id
        self._dialects[vertex_id] = dialect
        self._graph.add_node(vertex_id)
        self._logger.debug(f"Added dialect '{dialect}' as vertex {vertex_id}")
        return vertex_id

    def add_edge(self, from_id: int, to_id: int) -> None:
        """
        Add a directed unit-weight edge between two existing vertices.

        Adding the same edge again is a no-op.

        Raises:
            KeyError: If either vertex id was never allocated
        """
        for vertex_id in (from_id, to_id):
            if vertex_id not in self._dialects:
                raise KeyError(f"Unknown vertex id: {vertex_id}")

        if self._graph.has_edge(from_id, to_id):
            return

        self._graph.add_edge(from_id, to_id, weight=1)
        self._logger.debug(
            f"Added edge '{self._dialects[from_id]}' -> '{self._dialects[to_id]}'"
        )

    def shortest_path(self, from_id: int, to_id: int) -> list[int]:
        """
        Compute the minimum-hop route between two vertices.

        Args:
            from_id: Vertex id of the starting dialect
            to_id: Vertex id of the target dialect

        Returns:
            Vertex ids along the route, both ends included

        Raises:
            NoPathError: If either vertex is unknown or no route exists
        """
        try:
            return nx.dijkstra_path(self._graph, from_id, to_id, weight="weight")
        except (nx.NetworkXNoPath, nx.NodeNotFound) as e:
            raise NoPathError(
                self._dialects.get(from_id, str(from_id)),
                self._dialects.get(to_id, str(to_id)),
            ) from e

    def vertex_id(self, dialect: str) -> int | None:
        """Return the vertex id of a dialect, or None if it is unknown."""
        return self._ids.get(dialect)

    def dialect_of(self, vertex_id: int) -> str:
        """
        Return the dialect for a vertex id.

        Raises:
            KeyError: If the vertex id was never allocated
        """
        return self._dialects[vertex_id]

    def has_dialect(self, dialect: str) -> bool:
        return dialect in self._ids

    def dialects(self) -> list[str]:
        """Return all known dialects in vertex id order."""
        return [self._dialects[i] for i in range(len(self._dialects))]

    def edges(self) -> list[tuple[str, str]]:
        """Return all edges as (from_dialect, to_dialect) pairs."""
        return [
            (self._dialects[u], self._dialects[v]) for u, v in self._graph.edges()
        ]

    def __len__(self) -> int:
        """Return the number of known dialects."""
        return len(self._ids)

    def __contains__(self, dialect: str) -> bool:
        """Check if a dialect is known (supports 'in' operator)."""
        return self.has_dialect(dialect)
