"""Unit tests for DialectGraph."""

import pytest

from dialect_pipeline.core.dialect_graph import DialectGraph
from dialect_pipeline.exceptions import NoPathError


@pytest.fixture
def graph() -> DialectGraph:
    return DialectGraph()


class TestVertices:
    def test_ids_follow_first_appearance(self, graph: DialectGraph) -> None:
        assert graph.ensure_vertex(".md") == 0
        assert graph.ensure_vertex(".svelte") == 1
        assert graph.ensure_vertex(".md") == 0
        assert graph.ensure_vertex(".jsx") == 2

        assert graph.dialects() == [".md", ".svelte", ".jsx"]
        assert len(graph) == 3

    def test_lookups_are_inverse(self, graph: DialectGraph) -> None:
        for dialect in (".a", ".b", ".c"):
            vertex_id = graph.ensure_vertex(dialect)
            assert graph.dialect_of(vertex_id) == dialect
            assert graph.vertex_id(dialect) == vertex_id

    def test_unknown_dialect(self, graph: DialectGraph) -> None:
        assert graph.vertex_id(".nope") is None
        assert ".nope" not in graph
        with pytest.raises(KeyError):
            graph.dialect_of(7)


class TestEdges:
    def test_add_edge_is_idempotent(self, graph: DialectGraph) -> None:
        a = graph.ensure_vertex(".a")
        b = graph.ensure_vertex(".b")
        graph.add_edge(a, b)
        graph.add_edge(a, b)

        assert graph.edges() == [(".a", ".b")]

    def test_add_edge_requires_vertices(self, graph: DialectGraph) -> None:
        a = graph.ensure_vertex(".a")
        with pytest.raises(KeyError, match="Unknown vertex id"):
            graph.add_edge(a, 5)


class TestShortestPath:
    def test_direct_edge_beats_detour(self, graph: DialectGraph) -> None:
        md, svelte, jsx = (graph.ensure_vertex(d) for d in (".md", ".svelte", ".jsx"))
        graph.add_edge(md, svelte)
        graph.add_edge(svelte, jsx)
        graph.add_edge(md, jsx)

        assert graph.shortest_path(md, jsx) == [md, jsx]

    def test_multi_hop(self, graph: DialectGraph) -> None:
        ids = [graph.ensure_vertex(d) for d in (".a", ".b", ".c", ".d")]
        for u, v in zip(ids, ids[1:]):
            graph.add_edge(u, v)

        assert graph.shortest_path(ids[0], ids[3]) == ids

    def test_same_vertex(self, graph: DialectGraph) -> None:
        a = graph.ensure_vertex(".a")
        assert graph.shortest_path(a, a) == [a]

    def test_no_route(self, graph: DialectGraph) -> None:
        a = graph.ensure_vertex(".a")
        b = graph.ensure_vertex(".b")
        graph.add_edge(b, a)

        with pytest.raises(NoPathError) as excinfo:
            graph.shortest_path(a, b)

        assert excinfo.value.from_dialect == ".a"
        assert excinfo.value.to_dialect == ".b"

    def test_unknown_vertex(self, graph: DialectGraph) -> None:
        a = graph.ensure_vertex(".a")
        with pytest.raises(NoPathError):
            graph.shortest_path(a, 42)
        with pytest.raises(NoPathError):
            graph.shortest_path(42, a)
