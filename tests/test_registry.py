import pytest

from hamviz.registry import GRAPH_FAMILIES, Registry
from hamviz.graphs import Graph
from hamviz.graphs.families import make_graph


class TestRegistry:

    def test_duplicate_key(self):
        reg = Registry("things", {})
        reg.register("a")(object)
        with pytest.raises(KeyError):
            reg.register("a")(object)

    def test_unknown_key_lists_available(self):
        reg = Registry("things", {"a": 1})
        with pytest.raises(KeyError, match="Available"):
            reg.get("b")


class TestGraphFamilies:

    def test_presets_registered(self):
        for name in ("five_cycle", "complete_k4", "bipartite_k23", "cycle", "complete", "petersen"):
            assert name in GRAPH_FAMILIES.keys()

    def test_demo_graphs(self):
        assert len(make_graph("five_cycle").edges) == 5
        assert len(make_graph("complete_k4").edges) == 6
        k23 = make_graph("bipartite_k23")
        assert k23.vertices == (0, 1, 2, 3, 4)
        assert len(k23.edges) == 6

    def test_parametric(self):
        g = make_graph("cycle", n=7)
        assert isinstance(g, Graph)
        assert g.vertices == tuple(range(7))
        assert len(make_graph("complete_bipartite", n1=3, n2=3).edges) == 9

    def test_random_family_is_seeded(self):
        assert make_graph("erdos_renyi", n=7, seed=3) == make_graph("erdos_renyi", n=7, seed=3)
