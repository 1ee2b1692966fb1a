import pytest

from hamviz.graphs import Graph
from hamviz.graphs.families import make_graph


@pytest.fixture
def five_cycle() -> Graph:
    return make_graph("five_cycle")


@pytest.fixture
def k4() -> Graph:
    return make_graph("complete_k4")


@pytest.fixture
def k23() -> Graph:
    return make_graph("bipartite_k23")
