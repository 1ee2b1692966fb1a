from hamviz.graphs.model import Adjacency, Graph, build_adjacency, load_graph
from hamviz.graphs import families  # registers families

__all__ = ["Adjacency", "Graph", "build_adjacency", "load_graph", "families"]
