import pytest

from dijkstrax import Graph
from dijkstrax.cli import DEMO_EDGES, DEMO_VERTEX_COUNT


@pytest.fixture
def demo_graph() -> Graph:
    return Graph.from_edges(DEMO_VERTEX_COUNT, DEMO_EDGES)
