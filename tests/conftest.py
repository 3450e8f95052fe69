import sys
from pathlib import Path

# Ensure package import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from engine.config import Config
from engine.scheduler import CooperativeScheduler
from structures import Graph


class FakeClock:
    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def _restore_config():
    """Config is class-level state; undo whatever a test changes."""
    saved = Config.snapshot()
    yield
    Config.restore(saved)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return CooperativeScheduler(clock=clock)


@pytest.fixture
def sample_graph():
    g = Graph()
    g.load_sample()
    return g


def make_graph(edges, directed=False):
    """Build a graph from [(a, b, w)] using the letters as node ids and values."""
    g = Graph(directed=directed)
    for a, b, _ in edges:
        for name in (a, b):
            if g.get_node(name) is None:
                g.add_node(name, node_id=name)
    for a, b, w in edges:
        g.add_edge(a, b, w)
    return g


@pytest.fixture
def graph_from():
    return make_graph
