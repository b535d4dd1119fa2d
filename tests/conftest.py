from __future__ import annotations

import pytest

from pathgraph import Graph
from pathgraph.utils.checks import invariant_checks


@pytest.fixture(autouse=True)
def _check_invariants():
    with invariant_checks(True):
        yield


@pytest.fixture
def abc_graph() -> Graph:
    # A -> B (1), B -> C (1), A -> C (5)
    g = Graph()
    g.add_edge("A", "B", 1.0)
    g.add_edge("B", "C", 1.0)
    g.add_edge("A", "C", 5.0)
    return g
