import matplotlib

matplotlib.use("Agg")

import pytest

from sptree.graph import Graph


@pytest.fixture
def triangle() -> Graph:
    """Order 3 with a short two-hop path and a heavy direct edge."""
    return Graph.from_edges(3, [(0, 1, 1), (1, 2, 1), (0, 2, 5)])
