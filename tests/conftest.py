"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import numpy as np
import pytest

from graphmath.datasets import wiki_graph as load_wiki_graph


@pytest.fixture
def wiki_graph() -> dict[str, np.ndarray]:
    """Return the bundled 6-node example graph."""
    return load_wiki_graph()


@pytest.fixture
def disconnected_graph() -> list[tuple[int, int, float]]:
    """Return two components: 1 -> 2 and 3 -> 4 -> 5."""
    return [
        (1, 2, 3.0),
        (3, 4, 1.0),
        (4, 5, 2.5),
    ]


@pytest.fixture
def sparse_ids_graph() -> list[tuple[int, int, float]]:
    """Return a graph whose node ids skip 3 and 5."""
    return [
        (1, 2, 1.0),
        (2, 4, 2.0),
        (4, 6, 0.5),
        (1, 6, 10.0),
    ]
