"""
Pytest configuration and fixtures.
"""
import sys
from pathlib import Path

import pytest

# Add python/ to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "python"))

from tree_center_cli import SAMPLE_EDGES  # noqa: E402
from tree_graph import build_graph  # noqa: E402


@pytest.fixture
def sample_edges():
    return list(SAMPLE_EDGES)


@pytest.fixture
def sample_tree(sample_edges):
    return build_graph(sample_edges)


@pytest.fixture
def numbers():
    """Turn a list of nodes into their numbers."""
    return lambda nodes: [n.number for n in nodes]
