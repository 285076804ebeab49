import logging
from collections import deque
from typing import List

from tree_errors import InvalidInput, NotATree
from tree_graph import Graph, Node

# Center of a tree by leaf peeling.
#
# The leaves are removed layer by layer. Every removal lowers the remaining
# degree of the neighbors; a neighbor whose remaining degree drops to 1 is a
# new leaf and joins the queue exactly once. When at most two nodes are left
# unpeeled they are the center.
#
# The remaining degree lives in its own table so the adjacency lists of the
# graph stay untouched.

logger = logging.getLogger(__name__)


def find_center(graph: Graph, collapse=False) -> List[Node]:
    """
    Returns the center of the tree: one node, or two adjacent nodes when the
    longest path has an odd number of edges.

    With collapse=True a two node center is reduced to the node that became
    a leaf first, so exactly one node is returned.
    """
    nodes_len = len(graph)
    if nodes_len == 0:
        raise InvalidInput("cannot find the center of an empty graph")
    if nodes_len == 1:
        return list(graph)

    edges_len = graph.edge_count()
    if edges_len != nodes_len - 1:
        raise NotATree(f"a tree with {nodes_len} nodes has {nodes_len - 1} edges, got {edges_len}")

    remaining = {node.number: node.degree for node in graph}
    removed = set()
    leaves = deque(node for node in graph if node.degree == 1)
    unpeeled = nodes_len

    while unpeeled > 2:
        if not leaves:
            raise NotATree(f"peeling stopped with {unpeeled} nodes left, the graph has a cycle")
        # peel the whole current layer, new leaves queue up behind it
        for _ in range(len(leaves)):
            leaf = leaves.popleft()
            removed.add(leaf.number)
            unpeeled -= 1
            logger.debug(f"peel leaf {leaf.number}, {unpeeled} nodes left")
            for neighbor in leaf.siblings:
                if neighbor.number in removed:
                    continue
                remaining[neighbor.number] -= 1
                if remaining[neighbor.number] == 1:
                    leaves.append(neighbor)

    # the queue holds exactly the unpeeled nodes now
    centers = list(leaves)
    logger.debug(f"center {[n.number for n in centers]}")
    if collapse:
        return centers[:1]
    return centers


def central_node(graph: Graph) -> Node:
    return find_center(graph, collapse=True)[0]
