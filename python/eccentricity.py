import logging
from collections import deque
from typing import Dict, List

from tree_errors import InvalidInput
from tree_graph import Graph, Node

# Brute force center: BFS from every node, O(n*(n+m)).
# Used to cross check the leaf peeling result.

logger = logging.getLogger(__name__)


def distances(graph: Graph, source: Node) -> Dict[int, int]:
    """Hop distance from source to every node reachable from it."""
    d = {source.number: 0}
    Q = deque([source])
    while Q:
        v = Q.popleft()
        for w in v.siblings:
            # w found for the first time
            if w.number not in d:
                d[w.number] = d[v.number] + 1
                Q.append(w)
    return d


def eccentricities(graph: Graph) -> Dict[int, int]:
    result = {}
    for node in graph:
        d = distances(graph, node)
        if len(d) != len(graph):
            raise InvalidInput(f"graph is disconnected, node {node.number} reaches {len(d)} of {len(graph)} nodes")
        result[node.number] = max(d.values())
    return result


def center_by_eccentricity(graph: Graph) -> List[Node]:
    if len(graph) == 0:
        raise InvalidInput("cannot find the center of an empty graph")
    ecc = eccentricities(graph)
    radius = min(ecc.values())
    logger.debug(f"radius {radius}")
    return [node for node in graph if ecc[node.number] == radius]
