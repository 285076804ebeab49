import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import networkx as nx

from tree_errors import DuplicateKeyConflict, InvalidInput

# Undirected, unweighted graph built edge by edge.
# Nodes are created on demand the first time their number shows up in an edge
# and are never removed again.

logger = logging.getLogger(__name__)


class Node:
    def __init__(self, number: int):
        self.number = number
        self.siblings: List["Node"] = []

    @property
    def degree(self) -> int:
        return len(self.siblings)

    def is_adjacent(self, other: "Node") -> bool:
        return any(sibling is other for sibling in self.siblings)

    def __str__(self):
        return f"{self.number}: {','.join(str(n.number) for n in self.siblings)}"

    def __repr__(self):
        return f"Node({self.number})"


class Graph:
    def __init__(self):
        # number -> node, kept in creation order
        self.nodes: Dict[int, Node] = {}

    def __len__(self):
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes.values())

    def __contains__(self, number) -> bool:
        return number in self.nodes

    def get(self, number: int) -> Optional[Node]:
        return self.nodes.get(number)

    def add(self, node: Node) -> Node:
        existing = self.nodes.get(node.number)
        if existing is not None:
            if existing is not node:
                raise DuplicateKeyConflict(node.number)
            return existing
        self.nodes[node.number] = node
        return node

    def edge_count(self) -> int:
        return sum(node.degree for node in self) // 2

    def edges(self) -> List[Tuple[int, int]]:
        """Every undirected edge once, as (first seen, second seen) pairs."""
        seen = set()
        result = []
        for node in self:
            for sibling in node.siblings:
                if sibling.number in seen:
                    continue
                result.append((node.number, sibling.number))
            seen.add(node.number)
        return result


def add_node(graph: Graph, number: int) -> Node:
    node = graph.get(number)
    if node is None:
        node = graph.add(Node(number))
        logger.debug(f"created node {number}")
    return node


def add_edge(graph: Graph, from_number: int, to_number: int, link_existing=True) -> List[Node]:
    """
    Insert the undirected edge from_number - to_number.

    Missing endpoints are created first, then both nodes are linked.
    With link_existing=False an edge between two nodes that both existed
    before the call is skipped, the way the original sample tool behaved.
    An edge that is already present is never linked twice.

    Returns the nodes created by this call (from before to).
    """
    if from_number == to_number:
        raise InvalidInput(f"self loop on node {from_number} is not allowed")

    created = []
    from_node = graph.get(from_number)
    if from_node is None:
        from_node = add_node(graph, from_number)
        created.append(from_node)
    to_node = graph.get(to_number)
    if to_node is None:
        to_node = add_node(graph, to_number)
        created.append(to_node)

    if not created and not link_existing:
        logger.debug(f"skip edge {from_number}-{to_number}, both nodes already exist")
        return created
    if from_node.is_adjacent(to_node):
        logger.debug(f"edge {from_number}-{to_number} already present")
        return created

    from_node.siblings.append(to_node)
    to_node.siblings.append(from_node)
    return created


def build_graph(edges: Iterable[Tuple[int, int]], nodes: Iterable[int] = (), link_existing=True) -> Graph:
    graph = Graph()
    for number in nodes:
        add_node(graph, number)
    for u, v in edges:
        add_edge(graph, u, v, link_existing=link_existing)
    logger.debug(f"built graph with {len(graph)} nodes and {graph.edge_count()} edges")
    return graph


def search(node: Node, target_number: int, exclude: Optional[Node] = None) -> Optional[Node]:
    """
    Depth first search for the node numbered target_number, starting at node.
    The search never steps into exclude. A visited set keeps it finite
    on graphs with cycles.
    """
    visited = set()
    if exclude is not None:
        visited.add(id(exclude))
    stack = [node]
    while stack:
        current = stack.pop()
        if id(current) in visited:
            continue
        visited.add(id(current))
        if current.number == target_number:
            return current
        # reversed so siblings are explored in insertion order
        for sibling in reversed(current.siblings):
            if id(sibling) not in visited:
                stack.append(sibling)
    return None


def to_networkx(graph: Graph) -> nx.Graph:
    G = nx.Graph()
    G.add_nodes_from(node.number for node in graph)
    G.add_edges_from(graph.edges())
    return G
