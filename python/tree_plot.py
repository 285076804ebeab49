from typing import Iterable, Optional

import matplotlib.pyplot as plt
import networkx as nx

from tree_graph import Graph, Node, to_networkx


def draw_tree(graph: Graph, centers: Iterable[Node] = (), ax=None, title: Optional[str] = None):
    """Draw the tree with the center nodes highlighted. Returns the axes."""
    if ax is None:
        _fig, ax = plt.subplots(figsize=(6, 6))
    G = to_networkx(graph)
    center_numbers = {node.number for node in centers}
    pos = nx.spring_layout(G, seed=42)
    colors = ["tab:red" if n in center_numbers else "tab:blue" for n in G.nodes()]
    nx.draw_networkx_nodes(G, pos, node_size=300, node_color=colors, alpha=0.7, ax=ax)
    nx.draw_networkx_edges(G, pos, alpha=0.5, ax=ax)
    nx.draw_networkx_labels(G, pos, ax=ax)
    if title is None:
        title = "center " + ",".join(str(n) for n in sorted(center_numbers))
    ax.set_title(title)
    return ax
