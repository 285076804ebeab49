"""
Print a tree and its center.

Usage:
    tree-center
    tree-center --edges edges.csv
    tree-center --collapse --plot
"""
import argparse
import logging
import sys

from random_tree import read_edges_csv
from tree_center import find_center
from tree_errors import TreeCenterError
from tree_graph import build_graph

logger = logging.getLogger(__name__)

# 16 node sample tree, the longest paths (e.g. 1-4-5-6-10-11-13-15) have 7 edges
# so the center is the pair 6,10
SAMPLE_EDGES = [
    (1, 4), (2, 4), (3, 4), (4, 5), (5, 6),
    (6, 7), (7, 8), (7, 9), (6, 10), (10, 11),
    (11, 12), (11, 13), (12, 14), (13, 15), (13, 16),
]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Find the center of a tree by leaf peeling")
    parser.add_argument("--edges", help="CSV file with source,target columns (default: built in sample tree)")
    parser.add_argument("--collapse", action="store_true", help="Report a single center node")
    parser.add_argument("--reference-edges", action="store_true",
                        help="Skip edges whose both nodes already exist")
    parser.add_argument("--plot", action="store_true", help="Draw the tree with matplotlib")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    edges = read_edges_csv(args.edges) if args.edges else SAMPLE_EDGES
    try:
        tree = build_graph(edges, link_existing=not args.reference_edges)
        centers = find_center(tree, collapse=args.collapse)
    except TreeCenterError as e:
        logger.debug("center finding failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    for node in tree:
        print(node)
    print(f"Center: {','.join(str(n.number) for n in centers)}")

    if args.plot:
        import matplotlib.pyplot as plt
        from tree_plot import draw_tree

        draw_tree(tree, centers)
        plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
