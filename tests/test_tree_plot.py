import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from tree_center import find_center  # noqa: E402
from tree_graph import build_graph  # noqa: E402
from tree_plot import draw_tree  # noqa: E402


def test_draw_tree(sample_tree):
    ax = draw_tree(sample_tree, find_center(sample_tree))
    assert ax.get_title() == "center 6,10"
    plt.close("all")


def test_draw_tree_on_given_axes():
    graph = build_graph([(1, 2), (2, 3)])
    fig, ax = plt.subplots()
    assert draw_tree(graph, find_center(graph), ax=ax, title="path") is ax
    assert ax.get_title() == "path"
    plt.close(fig)
