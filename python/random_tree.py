import csv
import random
from typing import List, Optional, Tuple

# Create random trees for testing


def random_edges(num_nodes: int, seed: Optional[int] = None, first: int = 1) -> List[Tuple[int, int]]:
    """
    Grow a tree by attaching every new node to a random earlier one.
    Node numbers run from first to first+num_nodes-1.
    """
    if num_nodes < 0:
        raise ValueError("num_nodes must be >= 0")
    rnd = random.Random(seed)
    edges = []
    for num in range(1, num_nodes):
        parent = rnd.randint(0, num - 1)
        edges.append((first + parent, first + num))
    # shuffle so the insertion order does not follow the growth order
    rnd.shuffle(edges)
    return edges


def write_edges_csv(filename, edges):
    with open(filename, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["source", "target"])
        for u, v in edges:
            writer.writerow([u, v])


def read_edges_csv(filename) -> List[Tuple[int, int]]:
    edges = []
    with open(filename, newline="") as f:
        reader = csv.DictReader(f)  # Reads columns by name: "source", "target"
        for row in reader:
            edges.append((int(row["source"]), int(row["target"])))
    return edges


if __name__ == "__main__":
    write_edges_csv("random_tree.csv", random_edges(1000))
