"""
Random spanning trees over the region adjacency of one tiling level.

Each tiling method splits a polygon into a handful of regions. Two regions
that share an internal wall are adjacent, and the walls form a small fixed
``AdjacencyGraph``. Opening exactly the walls of a random spanning tree of
that graph keeps the maze perfect: every region stays reachable and no loop
is introduced.

Algorithm: randomized Kruskal. Edges are visited in a uniformly random order
and accepted when they join two separate union-find components, stopping
once ``num_nodes - 1`` edges have been accepted.

Ring tilings (k regions around a centre, k walls) are the cycle graph case,
where the tree leaves exactly one wall closed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray


class UnionFind:
    """
    Union-Find (Disjoint Set Union) data structure for Kruskal's algorithm.

    Tracks connected components while a spanning tree is assembled.
    """

    def __init__(self, n: int):
        """
        Initialize union-find structure.

        Args:
            n: Number of elements
        """
        self.parent = list(range(n))
        self.rank = [0] * n
        self.components = n

    def find(self, x: int) -> int:
        """
        Find root of element with path compression.

        Args:
            x: Element to find

        Returns:
            Root of element's set
        """
        if self.parent[x] != x:
            self.parent[x] = self.find(self.parent[x])
        return self.parent[x]

    def union(self, x: int, y: int) -> bool:
        """
        Union two sets by rank.

        Args:
            x: First element
            y: Second element

        Returns:
            True if sets were merged (not already connected)
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.rank[root_x] < self.rank[root_y]:
            root_x, root_y = root_y, root_x
        self.parent[root_y] = root_x
        if self.rank[root_x] == self.rank[root_y]:
            self.rank[root_x] += 1

        self.components -= 1
        return True


@dataclass(frozen=True)
class AdjacencyGraph:
    """
    Fixed wall layout of one tiling method.

    Attributes:
        num_nodes: Number of regions
        edges: Pairs of 0-based region indices sharing an internal wall,
            in the order the walls are assigned to sub-polygon sides
    """

    num_nodes: int
    edges: tuple[tuple[int, int], ...]

    def __post_init__(self):
        if self.num_nodes < 1:
            raise ValueError(f"AdjacencyGraph needs at least one node, got {self.num_nodes}")

        uf = UnionFind(self.num_nodes)
        for a, b in self.edges:
            if not (0 <= a < self.num_nodes and 0 <= b < self.num_nodes):
                raise ValueError(f"Edge ({a}, {b}) references a node outside [0, {self.num_nodes})")
            if a == b:
                raise ValueError(f"Edge ({a}, {b}) is a self-loop")
            uf.union(a, b)

        if uf.components != 1:
            raise ValueError(f"AdjacencyGraph is not connected ({uf.components} components)")

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    @classmethod
    def from_pairs(cls, starts: Sequence[int], ends: Sequence[int]) -> AdjacencyGraph:
        """Build a graph from parallel lists of 1-based region labels."""
        if len(starts) != len(ends):
            raise ValueError("starts and ends must have the same length")
        edges = tuple((int(a) - 1, int(b) - 1) for a, b in zip(starts, ends, strict=True))
        return cls(max(max(starts), max(ends)), edges)

    @classmethod
    def cycle(cls, n: int) -> AdjacencyGraph:
        """Ring of ``n`` regions where region i touches region i + 1 (mod n)."""
        return cls(n, tuple((i, (i + 1) % n) for i in range(n)))

    @classmethod
    def path(cls, n: int) -> AdjacencyGraph:
        return cls(n, tuple((i, i + 1) for i in range(n - 1)))

    @classmethod
    def star(cls, leaves: int) -> AdjacencyGraph:
        """Centre region 0 touching ``leaves`` outer regions."""
        return cls(leaves + 1, tuple((0, i + 1) for i in range(leaves)))


def select_spanning_tree(graph: AdjacencyGraph, rng: np.random.Generator) -> NDArray:
    """
    Pick a random spanning tree of ``graph``.

    Args:
        graph: Connected adjacency graph
        rng: Random source

    Returns:
        Sorted indices into ``graph.edges`` of exactly ``num_nodes - 1`` edges
    """
    target = graph.num_nodes - 1
    uf = UnionFind(graph.num_nodes)
    accepted: list[int] = []

    for edge_index in rng.permutation(graph.num_edges):
        if len(accepted) == target:
            break
        a, b = graph.edges[edge_index]
        if uf.union(a, b):
            accepted.append(int(edge_index))

    return np.array(sorted(accepted), dtype=int)


def open_wall_mask(graph: AdjacencyGraph, rng: np.random.Generator) -> NDArray:
    """Boolean mask aligned with ``graph.edges``; True marks an opened wall."""
    mask = np.zeros(graph.num_edges, dtype=bool)
    mask[select_spanning_tree(graph, rng)] = True
    return mask


def is_spanning_tree(graph: AdjacencyGraph, edge_indices: Sequence[int]) -> bool:
    """Check that the chosen edges are acyclic and touch every node."""
    if len(edge_indices) != graph.num_nodes - 1:
        return False
    uf = UnionFind(graph.num_nodes)
    for edge_index in edge_indices:
        a, b = graph.edges[edge_index]
        if not uf.union(a, b):
            return False
    return uf.components == 1
