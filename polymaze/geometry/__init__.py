"""
Geometry primitives for polymaze.

- cursor: turtle cursor and in-memory drawing surface
- boundary: dense hole/line flags from sparse boundary specifications
- spanning_tree: randomized Kruskal over tiling adjacency graphs
- holey_path: planning and drawing of polygon boundaries with holes
"""

from __future__ import annotations

from .boundary import resolve_holes, resolve_lines
from .cursor import Cursor, CursorState, DrawingSurface, Segment
from .holey_path import EdgePlan, PathStroke, draw_path, plan_path
from .spanning_tree import (
    AdjacencyGraph,
    UnionFind,
    is_spanning_tree,
    open_wall_mask,
    select_spanning_tree,
)

__all__ = [
    "AdjacencyGraph",
    "Cursor",
    "CursorState",
    "DrawingSurface",
    "EdgePlan",
    "PathStroke",
    "Segment",
    "UnionFind",
    "draw_path",
    "is_spanning_tree",
    "open_wall_mask",
    "plan_path",
    "resolve_holes",
    "resolve_lines",
    "select_spanning_tree",
]
