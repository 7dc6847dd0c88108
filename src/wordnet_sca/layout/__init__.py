"""Layered layout for rendering hypernym neighbourhoods.

Query synsets sit on the bottom row and each hypernym level one row higher,
so the shortest common ancestor appears above both queried nouns.
"""

from .classify import EdgeType, classify_edges
from .depth import compute_depths
from .layers import build_layout_graph, compute_positions
from .render import render_graph

__all__ = [
    "compute_depths",
    "EdgeType",
    "classify_edges",
    "build_layout_graph",
    "compute_positions",
    "render_graph",
]
