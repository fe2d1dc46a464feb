"""Diagram graph model, pruning and renderers.

DOT is the primary output format; XMI is registered as a placeholder.
"""

from .diagram import DiagramGraph
from .dot import DotRenderer
from .framework import GraphRenderer, available_formats, get_renderer, register_renderer
from .models import Edge, EdgeKind, GraphShapeError, MemberLists, Node, NodeKind
from .pruning import prune_neighborhood, surviving_positions
from .xmi import XmiRenderer

register_renderer(DotRenderer())
register_renderer(XmiRenderer())

__all__ = [
    "DiagramGraph",
    "GraphRenderer",
    "DotRenderer",
    "XmiRenderer",
    "register_renderer",
    "get_renderer",
    "available_formats",
    "GraphShapeError",
    "prune_neighborhood",
    "surviving_positions",
    "Node",
    "Edge",
    "NodeKind",
    "EdgeKind",
    "MemberLists",
]
