"""Diagram graph builder."""

import logging
from collections.abc import Callable
from datetime import datetime

from .. import __version__
from .framework import get_renderer
from .models import Edge, Node
from .pruning import surviving_positions

logger = logging.getLogger(__name__)


class DiagramGraph:
    """Accumulates nodes and edges for a single diagram and renders it.

    Collectors call ``add_node``/``add_edge`` during one build pass, then
    ``render`` produces the output. Nodes and edges are kept in insertion
    order; duplicate names and edges to absent nodes are allowed.
    """

    def __init__(self, origin_name: str, size: tuple[int, int] | None = None, *,
                 clock: Callable[[], datetime] = datetime.now,
                 schema_version: str = "",
                 product: str = f"railgraph {__version__}"):
        self.origin_name = origin_name
        self.size = tuple(size) if size else None
        self.diagram_kind = ""
        self.show_label = False
        self.clock = clock
        self.schema_version = schema_version
        self.product = product
        self.nodes: list = []
        self.edges: list = []

    def add_node(self, node: Node | tuple) -> None:
        """Add a node to the graph."""
        self.nodes.append(node)

    def add_edge(self, edge: Edge | tuple) -> None:
        """Add an edge to the graph."""
        self.edges.append(edge)

    def set_diagram_kind(self, kind: str) -> None:
        self.diagram_kind = kind

    def set_show_label(self, value: bool) -> None:
        self.show_label = bool(value)

    def visible_elements(self, hop_limit: int | None = 0) -> tuple[list[Node], list[Edge]]:
        """Nodes and edges left after pruning, in insertion order.

        Raises:
            GraphShapeError: If pruning runs over malformed nodes or edges
        """
        node_ids, edge_ids = surviving_positions(self.nodes, self.edges, self.origin_name, hop_limit)

        excluded_nodes = len(self.nodes) - len(node_ids)
        excluded_edges = len(self.edges) - len(edge_ids)
        if excluded_nodes or excluded_edges:
            logger.info(f"Pruning excluded {excluded_nodes} nodes and {excluded_edges} edges")

        return ([Node.from_tuple(n) for i, n in enumerate(self.nodes) if i in node_ids],
                [Edge.from_tuple(e) for i, e in enumerate(self.edges) if i in edge_ids])

    def render(self, hop_limit: int | None = 0, format_name: str = "dot") -> str:
        """Render with the renderer registered for ``format_name``."""
        return get_renderer(format_name).render(self, hop_limit)

    def to_dot(self, hop_limit: int | None = 0) -> str:
        """Generate the DOT graph."""
        return self.render(hop_limit, "dot")

    def to_xmi(self) -> str:
        """Generate the XMI diagram (not yet implemented, returns "")."""
        return self.render(0, "xmi")
