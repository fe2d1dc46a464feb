"""Graphviz DOT renderer."""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from .framework import GraphRenderer
from .models import Edge, EdgeKind, MemberLists, Node, NodeKind

if TYPE_CHECKING:
    from .diagram import DiagramGraph

logger = logging.getLogger(__name__)

LINE_BREAK = "\\l"  # Left-justified line break inside DOT labels


def quote(name) -> str:
    """Quote a node name. No escaping is applied."""
    return '"' + str(name) + '"'


def _rows(values) -> str:
    return LINE_BREAK.join(str(v) for v in (values or []))


def _model_options(node: Node) -> str:
    return f'shape=Mrecord, label="{{{node.name}|{_rows(node.attributes)}{LINE_BREAK}}}"'


def _class_options(node: Node) -> str:
    return f'shape=record, label="{{{node.name}|}}"'


def _controller_options(node: Node) -> str:
    members = node.attributes or MemberLists()
    compartments = "|".join(
        _rows(bucket) + LINE_BREAK
        for bucket in (members.public, members.protected, members.private)
    )
    return f'shape=Mrecord, label="{{{node.name}|{compartments}}}"'


def _module_options(node: Node) -> str:
    return f"shape=box, style=dotted, label={quote(node.name)}"


def _no_options(node: Node) -> str:
    return ""


_NODE_OPTIONS: dict[NodeKind, Callable[[Node], str]] = {
    NodeKind.MODEL: _model_options,
    NodeKind.MODEL_BRIEF: _no_options,
    NodeKind.CLASS: _class_options,
    NodeKind.CLASS_BRIEF: lambda node: "shape=box",
    NodeKind.CONTROLLER: _controller_options,
    NodeKind.CONTROLLER_BRIEF: _no_options,
    NodeKind.MODULE: _module_options,
}

_EDGE_OPTIONS: dict[EdgeKind, str] = {
    EdgeKind.ONE_ONE: "arrowtail=odot, arrowhead=dot, dir=both",
    EdgeKind.ONE_MANY: "arrowtail=crow, arrowhead=dot, dir=both",
    EdgeKind.MANY_MANY: "arrowtail=crow, arrowhead=crow, dir=both",
    EdgeKind.IS_A: 'arrowhead="none", arrowtail="onormal"',
    EdgeKind.EVENT: "fontsize=10",
}


class DotRenderer(GraphRenderer):
    """Graphviz DOT renderer for diagram graphs."""

    @property
    def format_name(self) -> str:
        return "dot"

    def get_file_extension(self) -> str:
        return ".dot"

    def render(self, diagram: "DiagramGraph", hop_limit: int | None = 0) -> str:
        """Render the diagram, leaving out what pruning excludes."""
        nodes, edges = diagram.visible_elements(hop_limit)
        logger.info(f"Rendering {len(nodes)} nodes and {len(edges)} edges as DOT")

        return (self.render_header(diagram)
                + "".join(self.render_node(node) for node in nodes)
                + "".join(self.render_edge(edge) for edge in edges)
                + self.render_footer())

    def render_header(self, diagram: "DiagramGraph") -> str:
        graph_options = {"overlap": "false", "splines": "true"}
        if diagram.size:
            width, height = diagram.size
            graph_options["size"] = f'"{width},{height}"'

        result = (f"digraph {diagram.diagram_kind.lower()}_diagram {{\n"
                  f"\tgraph[{' '.join(f'{k}={v}' for k, v in graph_options.items())}]\n")
        if diagram.show_label:
            result += self.render_label(diagram)
        return result

    def render_footer(self) -> str:
        return "}\n"

    def render_label(self, diagram: "DiagramGraph") -> str:
        """Build the metadata node describing the diagram."""
        timestamp = diagram.clock().strftime("%b %d %Y - %H:%M")
        return ('\t_diagram_info [shape="plaintext", '
                f'label="{diagram.diagram_kind} diagram{LINE_BREAK}'
                f"Date: {timestamp}{LINE_BREAK}"
                f"Schema version: {diagram.schema_version}{LINE_BREAK}"
                f"Generated by {diagram.product}{LINE_BREAK}"
                '", fontsize=14]\n')

    def render_node(self, node: Node) -> str:
        """Render a single node line, or a cluster for state machines."""
        if node.kind == NodeKind.AASM:
            body = "\n  ".join(str(line) for line in (node.attributes or []))
            return (f"subgraph cluster_{node.name.lower()} {{\n"
                    f"\tlabel = {quote(node.name)}\n"
                    f"\t{body}}}\n")

        formatter = _NODE_OPTIONS.get(node.kind)
        if formatter is None:
            logger.warning(f"Unknown node kind {node.kind!r} for {node.name!r}, rendering without style")
            kind_options = ""
        else:
            kind_options = formatter(node)

        parts = [kind_options] if kind_options else []
        parts.extend(f"{k}={v}" for k, v in node.options.items())
        return f"\t{quote(node.name)} [{', '.join(parts)}]\n"

    def render_edge(self, edge: Edge) -> str:
        """Render a single edge line."""
        parts = [f'label="{edge.label}"'] if edge.label else []
        kind_options = _EDGE_OPTIONS.get(edge.kind)
        if kind_options is None:
            logger.warning(f"Unknown edge kind {edge.kind!r} for {edge.from_node!r} -> {edge.to_node!r}, "
                           "rendering without style")
        else:
            parts.append(kind_options)
        return f"\t{quote(edge.from_node)} -> {quote(edge.to_node)} [{', '.join(parts)}]\n"
