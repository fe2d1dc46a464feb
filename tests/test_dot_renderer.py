"""Tests for the DOT renderer."""

import logging
from datetime import datetime

import pytest

from railgraph.graph import DiagramGraph, DotRenderer
from railgraph.graph.models import Edge, EdgeKind, MemberLists, Node, NodeKind


@pytest.fixture
def renderer():
    return DotRenderer()


class TestNodeRendering:
    """Per-kind node formatting."""

    def test_model_node_is_record_with_rows(self, renderer):
        """Model attributes become left-justified rows under the name."""
        node = Node(NodeKind.MODEL, "User", ["name", "email :string"])

        assert renderer.render_node(node) == (
            '\t"User" [shape=Mrecord, label="{User|name\\lemail :string\\l}"]\n'
        )

    def test_model_without_attributes(self, renderer):
        """An empty model still gets its record compartments."""
        node = Node(NodeKind.MODEL, "Empty", [])

        assert renderer.render_node(node) == '\t"Empty" [shape=Mrecord, label="{Empty|\\l}"]\n'

    def test_brief_kinds_have_no_style(self, renderer):
        """Brief model and controller nodes render with the default box."""
        assert renderer.render_node(Node(NodeKind.MODEL_BRIEF, "User")) == '\t"User" []\n'
        assert renderer.render_node(Node(NodeKind.CONTROLLER_BRIEF, "UsersController")) == (
            '\t"UsersController" []\n'
        )

    def test_class_nodes(self, renderer):
        """Classes are empty records, brief classes plain boxes."""
        assert renderer.render_node(Node(NodeKind.CLASS, "Parser")) == (
            '\t"Parser" [shape=record, label="{Parser|}"]\n'
        )
        assert renderer.render_node(Node(NodeKind.CLASS_BRIEF, "Parser")) == '\t"Parser" [shape=box]\n'

    def test_controller_node_has_three_compartments(self, renderer):
        """Public, protected and private members each get a compartment."""
        node = Node(
            NodeKind.CONTROLLER,
            "UsersController",
            MemberLists(public=["index", "show"], protected=["authorize"], private=["load_user"]),
        )

        assert renderer.render_node(node) == (
            '\t"UsersController" [shape=Mrecord, '
            'label="{UsersController|index\\lshow\\l|authorize\\l|load_user\\l}"]\n'
        )

    def test_module_node_is_dotted_box(self, renderer):
        """Modules render as dotted boxes labeled with their name."""
        assert renderer.render_node(Node(NodeKind.MODULE, "Auth")) == (
            '\t"Auth" [shape=box, style=dotted, label="Auth"]\n'
        )

    def test_state_machine_renders_cluster(self, renderer):
        """State machines become subgraph clusters with the given body lines."""
        node = Node(NodeKind.AASM, "Order", ['"pending" -> "paid" [fontsize=10]', '"paid"'])

        assert renderer.render_node(node) == (
            'subgraph cluster_order {\n'
            '\tlabel = "Order"\n'
            '\t"pending" -> "paid" [fontsize=10]\n  "paid"}\n'
        )

    def test_node_options_are_appended(self, renderer):
        """Extra options follow the kind options as key=value pairs."""
        node = Node(NodeKind.CLASS_BRIEF, "Parser", options={"fontsize": 14, "color": "red"})

        assert renderer.render_node(node) == '\t"Parser" [shape=box, fontsize=14, color=red]\n'

    def test_node_options_on_brief_kind(self, renderer):
        """Options alone fill the list when the kind has none."""
        node = Node(NodeKind.MODEL_BRIEF, "User", options={"fontsize": 12})

        assert renderer.render_node(node) == '\t"User" [fontsize=12]\n'

    def test_unknown_node_kind_renders_bare(self, renderer, caplog):
        """Unrecognized kinds render without style and log a warning."""
        node = Node("widget", "Gadget")

        with caplog.at_level(logging.WARNING):
            line = renderer.render_node(node)

        assert line == '\t"Gadget" []\n'
        assert "Unknown node kind" in caplog.text


class TestEdgeRendering:
    """Per-kind edge formatting."""

    @pytest.mark.parametrize("kind, options", [
        (EdgeKind.ONE_ONE, "arrowtail=odot, arrowhead=dot, dir=both"),
        (EdgeKind.ONE_MANY, "arrowtail=crow, arrowhead=dot, dir=both"),
        (EdgeKind.MANY_MANY, "arrowtail=crow, arrowhead=crow, dir=both"),
        (EdgeKind.IS_A, 'arrowhead="none", arrowtail="onormal"'),
        (EdgeKind.EVENT, "fontsize=10"),
    ])
    def test_edge_kind_options(self, renderer, kind, options):
        """Each edge kind has its own arrow styling."""
        assert renderer.render_edge(Edge(kind, "A", "B")) == f'\t"A" -> "B" [{options}]\n'

    def test_one_many_without_label(self, renderer):
        """An empty label adds no label option."""
        line = renderer.render_edge(Edge(EdgeKind.ONE_MANY, "User", "Order", ""))

        assert "label=" not in line

    def test_one_many_with_label(self, renderer):
        """A label is the first option."""
        line = renderer.render_edge(Edge(EdgeKind.ONE_MANY, "User", "Order", "orders"))

        assert line == '\t"User" -> "Order" [label="orders", arrowtail=crow, arrowhead=dot, dir=both]\n'

    def test_unknown_edge_kind_keeps_label(self, renderer, caplog):
        """Unrecognized edge kinds keep their label but lose styling."""
        with caplog.at_level(logging.WARNING):
            line = renderer.render_edge(Edge("depends", "A", "B", "uses"))

        assert line == '\t"A" -> "B" [label="uses"]\n'
        assert "Unknown edge kind" in caplog.text


class TestHeader:
    """Graph header, label node and footer."""

    def test_header_without_size(self, renderer):
        """Without a canvas size only layout hints are emitted."""
        diagram = DiagramGraph("User")
        diagram.set_diagram_kind("Models")

        assert renderer.render_header(diagram) == (
            "digraph models_diagram {\n\tgraph[overlap=false splines=true]\n"
        )

    def test_header_with_size(self, renderer):
        """A canvas size is added as a quoted size attribute."""
        diagram = DiagramGraph("User", (8, 11))
        diagram.set_diagram_kind("Models")

        header = renderer.render_header(diagram)

        assert 'size="8,11"' in header
        assert header.endswith('\tgraph[overlap=false splines=true size="8,11"]\n')

    def test_label_node(self, renderer):
        """The label node lists kind, date, schema version and product."""
        diagram = DiagramGraph(
            "User",
            clock=lambda: datetime(2026, 10, 19, 14, 3),
            schema_version="20261019120000",
            product="railgraph 0.5.0",
        )
        diagram.set_diagram_kind("Models")
        diagram.set_show_label(True)

        header = renderer.render_header(diagram)

        assert header.endswith(
            '\t_diagram_info [shape="plaintext", label="Models diagram\\l'
            'Date: Oct 19 2026 - 14:03\\l'
            'Schema version: 20261019120000\\l'
            'Generated by railgraph 0.5.0\\l", fontsize=14]\n'
        )

    def test_footer(self, renderer):
        assert renderer.render_footer() == "}\n"

    def test_renderer_metadata(self, renderer):
        assert renderer.format_name == "dot"
        assert renderer.get_file_extension() == ".dot"
