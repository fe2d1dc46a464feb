"""Raw graph documents: JSON lists of node and edge tuples."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..graph import DiagramGraph

logger = logging.getLogger(__name__)


class GraphDocument(BaseModel):
    """A diagram described as node and edge tuples.

    Tuples are kept as given; their shape is only checked when the diagram
    is pruned.
    """
    origin: str = ""
    diagram_kind: str = Field(alias="diagramKind", default="")
    size: tuple[int, int] | None = None
    nodes: list[list[Any]] = Field(default_factory=list)
    edges: list[list[Any]] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


def load_graph_document(path: str | Path) -> GraphDocument:
    """Load and validate a graph document.

    Raises:
        FileNotFoundError: If the document does not exist
        ValueError: If the document is not valid JSON or has the wrong shape
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Graph document not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return GraphDocument.model_validate(data)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in graph document {path}: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid graph document {path}: {e}")


def build_diagram(document: GraphDocument, **diagram_options) -> DiagramGraph:
    """Replay a document's nodes and edges into a new diagram."""
    size = diagram_options.pop("size", None) or document.size
    diagram = DiagramGraph(document.origin, size, **diagram_options)
    diagram.set_diagram_kind(document.diagram_kind)

    for node in document.nodes:
        diagram.add_node(tuple(node))
    for edge in document.edges:
        diagram.add_edge(tuple(edge))

    logger.debug(f"Built diagram with {len(diagram.nodes)} nodes and {len(diagram.edges)} edges")
    return diagram
