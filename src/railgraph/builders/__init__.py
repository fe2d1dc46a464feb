"""Collaborators that populate diagrams from already-extracted facts."""

from .document import GraphDocument, build_diagram, load_graph_document
from .models import (
    AssociationFacts,
    ColumnFacts,
    ModelFacts,
    ModelsDiagramBuilder,
    SchemaFacts,
    load_schema_facts,
)

__all__ = [
    "GraphDocument",
    "build_diagram",
    "load_graph_document",
    "ModelsDiagramBuilder",
    "SchemaFacts",
    "ModelFacts",
    "ColumnFacts",
    "AssociationFacts",
    "load_schema_facts",
]
