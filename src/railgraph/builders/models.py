"""Models diagram builder.

Turns declarative schema facts (models, columns, associations) into a
``DiagramGraph``. Nothing here inspects code; the facts arrive already
extracted, typically as a JSON document.
"""

import json
import logging
import re
from enum import Enum
from pathlib import Path

import inflection
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..config import ModelsConfig
from ..graph import DiagramGraph, Edge, EdgeKind, Node, NodeKind

logger = logging.getLogger(__name__)

BASE_CLASS = "ActiveRecord::Base"

MAGIC_FIELDS = [
    # Restful Authentication
    "login", "crypted_password", "salt", "remember_token", "remember_token_expires_at",
    "activation_code", "activated_at",
    # Rails magic field names
    "created_at", "created_on", "updated_at", "updated_on",
    "lock_version", "type", "id", "position", "parent_id", "lft",
    "rgt", "quote", "template",
]


class ModelType(str, Enum):
    """What a schema entry describes."""
    ACTIVE_RECORD = "active_record"
    CLASS = "class"
    MODULE = "module"


class AssociationMacro(str, Enum):
    BELONGS_TO = "belongs_to"
    HAS_ONE = "has_one"
    HAS_MANY = "has_many"
    HAS_AND_BELONGS_TO_MANY = "has_and_belongs_to_many"


class ColumnFacts(BaseModel):
    name: str
    type: str = "string"


class AssociationFacts(BaseModel):
    """A declared association between two models."""
    macro: AssociationMacro
    name: str
    class_name: str = Field(alias="className")
    through: str | None = None

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ModelFacts(BaseModel):
    """Everything the builder needs to know about one model or class."""
    name: str
    kind: ModelType = ModelType.ACTIVE_RECORD
    superclass: str = BASE_CLASS
    abstract: bool = False
    table_name: str | None = Field(alias="tableName", default=None)
    columns: list[ColumnFacts] = Field(default_factory=list)
    associations: list[AssociationFacts] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class SchemaFacts(BaseModel):
    """A full schema: the models in processing order."""
    schema_version: str = Field(alias="schemaVersion", default="")
    models: list[ModelFacts] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


def load_schema_facts(path: str | Path) -> SchemaFacts:
    """Load and validate a schema facts document.

    Raises:
        FileNotFoundError: If the document does not exist
        ValueError: If the document is not valid JSON or has the wrong shape
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Schema document not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return SchemaFacts.model_validate(data)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in schema document {path}: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid schema document {path}: {e}")


def _singular_class_name(name: str) -> str:
    return inflection.camelize(inflection.singularize(inflection.underscore(name)))


class ModelsDiagramBuilder:
    """Builds a models diagram from schema facts."""

    def __init__(self, options: ModelsConfig | None = None, origin_name: str = "",
                 **diagram_options):
        self.options = options or ModelsConfig()
        self.origin_name = origin_name
        self.diagram_options = diagram_options
        # Many-to-many pairs already emitted, to skip the reverse side
        self._habtm: list[tuple[str, str, str]] = []

    def build(self, schema: SchemaFacts) -> DiagramGraph:
        """Process every model in ``schema`` and return the populated graph."""
        diagram_options = {"schema_version": schema.schema_version, **self.diagram_options}
        graph = DiagramGraph(self.origin_name, **diagram_options)
        graph.set_diagram_kind("Models")
        self._habtm = []

        by_name = {model.name: model for model in schema.models}
        for model in schema.models:
            if re.search(r"_related", model.name, re.IGNORECASE):
                logger.debug(f"Skipping related model {model.name}")
                continue
            self._process_model(graph, model, by_name)

        logger.info(f"Models diagram has {len(graph.nodes)} nodes and {len(graph.edges)} edges")
        return graph

    def _process_model(self, graph: DiagramGraph, model: ModelFacts,
                       by_name: dict[str, ModelFacts]) -> None:
        logger.debug(f"Processing {model.name}")
        options = self.options
        generated = False

        if model.kind == ModelType.ACTIVE_RECORD:
            attributes = []
            if options.brief or model.abstract or model.superclass != BASE_CLASS:
                node_kind = NodeKind.MODEL_BRIEF
            else:
                node_kind = NodeKind.MODEL
                attributes = [self._describe_column(c) for c in self._content_columns(model)]

            node_options = {"fontsize": options.fontsize} if options.fontsize else {}
            graph.add_node(Node(node_kind, model.name, attributes, node_options))
            generated = True

            associations = model.associations
            parent = by_name.get(model.superclass)
            if options.inheritance and not options.transitive and parent is not None:
                associations = [a for a in associations if a not in parent.associations]
            for association in associations:
                self._process_association(graph, model.name, association)

        elif options.all_classes and model.kind == ModelType.CLASS:
            node_kind = NodeKind.CLASS_BRIEF if options.brief else NodeKind.CLASS
            graph.add_node(Node(node_kind, model.name))
            generated = True

        elif options.modules and model.kind == ModelType.MODULE:
            graph.add_node(Node(NodeKind.MODULE, model.name))

        if (options.inheritance and generated
                and model.superclass not in (BASE_CLASS, "Object")):
            graph.add_edge(Edge(EdgeKind.IS_A, model.superclass, model.name))

    def _content_columns(self, model: ModelFacts) -> list[ColumnFacts]:
        if not self.options.hide_magic:
            return model.columns
        magic = list(MAGIC_FIELDS)
        if model.table_name:
            magic.append(f"{model.table_name}_count")
        return [c for c in model.columns if c.name not in magic]

    def _describe_column(self, column: ColumnFacts) -> str:
        if self.options.hide_types:
            return column.name
        return f"{column.name} :{column.type}"

    def _process_association(self, graph: DiagramGraph, class_name: str,
                             association: AssociationFacts) -> None:
        logger.debug(f"Processing association {class_name}.{association.name}")
        options = self.options

        if association.macro == AssociationMacro.BELONGS_TO:
            return
        if options.only_simple_edge and association.through:
            return

        target = _singular_class_name(association.class_name)
        # Only non-standard association names need a label
        label = "" if target == _singular_class_name(association.name) else association.name

        if association.macro == AssociationMacro.HAS_ONE:
            edge_kind = EdgeKind.ONE_ONE
        elif association.macro == AssociationMacro.HAS_MANY and not association.through:
            edge_kind = EdgeKind.ONE_MANY
        else:
            if options.only_simple_edge:
                return
            if (association.class_name, class_name, label) in self._habtm:
                return
            edge_kind = EdgeKind.MANY_MANY
            self._habtm.append((class_name, association.class_name, label))

        graph.add_edge(Edge(edge_kind, class_name, target, label))
