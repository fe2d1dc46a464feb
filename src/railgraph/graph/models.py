"""Graph data models for diagram rendering."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NodeKind(str, Enum):
    """Node kinds understood by the renderers."""
    MODEL = "model"
    MODEL_BRIEF = "model-brief"
    CLASS = "class"
    CLASS_BRIEF = "class-brief"
    CONTROLLER = "controller"
    CONTROLLER_BRIEF = "controller-brief"
    MODULE = "module"
    AASM = "aasm"  # State machine, rendered as a cluster


class EdgeKind(str, Enum):
    """Edge kinds understood by the renderers."""
    ONE_ONE = "one-one"
    ONE_MANY = "one-many"
    MANY_MANY = "many-many"
    IS_A = "is-a"
    EVENT = "event"


class GraphShapeError(ValueError):
    """Raised when nodes, edges or frontier names have the wrong shape."""
    pass


def _coerce_kind(kind, enum_cls):
    """Return the enum member for ``kind``, or the raw string if unknown."""
    if isinstance(kind, enum_cls):
        return kind
    try:
        return enum_cls(kind)
    except ValueError:
        return kind


MEMBER_BUCKETS = {"public", "protected", "private"}


@dataclass
class MemberLists:
    """Public/protected/private buckets used by controller nodes."""
    public: list[str] = field(default_factory=list)
    protected: list[str] = field(default_factory=list)
    private: list[str] = field(default_factory=list)


@dataclass
class Node:
    """A diagram node.

    ``attributes`` depends on the kind: a list of field descriptions for
    models, ``MemberLists`` for controllers, body lines for state machines
    and nothing for brief kinds. Names are not unique.
    """
    kind: NodeKind | str
    name: str
    attributes: list[str] | MemberLists | None = None
    options: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.kind = _coerce_kind(self.kind, NodeKind)

    @classmethod
    def from_tuple(cls, values) -> "Node":
        """Build a node from a ``(kind, name, attributes?, options?)`` sequence."""
        if isinstance(values, Node):
            return values
        kind, name, *rest = values
        attributes = rest[0] if len(rest) > 0 else None
        options = rest[1] if len(rest) > 1 and rest[1] is not None else {}
        if isinstance(attributes, dict):
            unknown = set(attributes) - MEMBER_BUCKETS
            if unknown:
                raise GraphShapeError(
                    f"node(={values!r}) is wrong: unknown member buckets {sorted(unknown)}"
                )
            attributes = MemberLists(**attributes)
        return cls(kind=kind, name=name, attributes=attributes, options=dict(options))


@dataclass
class Edge:
    """A directed diagram edge between two node names."""
    kind: EdgeKind | str
    from_node: str
    to_node: str
    label: str = ""

    def __post_init__(self):
        self.kind = _coerce_kind(self.kind, EdgeKind)

    @classmethod
    def from_tuple(cls, values) -> "Edge":
        """Build an edge from a ``(kind, from, to, label)`` sequence."""
        if isinstance(values, Edge):
            return values
        kind, from_node, to_node, label = values
        return cls(kind=kind, from_node=from_node, to_node=to_node, label=label or "")
