"""Neighborhood pruning around a diagram's origin node.

Each round deletes every node in the frontier together with its connected
edges, and the endpoints of those edges become the next frontier. Since the
endpoints include the deleted name itself, a round removes the whole direct
neighborhood of the frontier, not just a boundary ring. Callers rely on this
output, so it is kept as is.
"""

import logging

from .models import Edge, GraphShapeError, Node

logger = logging.getLogger(__name__)


def _check_shapes(nodes: list, edges: list, names: list) -> None:
    for node in nodes:
        if not (isinstance(node, Node) or (isinstance(node, (tuple, list)) and len(node) >= 3)):
            raise GraphShapeError(f"nodes(={nodes!r}) is wrong: bad node {node!r}")
    for edge in edges:
        if not (isinstance(edge, Edge) or (isinstance(edge, (tuple, list)) and len(edge) == 4)):
            raise GraphShapeError(f"edges(={edges!r}) is wrong: bad edge {edge!r}")
    for name in names:
        if not isinstance(name, str):
            raise GraphShapeError(f"frontier names(={names!r}) is wrong: bad name {name!r}")


def _delete_round(node_items: list, edge_items: list, names: list) -> tuple[list, list, list[str]]:
    """One deletion round over ``(position, item)`` pairs."""
    _check_shapes([n for _, n in node_items], [e for _, e in edge_items], names)
    node_items = [(i, Node.from_tuple(n)) for i, n in node_items]
    edge_items = [(i, Edge.from_tuple(e)) for i, e in edge_items]

    touched: dict[str, None] = {}
    for name in names:
        kept = []
        for i, edge in edge_items:
            if edge.from_node == name or edge.to_node == name:
                touched[edge.from_node] = None
                touched[edge.to_node] = None
            else:
                kept.append((i, edge))
        edge_items = kept
        node_items = [(i, n) for i, n in node_items if n.name != name]

    return node_items, edge_items, list(touched)


def _prune(nodes: list, edges: list, origin_name: str, hop_limit: int | None) -> tuple[list, list]:
    node_items = list(enumerate(nodes))
    edge_items = list(enumerate(edges))
    frontier = [origin_name]
    for _ in range(hop_limit or 0):
        node_items, edge_items, frontier = _delete_round(node_items, edge_items, frontier)

    logger.debug(f"Pruning from {origin_name!r} over {hop_limit or 0} rounds left "
                 f"{len(node_items)} nodes and {len(edge_items)} edges")
    return node_items, edge_items


def delete_connected_nodes(nodes: list, edges: list, names: list[str]) -> tuple[list, list, list[str]]:
    """Delete the named nodes and their edges, returning the touched names.

    Returns:
        Tuple of (remaining nodes, remaining edges, next frontier)
    """
    node_items, edge_items, touched = _delete_round(list(enumerate(nodes)), list(enumerate(edges)), names)
    return [n for _, n in node_items], [e for _, e in edge_items], touched


def prune_neighborhood(nodes: list, edges: list, origin_name: str,
                       hop_limit: int | None = 3) -> tuple[list, list]:
    """Run ``hop_limit`` deletion rounds starting from ``origin_name``.

    Args:
        nodes: Node objects or node tuples
        edges: Edge objects or edge tuples
        origin_name: Name the first round starts from
        hop_limit: Number of rounds; ``None`` and 0 run none

    Returns:
        Tuple of (surviving nodes, surviving edges)

    Raises:
        GraphShapeError: If a round sees a malformed node, edge or name
    """
    node_items, edge_items = _prune(nodes, edges, origin_name, hop_limit)
    return [n for _, n in node_items], [e for _, e in edge_items]


def surviving_positions(nodes: list, edges: list, origin_name: str,
                        hop_limit: int | None = 3) -> tuple[set[int], set[int]]:
    """Positions in ``nodes`` and ``edges`` that survive pruning.

    Nodes are deleted by name and edges by endpoint, so equal items always
    share a fate and positions give the same result as comparing values.
    """
    node_items, edge_items = _prune(nodes, edges, origin_name, hop_limit)
    return {i for i, _ in node_items}, {i for i, _ in edge_items}
