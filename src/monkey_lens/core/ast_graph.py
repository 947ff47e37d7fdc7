"""Lay out a syntax tree as a positioned node/edge graph."""

from __future__ import annotations

from typing import Any

from monkey_lens.core.syntax import DEFAULT_MAX_DEPTH, ChildRole, SyntaxArena, SyntaxNode
from monkey_lens.models import AstGraph, GraphEdge, GraphNode, GraphPosition

ROOT_ORIGIN = (400.0, 50.0)

LEVEL_HEIGHT = 100
CHILD_OFFSET = 100
SLOT_STEP = 200
STATEMENT_STEP = 250
LIST_STEP = 150

# Roles placed at the cursor which then move it right for the next slot.
_ADVANCING = {ChildRole.NAME, ChildRole.LEFT, ChildRole.CONDITION, ChildRole.CONSEQUENCE, ChildRole.FUNCTION}
_CENTERED = {ChildRole.EXPRESSION, ChildRole.BODY, ChildRole.RETURN_VALUE}
_LIST_STEPS = {
    ChildRole.STATEMENTS: STATEMENT_STEP,
    ChildRole.PARAMETERS: LIST_STEP,
    ChildRole.ARGUMENTS: LIST_STEP,
}


def _layout_children(
    children: list[SyntaxNode], x: float, y: float
) -> list[tuple[SyntaxNode, tuple[float, float]]]:
    """Position one parent's children, which arrive in slot order."""
    child_x = x - CHILD_OFFSET
    child_y = y + LEVEL_HEIGHT
    has_name = any(child.role is ChildRole.NAME for child in children)

    placed: list[tuple[SyntaxNode, tuple[float, float]]] = []
    for child in children:
        role = child.role
        assert role is not None
        if role in _LIST_STEPS:
            cx = child_x + child.sibling_index * _LIST_STEPS[role]
        elif role is ChildRole.VALUE:
            cx = child_x if has_name else x
        elif role in _CENTERED:
            cx = x
        else:
            cx = child_x
        placed.append((child, (cx, child_y)))

        if role in _ADVANCING:
            child_x += SLOT_STEP
    return placed


def build_graph(
    root: Any,
    origin: tuple[float, float] = ROOT_ORIGIN,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> AstGraph:
    """Build a positioned graph from a syntax tree mapping.

    Node ids are ``node-<n>`` in pre-order. ``None`` yields an empty graph.
    Raises ``MalformedTreeError`` for cyclic or over-deep input.
    """
    arena = SyntaxArena.from_mapping(root, max_depth=max_depth)
    if not arena.nodes:
        return AstGraph.empty()

    positions: dict[int, tuple[float, float]] = {0: origin}
    nodes: list[GraphNode] = []
    edges: list[GraphEdge] = []

    # Parents precede their children in the arena, so one forward pass suffices.
    for node in arena.nodes:
        x, y = positions[node.index]
        nodes.append(
            GraphNode(
                id=node.node_id,
                label=node.label,
                display_value=node.display_value,
                position=GraphPosition(x=x, y=y),
                depth=node.depth,
            )
        )
        if node.parent is not None:
            parent_id = arena[node.parent].node_id
            edges.append(
                GraphEdge(
                    id=f"edge-{parent_id}-{node.node_id}",
                    source_id=parent_id,
                    target_id=node.node_id,
                )
            )
        for child, position in _layout_children(arena.children_of(node.index), x, y):
            positions[child.index] = position

    return AstGraph(nodes=nodes, edges=edges)
