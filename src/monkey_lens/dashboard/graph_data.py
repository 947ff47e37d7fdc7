"""Convert alignment and graph results into Dash components and Cytoscape elements."""

from __future__ import annotations

from typing import Any

import plotly.graph_objects as go  # type: ignore[import-untyped]
from dash import html

from monkey_lens.dashboard.styles import node_color, token_color, token_display_name
from monkey_lens.models import AlignmentIssue, AstGraph, DisplaySpan, SpanKind


def graph_to_elements(graph: AstGraph) -> list[dict[str, Any]]:
    """Turn a laid-out AST graph into Cytoscape elements for a ``preset`` layout."""
    elements: list[dict[str, Any]] = []
    for node in graph.nodes:
        caption = f"{node.label}\n{node.display_value}" if node.display_value else node.label
        elements.append(
            {
                "data": {
                    "id": node.id,
                    "label": node.label,
                    "value": node.display_value,
                    "caption": caption,
                    "color": node_color(node.label),
                },
                "position": {"x": node.position.x, "y": node.position.y},
            }
        )
    for edge in graph.edges:
        elements.append(
            {
                "data": {
                    "id": edge.id,
                    "source": edge.source_id,
                    "target": edge.target_id,
                }
            }
        )
    return elements


def spans_to_components(spans: list[DisplaySpan]) -> list[Any]:
    """Render spans as inline ``html.Span`` elements, coloring token spans."""
    components: list[Any] = []
    for span in spans:
        if span.kind is SpanKind.PLAIN:
            components.append(html.Span(span.text, className="token-whitespace"))
            continue
        token_type = span.token_type or ""
        components.append(
            html.Span(
                span.text,
                id={"type": "token-span", "index": span.token_index},
                className="token",
                title=f"{token_display_name(token_type)} @{span.start}",
                style={
                    "backgroundColor": token_color(token_type) + "99",
                    "color": "#fff",
                    "borderRadius": "3px",
                },
            )
        )
    return components


def token_type_counts_to_figure(rows: list[tuple[str, int]]) -> go.Figure:
    """Return a Plotly horizontal bar chart of token type frequencies."""
    if not rows:
        fig = go.Figure()
        fig.update_layout(title="No data", height=300)
        return fig
    # Reverse so highest count is at top
    types = [r[0] for r in reversed(rows)]
    counts = [r[1] for r in reversed(rows)]
    colors = [token_color(t) for t in types]
    fig = go.Figure(go.Bar(x=counts, y=types, orientation="h", marker_color=colors))
    fig.update_layout(
        title="Token Type Distribution",
        xaxis_title="Count",
        yaxis_title="Token Type",
        height=max(300, len(types) * 25 + 100),
        margin={"l": 120, "r": 20, "t": 40, "b": 40},
    )
    return fig


def issues_to_rows(issues: list[AlignmentIssue]) -> list[dict[str, Any]]:
    return [
        {
            "token": issue.token_index,
            "literal": issue.literal,
            "declared": issue.declared_position,
            "resolved": "" if issue.resolved_position is None else issue.resolved_position,
            "issue": issue.kind.value,
        }
        for issue in issues
    ]
