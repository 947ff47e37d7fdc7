"""Dash layout definition with Tokens and Syntax Tree tabs."""

from __future__ import annotations

import dash_cytoscape as cyto  # type: ignore[import-untyped]
from dash import dash_table, dcc, html

from monkey_lens.dashboard.samples import SAMPLES
from monkey_lens.dashboard.styles import AST_STYLESHEET

_PANEL_STYLE = {"border": "1px solid #ddd", "borderRadius": "8px", "padding": "12px"}


def _build_editor() -> html.Div:
    return html.Div(
        [
            html.Div(
                [
                    dcc.Dropdown(
                        id="sample-dropdown",
                        options=[{"label": s.title, "value": s.id} for s in SAMPLES],
                        placeholder="Load a sample...",
                        style={"width": "320px"},
                        clearable=True,
                    ),
                    html.Button("Analyze", id="analyze-btn", n_clicks=0),
                ],
                style={"display": "flex", "gap": "12px", "alignItems": "center", "marginBottom": "8px"},
            ),
            dcc.Textarea(
                id="code-input",
                value=SAMPLES[0].code,
                spellCheck=False,
                style={"width": "100%", "height": "220px", "fontFamily": "monospace", "fontSize": "13px"},
            ),
        ],
        style={**_PANEL_STYLE, "marginBottom": "16px"},
    )


def _build_tokens_tab() -> html.Div:
    return html.Div(
        [
            html.Div(id="tokens-status", style={"margin": "10px 0", "color": "#555", "fontSize": "13px"}),
            html.Pre(
                id="highlighted-code",
                children=[],
                style={**_PANEL_STYLE, "fontFamily": "monospace", "whiteSpace": "pre-wrap"},
            ),
            html.H3("Token Type Distribution", style={"marginTop": "24px", "marginBottom": "8px"}),
            dcc.Graph(id="token-type-chart", figure={}),
            html.H3("Diagnostics", style={"marginTop": "24px", "marginBottom": "8px"}),
            dash_table.DataTable(  # type: ignore[attr-defined]
                id="token-issues",
                columns=[{"name": c, "id": c} for c in ("token", "literal", "declared", "resolved", "issue")],
                data=[],
                style_cell={"textAlign": "left", "padding": "4px 8px", "fontSize": "12px"},
                page_size=20,
            ),
        ]
    )


def _build_ast_tab() -> html.Div:
    return html.Div(
        [
            html.Div(id="ast-status", style={"margin": "10px 0", "color": "#555", "fontSize": "13px"}),
            cyto.Cytoscape(
                id="ast-graph",
                elements=[],
                layout={"name": "preset", "fit": True, "padding": 30},
                style={"width": "100%", "height": "600px", "border": "1px solid #ddd", "borderRadius": "8px"},
                stylesheet=AST_STYLESHEET,
            ),
        ]
    )


def build_layout() -> html.Div:
    """Return the top-level Dash layout: code editor above a Tokens / Syntax Tree tab set."""
    return html.Div(
        [
            html.H1("Monkey Lens"),
            html.P(
                "Tokenize and parse Monkey code, then inspect the tokens and the syntax tree.",
                style={"color": "#666", "marginTop": "-10px", "marginBottom": "20px"},
            ),
            html.Div(id="dashboard-error", style={"color": "red"}),
            _build_editor(),
            dcc.Tabs(
                id="main-tabs",
                value="tokens",
                children=[
                    dcc.Tab(label="Tokens", value="tokens", children=[_build_tokens_tab()]),
                    dcc.Tab(label="Syntax Tree", value="ast", children=[_build_ast_tab()]),
                ],
            ),
        ],
        style={"padding": "20px", "fontFamily": "system-ui, sans-serif"},
    )
