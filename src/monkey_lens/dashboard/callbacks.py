"""Dash callback registrations."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable
from typing import Any

from dash import Dash, Input, Output, State, no_update

from monkey_lens.core.analyze import UpstreamError, analyze_ast, analyze_tokens
from monkey_lens.core.ports.backend import LanguageBackend
from monkey_lens.core.syntax import MalformedTreeError
from monkey_lens.core.tokens import token_type_counts
from monkey_lens.dashboard.graph_data import (
    graph_to_elements,
    issues_to_rows,
    spans_to_components,
    token_type_counts_to_figure,
)
from monkey_lens.dashboard.samples import get_sample
from monkey_lens.models import SpanKind

_log = logging.getLogger(__name__)


def register_callbacks(app: Dash, backend_factory: Callable[[], LanguageBackend]) -> None:
    _loop = asyncio.new_event_loop()
    _backend = backend_factory()
    threading.Thread(target=_loop.run_forever, daemon=True, name="dash-async").start()

    def _run_async(coro: Any) -> Any:
        return asyncio.run_coroutine_threadsafe(coro, _loop).result(timeout=30)

    # ── Editor: load a sample ─────────────────────────────────────

    @app.callback(
        Output("code-input", "value"),
        Input("sample-dropdown", "value"),
        prevent_initial_call=True,
    )
    def load_sample(sample_id: str | None) -> Any:
        sample = get_sample(sample_id) if sample_id else None
        return sample.code if sample else no_update

    # ── Tokens: highlight, chart, diagnostics ─────────────────────

    @app.callback(
        [
            Output("highlighted-code", "children"),
            Output("token-type-chart", "figure"),
            Output("token-issues", "data"),
            Output("tokens-status", "children"),
        ],
        Input("analyze-btn", "n_clicks"),
        State("code-input", "value"),
    )
    def run_tokens(_: int, code: str | None) -> tuple[list[Any], Any, list[dict[str, Any]], str]:
        if not code:
            return [], token_type_counts_to_figure([]), [], "No code to tokenize."
        try:
            alignment = _run_async(analyze_tokens(_backend, code))
        except UpstreamError as exc:
            return [code], token_type_counts_to_figure([]), [], f"Error: {exc.message}"
        except Exception as exc:
            _log.exception("run_tokens failed")
            return [code], token_type_counts_to_figure([]), [], f"Failed to tokenize code: {exc}"
        token_spans = [span for span in alignment.spans if span.kind is SpanKind.TOKEN]
        counts = token_type_counts(
            {"type": span.token_type or "", "literal": span.text, "position": span.start} for span in token_spans
        )
        status = f"{len(token_spans)} tokens"
        if alignment.dropped:
            status += f", {len(alignment.dropped)} could not be located"
        return (
            spans_to_components(alignment.spans),
            token_type_counts_to_figure(counts),
            issues_to_rows(alignment.issues),
            status,
        )

    # ── Syntax tree: graph ────────────────────────────────────────

    @app.callback(
        [Output("ast-graph", "elements"), Output("ast-status", "children")],
        Input("analyze-btn", "n_clicks"),
        State("code-input", "value"),
    )
    def run_ast(_: int, code: str | None) -> tuple[list[dict[str, Any]], str]:
        if not code:
            return [], "No AST data to display. Parse some code first!"
        try:
            graph = _run_async(analyze_ast(_backend, code))
        except (UpstreamError, MalformedTreeError) as exc:
            return [], f"Error: {exc}"
        except Exception as exc:
            _log.exception("run_ast failed")
            return [], f"Failed to parse code: {exc}"
        return graph_to_elements(graph), f"{len(graph.nodes)} nodes, {len(graph.edges)} edges"
