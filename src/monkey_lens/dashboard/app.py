"""Dash application factory."""

from __future__ import annotations

from collections.abc import Callable

from dash import Dash

from monkey_lens.core.ports.backend import LanguageBackend
from monkey_lens.dashboard.callbacks import register_callbacks
from monkey_lens.dashboard.layout import build_layout


def create_dashboard(backend_factory: Callable[[], LanguageBackend]) -> Dash:
    app = Dash(__name__, suppress_callback_exceptions=True)
    app.layout = build_layout()
    register_callbacks(app, backend_factory)
    return app
