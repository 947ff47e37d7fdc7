import asyncio
import json
from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path
from typing import Any, TypeVar

import typer
from rich.console import Console
from rich.table import Table

from monkey_lens.backends import get_backend
from monkey_lens.core.analyze import UpstreamError
from monkey_lens.core.ports.backend import LanguageBackend

T = TypeVar("T")

console = Console()
err_console = Console(stderr=True)


def render_table(headers: Sequence[str], rows: Sequence[Sequence[Any]], title: str | None = None) -> None:
    table = Table(show_lines=False, title=title)
    for h in headers:
        table.add_column(h)
    for row in rows:
        table.add_row(*(str(v) for v in row))
    console.print(table)
    console.print(f"({len(rows)} rows)")


def read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]File not found: {path}[/red]")
        raise typer.Exit(1) from None


def read_json(path: Path) -> Any:
    try:
        return json.loads(read_text(path))
    except json.JSONDecodeError as exc:
        err_console.print(f"[red]Invalid JSON in {path}: {exc}[/red]")
        raise typer.Exit(1) from None


def _get_backend(kind: str | None) -> LanguageBackend:
    return get_backend(kind)


def run_with_backend(kind: str | None, call: Callable[[LanguageBackend], Awaitable[T]]) -> T:
    """Run ``call`` against a freshly created backend and dispose it afterwards."""
    try:
        backend = _get_backend(kind)
    except ValueError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from None

    async def _run() -> T:
        try:
            return await call(backend)
        finally:
            await backend.dispose()

    try:
        return asyncio.run(_run())
    except UpstreamError as exc:
        err_console.print(f"[red]Error: {exc.message}[/red]")
        raise typer.Exit(1) from None
