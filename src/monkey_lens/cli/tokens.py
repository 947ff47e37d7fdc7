from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape

from monkey_lens.cli._common import console, err_console, read_json, read_text, render_table, run_with_backend
from monkey_lens.core.analyze import analyze_tokens
from monkey_lens.core.tokens import align_tokens_with_issues
from monkey_lens.models import SpanKind, TokenAlignment


def tokens(
    source: Annotated[Path, typer.Argument(help="Monkey source file.")],
    tokens_file: Annotated[
        Path | None,
        typer.Option("--tokens-file", help="JSON token list; skips calling the language service."),
    ] = None,
    backend: Annotated[str | None, typer.Option(help="Language service backend (api or command).")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the alignment as JSON.")] = False,
) -> None:
    """Align tokens with SOURCE and show the highlighted spans."""
    code = read_text(source)
    if tokens_file is not None:
        payload = read_json(tokens_file)
        if isinstance(payload, dict):
            payload = payload.get("tokens") or []
        try:
            alignment = align_tokens_with_issues(code, payload)
        except (TypeError, ValidationError) as exc:
            err_console.print(f"[red]Invalid token list in {tokens_file}: {escape(str(exc))}[/red]")
            raise typer.Exit(1) from None
    else:
        alignment = run_with_backend(backend, lambda b: analyze_tokens(b, code))

    if as_json:
        console.print_json(alignment.model_dump_json())
        return
    _render_alignment(alignment)


def _render_alignment(alignment: TokenAlignment) -> None:
    rows = [
        (
            span.start,
            span.kind.value,
            span.token_type or "",
            "" if span.token_index is None else span.token_index,
            repr(span.text),
        )
        for span in alignment.spans
    ]
    render_table(["start", "kind", "type", "token", "text"], rows)
    token_count = sum(1 for span in alignment.spans if span.kind is SpanKind.TOKEN)
    console.print(f"{token_count} token span(s)")
    if alignment.issues:
        render_table(
            ["token", "literal", "declared", "resolved", "issue"],
            [
                (
                    issue.token_index,
                    repr(issue.literal),
                    issue.declared_position,
                    "" if issue.resolved_position is None else issue.resolved_position,
                    issue.kind.value,
                )
                for issue in alignment.issues
            ],
            title="Diagnostics",
        )
