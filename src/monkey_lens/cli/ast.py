from pathlib import Path
from typing import Annotated

import typer

from monkey_lens.cli._common import console, err_console, read_json, read_text, render_table, run_with_backend
from monkey_lens.core.analyze import analyze_ast
from monkey_lens.core.ast_graph import build_graph
from monkey_lens.core.syntax import DEFAULT_MAX_DEPTH, MalformedTreeError
from monkey_lens.models import AstGraph


def ast(
    source: Annotated[Path | None, typer.Argument(help="Monkey source file.")] = None,
    ast_file: Annotated[
        Path | None,
        typer.Option("--ast-file", help="JSON syntax tree; skips calling the language service."),
    ] = None,
    backend: Annotated[str | None, typer.Option(help="Language service backend (api or command).")] = None,
    max_depth: Annotated[int, typer.Option(help="Maximum tree depth accepted.")] = DEFAULT_MAX_DEPTH,
    as_json: Annotated[bool, typer.Option("--json", help="Print the graph as JSON.")] = False,
) -> None:
    """Lay out the syntax tree of SOURCE as a node/edge graph."""
    try:
        if ast_file is not None:
            payload = read_json(ast_file)
            if isinstance(payload, dict) and "ast" in payload and "type" not in payload:
                payload = payload["ast"]
            graph = build_graph(payload, max_depth=max_depth)
        elif source is not None:
            code = read_text(source)
            graph = run_with_backend(backend, lambda b: analyze_ast(b, code, max_depth=max_depth))
        else:
            err_console.print("[red]Provide a SOURCE file or --ast-file.[/red]")
            raise typer.Exit(2)
    except MalformedTreeError as exc:
        err_console.print(f"[red]Malformed syntax tree: {exc}[/red]")
        raise typer.Exit(1) from None

    if as_json:
        console.print_json(graph.model_dump_json())
        return
    _render_graph(graph)


def _render_graph(graph: AstGraph) -> None:
    render_table(
        ["id", "label", "value", "x", "y"],
        [(n.id, n.label, n.display_value, f"{n.position.x:g}", f"{n.position.y:g}") for n in graph.nodes],
        title="Nodes",
    )
    render_table(
        ["id", "source", "target"],
        [(e.id, e.source_id, e.target_id) for e in graph.edges],
        title="Edges",
    )
