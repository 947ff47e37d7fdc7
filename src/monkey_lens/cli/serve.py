import typer
from rich.console import Console

serve_app = typer.Typer(help="Start servers.")
console = Console()


@serve_app.command("api")
def api(
    host: str = "127.0.0.1",
    port: int = 8000,
) -> None:
    """Start the FastAPI REST API server."""
    import uvicorn

    from monkey_lens.api.app import create_app

    app = create_app()
    console.print(f"[green]Starting API server on {host}:{port}[/green]")
    uvicorn.run(app, host=host, port=port)


@serve_app.command("mcp")
def mcp(
    transport: str = "stdio",
    backend: str | None = None,
) -> None:
    """Start the MCP server."""
    from monkey_lens.backends import get_backend
    from monkey_lens.mcp.server import create_mcp_server

    server = create_mcp_server(get_backend(backend))
    console.print(f"[green]Starting MCP server (transport: {transport})[/green]")
    server.run(transport=transport)  # type: ignore[arg-type]


@serve_app.command("dashboard")
def dashboard(
    host: str = "127.0.0.1",
    port: int = 8001,
    backend: str | None = None,
) -> None:
    """Start the Dash web dashboard."""
    from monkey_lens.backends import get_backend
    from monkey_lens.dashboard.app import create_dashboard

    app = create_dashboard(lambda: get_backend(backend))
    console.print(f"[green]Starting dashboard on {host}:{port}[/green]")
    app.run(host=host, port=port)
