import typer

from monkey_lens.cli.ast import ast
from monkey_lens.cli.serve import serve_app
from monkey_lens.cli.tokens import tokens

app = typer.Typer(
    name="monkey-lens",
    help="Monkey Lens CLI: highlight Monkey tokens and lay out Monkey syntax trees.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("tokens")(tokens)
app.command("ast")(ast)
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()
