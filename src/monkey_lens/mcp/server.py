"""FastMCP server exposing monkey-lens tools."""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from monkey_lens.core.analyze import UpstreamError, analyze_ast, analyze_tokens
from monkey_lens.core.ast_graph import build_graph
from monkey_lens.core.ports.backend import LanguageBackend
from monkey_lens.core.syntax import DEFAULT_MAX_DEPTH, MalformedTreeError
from monkey_lens.core.tokens import align_tokens_with_issues


def create_mcp_server(backend: LanguageBackend) -> FastMCP:
    """Create a FastMCP server wired to the given language backend."""

    mcp = FastMCP("monkey-lens", instructions="Align Monkey tokens with source text and lay out Monkey syntax trees.")

    @mcp.tool()
    async def align_tokens(source: str, tokens: list[dict[str, Any]]) -> dict[str, Any]:
        """Partition source text into plain and token spans."""
        return align_tokens_with_issues(source, tokens).model_dump(mode="json")

    @mcp.tool()
    async def build_ast_graph(ast: dict[str, Any], max_depth: int = DEFAULT_MAX_DEPTH) -> dict[str, Any] | str:
        """Lay out a syntax tree as positioned nodes and edges."""
        try:
            return build_graph(ast, max_depth=max_depth).model_dump(mode="json")
        except MalformedTreeError as exc:
            return f"Error: {exc}"

    @mcp.tool()
    async def tokenize_code(code: str) -> dict[str, Any] | str:
        """Tokenize Monkey code with the language service and align the tokens."""
        try:
            alignment = await analyze_tokens(backend, code)
        except UpstreamError as exc:
            return f"Error: {exc.message}"
        return alignment.model_dump(mode="json")

    @mcp.tool()
    async def parse_code(code: str, max_depth: int = DEFAULT_MAX_DEPTH) -> dict[str, Any] | str:
        """Parse Monkey code with the language service and lay out its syntax tree."""
        try:
            graph = await analyze_ast(backend, code, max_depth=max_depth)
        except (UpstreamError, MalformedTreeError) as exc:
            return f"Error: {exc}"
        return graph.model_dump(mode="json")

    return mcp
