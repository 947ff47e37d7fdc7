"""Unit tests for analysis orchestration over a language backend."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from monkey_lens.backends import InMemoryLanguageBackend
from monkey_lens.core.analyze import UpstreamError, analyze_ast, analyze_tokens
from tests.conftest import LET_SOURCE


@pytest.mark.asyncio
async def test_analyze_tokens_aligns_backend_tokens(memory_backend: InMemoryLanguageBackend) -> None:
    alignment = await analyze_tokens(memory_backend, LET_SOURCE)
    assert alignment.text == LET_SOURCE
    assert memory_backend.received == [("tokenize", LET_SOURCE)]


@pytest.mark.asyncio
async def test_analyze_ast_builds_graph(memory_backend: InMemoryLanguageBackend) -> None:
    graph = await analyze_ast(memory_backend, LET_SOURCE)
    assert [n.label for n in graph.nodes] == ["Program", "LetStatement", "Identifier", "IntegerLiteral"]
    assert memory_backend.received == [("parse", LET_SOURCE)]


@pytest.mark.asyncio
async def test_upstream_error_is_verbatim(failing_backend: InMemoryLanguageBackend) -> None:
    with pytest.raises(UpstreamError) as excinfo:
        await analyze_tokens(failing_backend, "let = 5;")
    assert excinfo.value.message == "expected next token to be =, got INT instead"
    assert str(excinfo.value) == excinfo.value.message


@pytest.mark.asyncio
async def test_core_not_invoked_on_upstream_error(failing_backend: InMemoryLanguageBackend) -> None:
    with patch("monkey_lens.core.analyze.build_graph") as mock_build:
        with pytest.raises(UpstreamError):
            await analyze_ast(failing_backend, "let = 5;")
    mock_build.assert_not_called()


@pytest.mark.asyncio
async def test_missing_ast_gives_empty_graph() -> None:
    graph = await analyze_ast(InMemoryLanguageBackend(), "")
    assert graph.nodes == []
