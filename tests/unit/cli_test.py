"""Unit tests for the Typer CLI."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from monkey_lens.backends import InMemoryLanguageBackend
from monkey_lens.cli.app import app
from tests.conftest import LET_SOURCE, LET_TOKENS, ident, let_ast

runner = CliRunner()


@pytest.fixture()
def source_file(tmp_path: Path) -> Path:
    path = tmp_path / "let.monkey"
    path.write_text(LET_SOURCE, encoding="utf-8")
    return path


class TestHelp:
    @pytest.mark.parametrize("args", [["-h"], ["tokens", "-h"], ["ast", "-h"], ["serve", "-h"]])
    def test_help(self, args: list[str]) -> None:
        result = runner.invoke(app, args)
        assert result.exit_code == 0
        assert "Usage" in result.output


class TestTokensCommand:
    def test_tokens_file(self, source_file: Path, tmp_path: Path) -> None:
        tokens_file = tmp_path / "tokens.json"
        tokens_file.write_text(json.dumps({"tokens": LET_TOKENS}), encoding="utf-8")
        result = runner.invoke(app, ["tokens", str(source_file), "--tokens-file", str(tokens_file), "--json"])
        assert result.exit_code == 0, result.output
        body = json.loads(result.output)
        assert "".join(span["text"] for span in body["spans"]) == LET_SOURCE

    def test_table_output(self, source_file: Path, tmp_path: Path) -> None:
        tokens_file = tmp_path / "tokens.json"
        tokens_file.write_text(json.dumps(LET_TOKENS), encoding="utf-8")
        result = runner.invoke(app, ["tokens", str(source_file), "--tokens-file", str(tokens_file)])
        assert result.exit_code == 0, result.output
        assert "5 token span(s)" in result.output
        assert "Diagnostics" in result.output

    def test_uses_backend(self, source_file: Path) -> None:
        backend = InMemoryLanguageBackend(tokens=LET_TOKENS)
        with patch("monkey_lens.cli._common._get_backend", return_value=backend):
            result = runner.invoke(app, ["tokens", str(source_file), "--json"])
        assert result.exit_code == 0, result.output
        assert backend.received == [("tokenize", LET_SOURCE)]
        assert backend.disposed

    def test_upstream_error_exits_1(self, source_file: Path) -> None:
        backend = InMemoryLanguageBackend(error="illegal token")
        with patch("monkey_lens.cli._common._get_backend", return_value=backend):
            result = runner.invoke(app, ["tokens", str(source_file)])
        assert result.exit_code == 1
        assert "illegal token" in result.output
        assert backend.disposed

    def test_missing_source(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["tokens", str(tmp_path / "missing.monkey")])
        assert result.exit_code == 1

    def test_invalid_tokens_file_exits_1(self, source_file: Path, tmp_path: Path) -> None:
        tokens_file = tmp_path / "tokens.json"
        tokens_file.write_text(json.dumps([{"type": "LET", "literal": "let"}]), encoding="utf-8")
        result = runner.invoke(app, ["tokens", str(source_file), "--tokens-file", str(tokens_file)])
        assert result.exit_code == 1
        assert not isinstance(result.exception, ValidationError)
        assert "Invalid token list" in result.output

    def test_unknown_backend(self, source_file: Path) -> None:
        result = runner.invoke(app, ["tokens", str(source_file), "--backend", "grpc"])
        assert result.exit_code == 1
        assert "Unknown backend" in result.output


class TestAstCommand:
    def test_ast_file_wrapper(self, tmp_path: Path) -> None:
        ast_file = tmp_path / "ast.json"
        ast_file.write_text(json.dumps({"ast": let_ast(), "error": None}), encoding="utf-8")
        result = runner.invoke(app, ["ast", "--ast-file", str(ast_file), "--json"])
        assert result.exit_code == 0, result.output
        body = json.loads(result.output)
        assert [n["id"] for n in body["nodes"]] == ["node-0", "node-1", "node-2", "node-3"]
        assert len(body["edges"]) == 3

    def test_table_output(self, tmp_path: Path) -> None:
        ast_file = tmp_path / "ast.json"
        ast_file.write_text(json.dumps(let_ast()), encoding="utf-8")
        result = runner.invoke(app, ["ast", "--ast-file", str(ast_file)])
        assert result.exit_code == 0, result.output
        assert "Nodes" in result.output
        assert "LetStatement" in result.output

    def test_uses_backend(self, source_file: Path) -> None:
        backend = InMemoryLanguageBackend(ast=let_ast())
        with patch("monkey_lens.cli._common._get_backend", return_value=backend):
            result = runner.invoke(app, ["ast", str(source_file), "--json"])
        assert result.exit_code == 0, result.output
        assert backend.received == [("parse", LET_SOURCE)]

    def test_requires_input(self) -> None:
        result = runner.invoke(app, ["ast"])
        assert result.exit_code == 2

    def test_max_depth(self, tmp_path: Path) -> None:
        tree = {"type": "ExpressionStatement", "Expression": {"type": "ExpressionStatement", "Expression": ident("x")}}
        ast_file = tmp_path / "ast.json"
        ast_file.write_text(json.dumps(tree), encoding="utf-8")
        result = runner.invoke(app, ["ast", "--ast-file", str(ast_file), "--max-depth", "1"])
        assert result.exit_code == 1
        assert "Malformed syntax tree" in result.output

    def test_invalid_json(self, tmp_path: Path) -> None:
        ast_file = tmp_path / "ast.json"
        ast_file.write_text("{not json", encoding="utf-8")
        result = runner.invoke(app, ["ast", "--ast-file", str(ast_file)])
        assert result.exit_code == 1
