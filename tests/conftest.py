"""Shared fixtures and helpers for tests."""

from pathlib import Path
from typing import Any

import pytest

from monkey_lens.backends import InMemoryLanguageBackend

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag every test under tests/unit as "unit"
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Sample data as produced by the Monkey service
# ---------------------------------------------------------------------------

LET_SOURCE = "let x = 5;"

# Positions are cumulative literal lengths, exactly as the service reports them.
LET_TOKENS: list[dict[str, Any]] = [
    {"type": "LET", "literal": "let", "position": 0},
    {"type": "IDENT", "literal": "x", "position": 3},
    {"type": "=", "literal": "=", "position": 4},
    {"type": "INT", "literal": "5", "position": 5},
    {"type": ";", "literal": ";", "position": 6},
]


def ident(name: str) -> dict[str, Any]:
    return {
        "type": "Identifier",
        "string": name,
        "Token": {"Type": "IDENT", "Literal": name},
        "Value": name,
    }


def integer(value: int) -> dict[str, Any]:
    return {
        "type": "IntegerLiteral",
        "string": str(value),
        "Token": {"Type": "INT", "Literal": str(value)},
        "Value": value,
    }


def infix(left: dict[str, Any], operator: str, right: dict[str, Any]) -> dict[str, Any]:
    return {
        "type": "InfixExpression",
        "Token": {"Type": operator, "Literal": operator},
        "Operator": operator,
        "Left": left,
        "Right": right,
    }


def expression_statement(expression: dict[str, Any]) -> dict[str, Any]:
    return {"type": "ExpressionStatement", "Expression": expression}


def let_ast() -> dict[str, Any]:
    return {
        "type": "Program",
        "string": "let x = 5;",
        "statements": [
            {
                "type": "LetStatement",
                "string": "let x = 5;",
                "Token": {"Type": "LET", "Literal": "let"},
                "Name": ident("x"),
                "Value": integer(5),
            }
        ],
    }


def add_program_ast() -> dict[str, Any]:
    """``let add = fn(a, b) { a + b }; add(1, 2);``"""
    function = {
        "type": "FunctionLiteral",
        "Token": {"Type": "FUNCTION", "Literal": "fn"},
        "Parameters": [ident("a"), ident("b")],
        "Body": {
            "type": "BlockStatement",
            "statements": [expression_statement(infix(ident("a"), "+", ident("b")))],
        },
    }
    call = {
        "type": "CallExpression",
        "Function": ident("add"),
        "Arguments": [integer(1), integer(2)],
    }
    return {
        "type": "Program",
        "statements": [
            {
                "type": "LetStatement",
                "Token": {"Type": "LET", "Literal": "let"},
                "Name": ident("add"),
                "Value": function,
            },
            expression_statement(call),
        ],
    }


@pytest.fixture
def let_tokens() -> list[dict[str, Any]]:
    return [dict(t) for t in LET_TOKENS]


@pytest.fixture
def memory_backend() -> InMemoryLanguageBackend:
    return InMemoryLanguageBackend(tokens=LET_TOKENS, ast=let_ast())


@pytest.fixture
def failing_backend() -> InMemoryLanguageBackend:
    return InMemoryLanguageBackend(error="expected next token to be =, got INT instead")
