"""Dashboard Cytoscape stylesheet and token/node color mappings."""

from __future__ import annotations

from typing import Any

NODE_COLORS: dict[str, str] = {
    "Program": "#3b82f6",
    "LetStatement": "#10b981",
    "ReturnStatement": "#f59e0b",
    "ExpressionStatement": "#8b5cf6",
    "IfExpression": "#ef4444",
    "FunctionLiteral": "#06b6d4",
    "CallExpression": "#f97316",
    "InfixExpression": "#84cc16",
    "PrefixExpression": "#ec4899",
    "Identifier": "#6b7280",
    "IntegerLiteral": "#14b8a6",
    "Boolean": "#a855f7",
    "StringLiteral": "#22c55e",
}

_DEFAULT_NODE_COLOR = "#64748b"

_KEYWORDS = {"LET", "IF", "ELSE", "RETURN", "FN", "TRUE", "FALSE"}
_OPERATORS = {"+", "-", "*", "/", "=", "==", "!=", "<", ">", "!"}
_DELIMITERS = {"(", ")", "{", "}", "[", "]"}
_PUNCTUATION = {";", ","}

TOKEN_COLORS: dict[str, str] = {
    "keyword": "#8b5cf6",
    "identifier": "#06b6d4",
    "integer": "#10b981",
    "string": "#f59e0b",
    "operator": "#ef4444",
    "delimiter": "#ec4899",
    "punctuation": "#6b7280",
    "special": "#64748b",
    "illegal": "#dc2626",
    "unknown": "#94a3b8",
}

TOKEN_DISPLAY_NAMES: dict[str, str] = {
    "IDENT": "Identifier",
    "INT": "Integer",
    "STRING": "String",
    "LET": "Let Keyword",
    "FN": "Function Keyword",
    "IF": "If Keyword",
    "ELSE": "Else Keyword",
    "RETURN": "Return Keyword",
    "TRUE": "Boolean True",
    "FALSE": "Boolean False",
    "EOF": "End of File",
    "ILLEGAL": "Illegal Token",
}


def node_color(label: str) -> str:
    """Return hex color for a syntax node label."""
    return NODE_COLORS.get(label, _DEFAULT_NODE_COLOR)


def token_category(token_type: str) -> str:
    if token_type in _KEYWORDS:
        return "keyword"
    if token_type in _OPERATORS:
        return "operator"
    if token_type in _DELIMITERS:
        return "delimiter"
    if token_type in _PUNCTUATION:
        return "punctuation"
    return {
        "IDENT": "identifier",
        "INT": "integer",
        "STRING": "string",
        "EOF": "special",
        "ILLEGAL": "illegal",
    }.get(token_type, "unknown")


def token_color(token_type: str) -> str:
    """Return hex color for a token type."""
    return TOKEN_COLORS[token_category(token_type)]


def token_display_name(token_type: str) -> str:
    return TOKEN_DISPLAY_NAMES.get(token_type, token_type)


AST_STYLESHEET: list[dict[str, Any]] = [
    {
        "selector": "node",
        "style": {
            "label": "data(caption)",
            "text-wrap": "wrap",
            "font-size": "11px",
            "color": "#fff",
            "text-valign": "center",
            "text-halign": "center",
            "shape": "round-rectangle",
            "background-color": "data(color)",
            "width": 140,
            "height": 44,
        },
    },
    {
        "selector": "node:selected",
        "style": {
            "border-width": 3,
            "border-color": "#FF5722",
        },
    },
    {
        "selector": "edge",
        "style": {
            "curve-style": "bezier",
            "line-color": "#ccc",
            "target-arrow-color": "#ccc",
            "target-arrow-shape": "triangle",
            "width": 2,
        },
    },
]
