"""Typed view over the loosely shaped AST the Monkey service returns.

Every construct the service emits is a ``ConstructKind`` with declared child
slots. Nodes whose ``type`` is missing or unrecognized are ``GENERIC`` and
have their children discovered by probing every slot field in role order.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

DEFAULT_MAX_DEPTH = 256
UNKNOWN_LABEL = "Unknown"


class MalformedTreeError(ValueError):
    """Raised when a syntax tree cannot be flattened."""


class CyclicTreeError(MalformedTreeError):
    pass


class TreeTooDeepError(MalformedTreeError):
    pass


class ConstructKind(str, Enum):
    PROGRAM = "Program"
    LET_STATEMENT = "LetStatement"
    RETURN_STATEMENT = "ReturnStatement"
    EXPRESSION_STATEMENT = "ExpressionStatement"
    BLOCK_STATEMENT = "BlockStatement"
    IDENTIFIER = "Identifier"
    INTEGER_LITERAL = "IntegerLiteral"
    BOOLEAN = "Boolean"
    STRING_LITERAL = "StringLiteral"
    PREFIX_EXPRESSION = "PrefixExpression"
    INFIX_EXPRESSION = "InfixExpression"
    IF_EXPRESSION = "IfExpression"
    FUNCTION_LITERAL = "FunctionLiteral"
    CALL_EXPRESSION = "CallExpression"
    GENERIC = "*"

    @classmethod
    def from_label(cls, label: Any) -> ConstructKind:
        if isinstance(label, str) and label != cls.GENERIC.value:
            try:
                return cls(label)
            except ValueError:
                pass
        return cls.GENERIC


class ChildRole(Enum):
    """Child slot roles. Declaration order is the field-check order."""

    STATEMENTS = "statements"
    NAME = "name"
    VALUE = "value"
    LEFT = "left"
    RIGHT = "right"
    EXPRESSION = "expression"
    CONDITION = "condition"
    CONSEQUENCE = "consequence"
    ALTERNATIVE = "alternative"
    PARAMETERS = "parameters"
    BODY = "body"
    RETURN_VALUE = "return_value"
    FUNCTION = "function"
    ARGUMENTS = "arguments"


@dataclass(frozen=True)
class ChildSlot:
    field: str
    role: ChildRole
    many: bool = False


STATEMENTS = ChildSlot("statements", ChildRole.STATEMENTS, many=True)
NAME = ChildSlot("Name", ChildRole.NAME)
VALUE = ChildSlot("Value", ChildRole.VALUE)
LEFT = ChildSlot("Left", ChildRole.LEFT)
RIGHT = ChildSlot("Right", ChildRole.RIGHT)
EXPRESSION = ChildSlot("Expression", ChildRole.EXPRESSION)
CONDITION = ChildSlot("Condition", ChildRole.CONDITION)
CONSEQUENCE = ChildSlot("Consequence", ChildRole.CONSEQUENCE)
ALTERNATIVE = ChildSlot("Alternative", ChildRole.ALTERNATIVE)
PARAMETERS = ChildSlot("Parameters", ChildRole.PARAMETERS, many=True)
BODY = ChildSlot("Body", ChildRole.BODY)
RETURN_VALUE = ChildSlot("ReturnValue", ChildRole.RETURN_VALUE)
FUNCTION = ChildSlot("Function", ChildRole.FUNCTION)
ARGUMENTS = ChildSlot("Arguments", ChildRole.ARGUMENTS, many=True)

PROBE_SLOTS: tuple[ChildSlot, ...] = (
    STATEMENTS,
    NAME,
    VALUE,
    LEFT,
    RIGHT,
    EXPRESSION,
    CONDITION,
    CONSEQUENCE,
    ALTERNATIVE,
    PARAMETERS,
    BODY,
    RETURN_VALUE,
    FUNCTION,
    ARGUMENTS,
)


def construct_slots(kind: ConstructKind) -> tuple[ChildSlot, ...]:
    match kind:
        case ConstructKind.PROGRAM | ConstructKind.BLOCK_STATEMENT:
            return (STATEMENTS,)
        case ConstructKind.LET_STATEMENT:
            return (NAME, VALUE)
        case ConstructKind.RETURN_STATEMENT:
            return (RETURN_VALUE,)
        case ConstructKind.EXPRESSION_STATEMENT:
            return (EXPRESSION,)
        case (
            ConstructKind.IDENTIFIER
            | ConstructKind.INTEGER_LITERAL
            | ConstructKind.BOOLEAN
            | ConstructKind.STRING_LITERAL
        ):
            return ()
        case ConstructKind.PREFIX_EXPRESSION:
            return (RIGHT,)
        case ConstructKind.INFIX_EXPRESSION:
            return (LEFT, RIGHT)
        case ConstructKind.IF_EXPRESSION:
            return (CONDITION, CONSEQUENCE, ALTERNATIVE)
        case ConstructKind.FUNCTION_LITERAL:
            return (PARAMETERS, BODY)
        case ConstructKind.CALL_EXPRESSION:
            return (FUNCTION, ARGUMENTS)
        case ConstructKind.GENERIC:
            return PROBE_SLOTS


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def display_value(raw: Mapping[str, Any]) -> str:
    """Pick the short text shown under a node's label."""
    value = raw.get("Value")
    if value is not None and not isinstance(value, (Mapping, list)):
        return _scalar_text(value)
    token = raw.get("Token")
    if isinstance(token, Mapping) and token.get("Literal"):
        return str(token["Literal"])
    if raw.get("Operator"):
        return str(raw["Operator"])
    if raw.get("string"):
        return str(raw["string"])
    return ""


@dataclass
class SyntaxNode:
    index: int
    kind: ConstructKind
    label: str
    display_value: str
    depth: int = 0
    parent: int | None = None
    role: ChildRole | None = None
    sibling_index: int = 0
    children: list[int] = field(default_factory=list)

    @property
    def node_id(self) -> str:
        return f"node-{self.index}"


def _slot_children(raw: Mapping[str, Any], slot: ChildSlot) -> list[Mapping[str, Any]]:
    value = raw.get(slot.field)
    if slot.many:
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, Mapping)]
    return [value] if isinstance(value, Mapping) else []


@dataclass
class SyntaxArena:
    """Pre-order flattening of a syntax tree; ``nodes[i].index == i``."""

    nodes: list[SyntaxNode] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> SyntaxNode:
        return self.nodes[index]

    @property
    def root(self) -> SyntaxNode | None:
        return self.nodes[0] if self.nodes else None

    def children_of(self, index: int) -> list[SyntaxNode]:
        return [self.nodes[i] for i in self.nodes[index].children]

    @classmethod
    def from_mapping(cls, root: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> SyntaxArena:
        """Flatten ``root`` without recursion.

        Raises ``CyclicTreeError`` if a node contains itself and
        ``TreeTooDeepError`` if nesting exceeds ``max_depth``.
        """
        arena = cls()
        if root is None:
            return arena

        # (raw node, parent index, role, sibling index, depth)
        stack: list[tuple[Any, int | None, ChildRole | None, int, int]] = [(root, None, None, 0, 0)]
        # ids of the mappings from the root down to the node being expanded
        path: list[int] = []
        on_path: set[int] = set()
        while stack:
            raw, parent, role, sibling, depth = stack.pop()
            if depth > max_depth:
                raise TreeTooDeepError(f"Syntax tree is deeper than {max_depth} levels")
            while len(path) > depth:
                on_path.discard(path.pop())

            index = len(arena.nodes)
            node = _make_node(raw, index)
            node.depth = depth
            node.parent = parent
            node.role = role
            node.sibling_index = sibling
            arena.nodes.append(node)
            if parent is not None:
                arena.nodes[parent].children.append(index)

            if not isinstance(raw, Mapping):
                continue

            path.append(id(raw))
            on_path.add(id(raw))
            pending = []
            for slot in construct_slots(node.kind):
                for position, child in enumerate(_slot_children(raw, slot)):
                    if id(child) in on_path:
                        raise CyclicTreeError(
                            f"{node.label} node at depth {depth} contains one of its ancestors in {slot.field!r}"
                        )
                    pending.append((child, index, slot.role, position, depth + 1))
            stack.extend(reversed(pending))

        return arena


def _make_node(raw: Any, index: int) -> SyntaxNode:
    if not isinstance(raw, Mapping):
        return SyntaxNode(index=index, kind=ConstructKind.GENERIC, label=UNKNOWN_LABEL, display_value="")
    label = raw.get("type")
    return SyntaxNode(
        index=index,
        kind=ConstructKind.from_label(label),
        label=label if isinstance(label, str) and label else UNKNOWN_LABEL,
        display_value=display_value(raw),
    )
