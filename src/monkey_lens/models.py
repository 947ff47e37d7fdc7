from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: str
    literal: str
    position: int


class SpanKind(str, Enum):
    PLAIN = "plain"
    TOKEN = "token"


class DisplaySpan(BaseModel):
    kind: SpanKind
    text: str
    start: int
    token_index: int | None = None
    token_type: str | None = None

    @property
    def end(self) -> int:
        return self.start + len(self.text)


class IssueKind(str, Enum):
    OFFSET_MISMATCH = "offset_mismatch"
    EMPTY_LITERAL = "empty_literal"
    BEHIND_CURSOR = "behind_cursor"
    NOT_FOUND = "not_found"


class AlignmentIssue(BaseModel):
    token_index: int
    literal: str
    declared_position: int
    resolved_position: int | None = None
    kind: IssueKind

    @property
    def dropped(self) -> bool:
        return self.kind is not IssueKind.OFFSET_MISMATCH


class TokenAlignment(BaseModel):
    spans: list[DisplaySpan]
    issues: list[AlignmentIssue] = []

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)

    @property
    def dropped(self) -> list[AlignmentIssue]:
        return [issue for issue in self.issues if issue.dropped]


class GraphPosition(BaseModel):
    x: float
    y: float


class GraphNode(BaseModel):
    id: str
    label: str
    display_value: str
    position: GraphPosition
    depth: int = 0


class GraphEdge(BaseModel):
    id: str
    source_id: str
    target_id: str


class AstGraph(BaseModel):
    nodes: list[GraphNode]
    edges: list[GraphEdge]

    @classmethod
    def empty(cls) -> "AstGraph":
        return cls(nodes=[], edges=[])


class TokenizeResult(BaseModel):
    tokens: list[Token] = []
    error: str | None = None

    @field_validator("tokens", mode="before")
    @classmethod
    def _null_tokens(cls, value: Any) -> Any:
        # the service encodes an empty token list as null
        return [] if value is None else value


class ParseResult(BaseModel):
    ast: dict[str, Any] | None = None
    error: str | None = None
