from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from monkey_lens.core.syntax import DEFAULT_MAX_DEPTH
from monkey_lens.models import Token


class HealthResponse(BaseModel):
    status: str = "ok"


class CodeRequest(BaseModel):
    code: str


class AlignRequest(BaseModel):
    source: str
    tokens: list[Token] = []


class GraphRequest(BaseModel):
    ast: dict[str, Any] | None = None
    max_depth: int = DEFAULT_MAX_DEPTH


class AstCodeRequest(CodeRequest):
    max_depth: int = DEFAULT_MAX_DEPTH
