from collections.abc import Mapping, Sequence
from typing import Any

from monkey_lens.models import ParseResult, Token, TokenizeResult


class InMemoryLanguageBackend:
    """Backend returning canned results, recording the code it was given."""

    def __init__(
        self,
        tokens: Sequence[Token | Mapping[str, Any]] = (),
        ast: Mapping[str, Any] | None = None,
        error: str | None = None,
    ) -> None:
        self.tokens = [t if isinstance(t, Token) else Token.model_validate(t) for t in tokens]
        self.ast = dict(ast) if ast is not None else None
        self.error = error
        self.received: list[tuple[str, str]] = []
        self.disposed = False

    async def tokenize(self, code: str) -> TokenizeResult:
        self.received.append(("tokenize", code))
        if self.error:
            return TokenizeResult(error=self.error)
        return TokenizeResult(tokens=list(self.tokens))

    async def parse(self, code: str) -> ParseResult:
        self.received.append(("parse", code))
        if self.error:
            return ParseResult(error=self.error)
        return ParseResult(ast=self.ast)

    async def dispose(self) -> None:
        self.disposed = True
