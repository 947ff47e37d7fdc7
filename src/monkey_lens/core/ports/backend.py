from typing import Protocol

from monkey_lens.models import ParseResult, TokenizeResult


class LanguageBackend(Protocol):
    async def tokenize(self, code: str) -> TokenizeResult: ...

    async def parse(self, code: str) -> ParseResult: ...

    async def dispose(self) -> None: ...
