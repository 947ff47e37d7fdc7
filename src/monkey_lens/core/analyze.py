from monkey_lens.core.ast_graph import build_graph
from monkey_lens.core.ports.backend import LanguageBackend
from monkey_lens.core.syntax import DEFAULT_MAX_DEPTH
from monkey_lens.core.tokens import align_tokens_with_issues
from monkey_lens.models import AstGraph, TokenAlignment


class UpstreamError(RuntimeError):
    """The language service rejected the code; ``message`` is its error verbatim."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


async def analyze_tokens(backend: LanguageBackend, code: str) -> TokenAlignment:
    """Tokenize ``code`` with the backend and align the tokens with it."""
    result = await backend.tokenize(code)
    if result.error:
        raise UpstreamError(result.error)
    return align_tokens_with_issues(code, result.tokens)


async def analyze_ast(backend: LanguageBackend, code: str, max_depth: int = DEFAULT_MAX_DEPTH) -> AstGraph:
    """Parse ``code`` with the backend and lay out the resulting tree."""
    result = await backend.parse(code)
    if result.error:
        raise UpstreamError(result.error)
    return build_graph(result.ast, max_depth=max_depth)
