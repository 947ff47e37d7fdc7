from fastapi import APIRouter, Depends, HTTPException

from monkey_lens.api.dependencies import get_backend
from monkey_lens.api.schemas import AlignRequest, CodeRequest
from monkey_lens.core.analyze import UpstreamError, analyze_tokens
from monkey_lens.core.ports.backend import LanguageBackend
from monkey_lens.core.tokens import align_tokens_with_issues
from monkey_lens.models import TokenAlignment

router = APIRouter(prefix="/tokens", tags=["tokens"])


@router.post("", response_model=TokenAlignment)
async def tokenize(
    body: CodeRequest,
    backend: LanguageBackend = Depends(get_backend),
) -> TokenAlignment:
    """Tokenize code with the language service and align the result."""
    try:
        return await analyze_tokens(backend, body.code)
    except UpstreamError as exc:
        raise HTTPException(status_code=422, detail=exc.message) from exc


@router.post("/align", response_model=TokenAlignment)
async def align(body: AlignRequest) -> TokenAlignment:
    """Align an already tokenized source."""
    return align_tokens_with_issues(body.source, body.tokens)
