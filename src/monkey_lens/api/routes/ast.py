from fastapi import APIRouter, Depends, HTTPException

from monkey_lens.api.dependencies import get_backend
from monkey_lens.api.schemas import AstCodeRequest, GraphRequest
from monkey_lens.core.analyze import UpstreamError, analyze_ast
from monkey_lens.core.ast_graph import build_graph
from monkey_lens.core.ports.backend import LanguageBackend
from monkey_lens.core.syntax import MalformedTreeError
from monkey_lens.models import AstGraph

router = APIRouter(prefix="/ast", tags=["ast"])


@router.post("", response_model=AstGraph)
async def parse(
    body: AstCodeRequest,
    backend: LanguageBackend = Depends(get_backend),
) -> AstGraph:
    """Parse code with the language service and lay out the tree."""
    try:
        return await analyze_ast(backend, body.code, max_depth=body.max_depth)
    except UpstreamError as exc:
        raise HTTPException(status_code=422, detail=exc.message) from exc
    except MalformedTreeError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.post("/graph", response_model=AstGraph)
async def graph(body: GraphRequest) -> AstGraph:
    """Lay out an already parsed tree."""
    try:
        return build_graph(body.ast, max_depth=body.max_depth)
    except MalformedTreeError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
