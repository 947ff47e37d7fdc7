from __future__ import annotations

from fastapi import FastAPI

from monkey_lens.api.lifespan import lifespan
from monkey_lens.api.routes.ast import router as ast_router
from monkey_lens.api.routes.health import router as health_router
from monkey_lens.api.routes.tokens import router as tokens_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Monkey Lens API",
        description="Align Monkey tokens with their source and lay out Monkey syntax trees.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(health_router, include_in_schema=False)
    app.include_router(tokens_router)
    app.include_router(ast_router)

    return app
