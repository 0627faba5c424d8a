"""
api/main.py — punkt wejścia FastAPI.

Adaptery są bezstanowe: tworzone raz przy budowie aplikacji i trzymane
w app.state. Każde żądanie dostaje własny Cursor i własne drzewo AST.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.expression_parser.descent_parser import RecursiveDescentParser
from api.routers import evaluate
from api.schemas import ExpressionErrorResponse, HealthResponse
from config import Settings
from contracts import ExpressionError
from services.batch_evaluator import BatchEvaluator

logger = logging.getLogger("digit_calc.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("%s API ready.", app.state.settings.app_title)
    yield
    logger.info("Shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.parser = RecursiveDescentParser(max_depth=settings.max_nesting_depth)
    app.state.evaluator = ASTEvaluator()
    app.state.batch_evaluator = BatchEvaluator(
        parser=app.state.parser,
        evaluator=app.state.evaluator,
        max_workers=settings.max_workers,
    )

    # Routers
    app.include_router(evaluate.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    # Globalny handler błędów wyrażeń
    @app.exception_handler(ExpressionError)
    async def expression_error_handler(request: Request, exc: ExpressionError):
        body = ExpressionErrorResponse(kind=exc.kind, detail=exc.message)
        return JSONResponse(status_code=422, content=body.model_dump(mode="json"))

    return app


app = create_app()
