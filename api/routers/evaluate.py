"""
Router: POST /evaluate, POST /evaluate/batch

/evaluate       : jedno wyrażenie; błąd wyrażenia → 422 z rodzajem błędu
/evaluate/batch : wiele wyrażeń; błędy kodowane per wyrażenie, nigdy 4xx
                  (poza przekroczeniem max_batch_size → 413)
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.expression_parser.descent_parser import RecursiveDescentParser
from api.dependencies import get_batch_evaluator, get_evaluator, get_parser, get_settings
from api.schemas import BatchEvaluateRequest, EvaluateRequest, EvaluateResponse
from config import Settings
from contracts import BatchReport
from services.batch_evaluator import BatchEvaluator

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


@router.post("", response_model=EvaluateResponse)
async def evaluate(
    body: EvaluateRequest,
    parser: RecursiveDescentParser = Depends(get_parser),
    evaluator: ASTEvaluator = Depends(get_evaluator),
) -> EvaluateResponse:
    # ExpressionError obsługuje globalny handler w api/main.py
    ast = parser.parse(body.expression)
    result = evaluator.eval_expr(ast)
    return EvaluateResponse(
        expression=body.expression,
        value=result.value,
        steps=result.steps,
        ast=ast,
    )


@router.post("/batch", response_model=BatchReport)
def evaluate_batch(
    body: BatchEvaluateRequest,
    batch: BatchEvaluator = Depends(get_batch_evaluator),
    settings: Settings = Depends(get_settings),
) -> BatchReport:
    if len(body.expressions) > settings.max_batch_size:
        raise HTTPException(
            status_code=413,
            detail=f"Za dużo wyrażeń: {len(body.expressions)} > {settings.max_batch_size}",
        )
    return batch.evaluate_batch(body.expressions)
