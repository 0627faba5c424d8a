"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

from contracts import ErrorKind, ExprAST


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expression: str


class EvaluateResponse(BaseModel):
    expression: str
    value: int
    steps: list[str]
    ast: ExprAST


class ExpressionErrorResponse(BaseModel):
    kind: ErrorKind
    detail: str


# ─────────────────────────── /evaluate/batch ─────────────────────

class BatchEvaluateRequest(BaseModel):
    expressions: list[str] = Field(default_factory=list)


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
