"""
dependencies.py — FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni adapter przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.expression_parser.descent_parser import RecursiveDescentParser
from config import Settings
from services.batch_evaluator import BatchEvaluator


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_parser(request: Request) -> RecursiveDescentParser:
    return request.app.state.parser


def get_evaluator(request: Request) -> ASTEvaluator:
    return request.app.state.evaluator


def get_batch_evaluator(request: Request) -> BatchEvaluator:
    return request.app.state.batch_evaluator
