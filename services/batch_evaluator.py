"""
services/batch_evaluator.py: parsowanie i liczenie wielu niezależnych wyrażeń.

Przepływ dla jednego wyrażenia:
  tekst → ExpressionParser.parse → ExprAST → Evaluator.eval_expr → int

Batch: jedno zadanie na wyrażenie w ThreadPoolExecutor tworzonym na czas
wywołania; wyjście z bloku `with` czeka na wszystkie zadania. Zadania nie
współdzielą stanu (każde ma własny Cursor i własne drzewo), a błąd jednego
wyrażenia nie przerywa pozostałych. Wyniki wracają w kolejności wejścia.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.expression_parser.descent_parser import RecursiveDescentParser
from contracts import (
    BatchReport,
    EvaluationError,
    ExpressionOutcome,
    ExpressionParseError,
)
from ports.evaluator import Evaluator
from ports.expression_parser import ExpressionParser

logger = logging.getLogger("digit_calc.batch")


class BatchEvaluator:
    def __init__(
        self,
        parser: ExpressionParser | None = None,
        evaluator: Evaluator | None = None,
        max_workers: int = 8,
    ) -> None:
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self._parser = parser or RecursiveDescentParser()
        self._evaluator = evaluator or ASTEvaluator()
        self._max_workers = max_workers

    def evaluate_one(self, text: str, index: int = 0) -> ExpressionOutcome:
        """
        Parses and evaluates a single expression.
        Parse and evaluation errors are encoded in the outcome; an
        InvariantViolation is a bug and propagates to the caller.
        """
        try:
            ast = self._parser.parse(text)
        except ExpressionParseError as exc:
            logger.debug("Parse failed for %r: %s", text, exc)
            return ExpressionOutcome(
                index=index,
                expression=text,
                error_kind=exc.kind,
                error_stage="parse",
                error_message=exc.message,
            )

        try:
            result = self._evaluator.eval_expr(ast)
        except EvaluationError as exc:
            logger.debug("Evaluation failed for %r: %s", text, exc)
            return ExpressionOutcome(
                index=index,
                expression=text,
                error_kind=exc.kind,
                error_stage="eval",
                error_message=exc.message,
            )

        return ExpressionOutcome(index=index, expression=text, value=result.value)

    def evaluate_batch(self, expressions: Iterable[str]) -> BatchReport:
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            futures = [
                pool.submit(self.evaluate_one, text, i)
                for i, text in enumerate(expressions)
            ]
        outcomes = [f.result() for f in futures]

        report = BatchReport.from_outcomes(outcomes)
        logger.info(
            "Batch done: %d expressions, %d ok, %d failed.",
            len(outcomes), report.succeeded, report.failed,
        )
        return report


def format_outcome(outcome: ExpressionOutcome) -> str:
    """Linia wyniku: '<wyrażenie> = <wynik>' albo opis błędu."""
    if outcome.ok:
        return f"{outcome.expression} = {outcome.value}"
    verb = "parsing" if outcome.error_stage == "parse" else "evaluating"
    return f"Error {verb} expression {outcome.expression}: {outcome.error_message}"
