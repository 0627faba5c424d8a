"""
Port: Evaluator
Odpowiedzialność: deterministyczne liczenie wyrażeń AST.
"""
from typing import Protocol, runtime_checkable

from contracts import EvalResult, ExprAST


@runtime_checkable
class Evaluator(Protocol):
    def eval_expr(self, ast: ExprAST) -> EvalResult:
        """
        Evaluates an arithmetic AST to an integer result.
        Returns EvalResult with:
          - value: int (division truncates toward zero)
          - steps: list of human-readable computation steps
        Raises EvaluationError on division by zero.
        Raises InvariantViolation for an operator outside + - * /.
        Never mutates the tree; evaluating twice gives the same result.
        """
        ...
