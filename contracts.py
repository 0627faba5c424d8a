"""
contracts.py — Jedyne źródło prawdy dla wszystkich typów danych w DigitCalc.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── AST ─────────────────────────────────────────

class LiteralNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["literal"] = "literal"
    value: int


class BinOpNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_type: Literal["binop"] = "binop"
    op: Literal["+", "-", "*", "/"]
    left: "ExprAST"
    right: "ExprAST"


ExprAST = Annotated[Union[LiteralNode, BinOpNode], Field(discriminator="node_type")]
BinOpNode.model_rebuild()


# ─────────────────────────── Błędy ───────────────────────────────────────

class ErrorKind(str, Enum):
    UNEXPECTED_CHARACTER = "unexpected_character"
    FRACTIONAL_NUMBER = "fractional_number"
    MULTI_DIGIT_NUMBER = "multi_digit_number"
    UNMATCHED_PARENTHESIS = "unmatched_parenthesis"
    UNMATCHED_CLOSING_PARENTHESIS = "unmatched_closing_parenthesis"
    NESTING_TOO_DEEP = "nesting_too_deep"
    DIVISION_BY_ZERO = "division_by_zero"


ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.UNEXPECTED_CHARACTER: "unexpected character in expression",
    ErrorKind.FRACTIONAL_NUMBER: "fractional numbers are not allowed",
    ErrorKind.MULTI_DIGIT_NUMBER: "only single-digit integers are allowed",
    ErrorKind.UNMATCHED_PARENTHESIS: "invalid character, expected ')' after '('",
    ErrorKind.UNMATCHED_CLOSING_PARENTHESIS: "unexpected ')' without opening '('",
    ErrorKind.NESTING_TOO_DEEP: "parentheses nested too deeply",
    ErrorKind.DIVISION_BY_ZERO: "division by zero",
}


class ExpressionError(ValueError):
    """Błąd wyrażenia wynikający z danych użytkownika, zawsze do odzyskania."""

    def __init__(self, kind: ErrorKind, message: str | None = None) -> None:
        self.kind = kind
        self.message = message or ERROR_MESSAGES[kind]
        super().__init__(self.message)


class ExpressionParseError(ExpressionError):
    pass


class EvaluationError(ExpressionError):
    pass


class InvariantViolation(RuntimeError):
    """Stan nieosiągalny z poziomu gramatyki (np. operator spoza zbioru)."""


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalResult(BaseModel):
    value: int
    steps: list[str] = Field(default_factory=list)  # czytelne kroki


# ─────────────────────────── Batch ───────────────────────────────────────

class ExpressionOutcome(BaseModel):
    index: int
    expression: str
    value: Optional[int] = None
    error_kind: Optional[ErrorKind] = None
    error_stage: Optional[Literal["parse", "eval"]] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None


class BatchReport(BaseModel):
    outcomes: list[ExpressionOutcome]
    succeeded: int
    failed: int

    @classmethod
    def from_outcomes(cls, outcomes: list[ExpressionOutcome]) -> "BatchReport":
        succeeded = sum(1 for o in outcomes if o.ok)
        return cls(outcomes=outcomes, succeeded=succeeded, failed=len(outcomes) - succeeded)
