"""
Adapter: ASTEvaluator
Implementuje port Evaluator: przejście post-order ExprAST na liczbach int,
na jawnym stosie (głębokie drzewa nie wyczerpują stosu wywołań).

Dzielenie jest całkowite i obcina wynik w stronę zera (jak dzielenie
maszynowe), więc -7 / 2 = -3, a nie -4 jak przy operatorze //.

Dzielenie przez zero → EvaluationError (błąd danych, do odzyskania).
Operator spoza + - * / → InvariantViolation (nieosiągalne z parsera).
"""
from __future__ import annotations

from contracts import (
    BinOpNode,
    ErrorKind,
    EvalResult,
    EvaluationError,
    ExprAST,
    InvariantViolation,
    LiteralNode,
)


def _trunc_div(a: int, b: int) -> int:
    if b == 0:
        raise EvaluationError(ErrorKind.DIVISION_BY_ZERO)
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


# Mapowanie symboli operatorów na operacje całkowite
_OP_FUNCS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _trunc_div,
}


class ASTEvaluator:
    """Czysty ewaluator drzew wyrażeń, nie trzyma stanu między wywołaniami."""

    # -- Evaluator protocol ------------------------------------------------

    def eval_expr(self, ast: ExprAST) -> EvalResult:
        value, steps = self._eval(ast)
        return EvalResult(value=value, steps=steps)

    # -- Prywatne ----------------------------------------------------------

    def _eval(self, root: ExprAST) -> tuple[int, list[str]]:
        """Zwraca (wartość, lista kroków)."""
        steps: list[str] = []
        values: list[int] = []
        # (węzeł, dzieci już policzone?)
        stack: list[tuple[ExprAST, bool]] = [(root, False)]

        while stack:
            node, expanded = stack.pop()

            if isinstance(node, LiteralNode):
                values.append(node.value)
                continue

            if not isinstance(node, BinOpNode):
                raise TypeError(f"Nieznany typ węzła AST: {type(node)}")

            if not expanded:
                # Kolejność: zawsze lewy, potem prawy
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
                continue

            right_val = values.pop()
            left_val = values.pop()

            fn = _OP_FUNCS.get(node.op)
            if fn is None:
                raise InvariantViolation(f"Nieznany operator: {node.op!r}")

            result = fn(left_val, right_val)
            steps.append(f"{left_val} {node.op} {right_val} = {result}")
            values.append(result)

        return values[0], steps
