"""
Adapter: RecursiveDescentParser
Implementuje port ExpressionParser.

Parser zejść rekurencyjnych bez tokenizera, czytający znak po znaku (Cursor):
  expr   = term (('+'|'-') term)*
  term   = factor (('*'|'/') factor)*
  factor = DIGIT | '(' expr ')'

Tylko liczby jednocyfrowe; wszystkie operatory lewostronnie łączne.

DescentParser: sam silnik gramatyki; parse() NIE sprawdza końca wejścia.
RecursiveDescentParser: adapter, uruchamia silnik i wymaga, żeby cały
tekst został skonsumowany (pozostały ')' → unmatched_closing_parenthesis).

Głębokość nawiasów jest ograniczona (max_depth); przekroczenie to
nesting_too_deep, a nie RecursionError. Długie łańcuchy bez nawiasów
są składane w pętli i nie zużywają stosu.
"""
from __future__ import annotations

from adapters.expression_parser.cursor import Cursor
from contracts import BinOpNode, ErrorKind, ExprAST, ExpressionParseError, LiteralNode

_DIGITS = "0123456789"
DEFAULT_MAX_DEPTH = 100
_MUL_OPS = ("*", "/")
_ADD_OPS = ("+", "-")


class DescentParser:
    def __init__(self, expression: str, pos: int = 0, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.cursor = Cursor(expression, pos)
        self.max_depth = max_depth
        self._depth = 0

    def parse(self) -> ExprAST:
        return self.parse_add_sub()

    def parse_primary(self) -> ExprAST:
        curr = self.cursor.current_char()

        if curr == "(":
            # Limit głębokości nawiasów
            if self._depth >= self.max_depth:
                raise ExpressionParseError(ErrorKind.NESTING_TOO_DEEP)
            self._depth += 1
            self.cursor.advance()
            node = self.parse_add_sub()
            self._depth -= 1
            if self.cursor.current_char() != ")":
                raise ExpressionParseError(ErrorKind.UNMATCHED_PARENTHESIS)
            self.cursor.advance()
            return node

        if curr is not None and curr in _DIGITS:
            nxt = self.cursor.peek_next()
            if nxt is not None and nxt in _DIGITS:
                raise ExpressionParseError(ErrorKind.MULTI_DIGIT_NUMBER)
            if nxt == ".":
                raise ExpressionParseError(ErrorKind.FRACTIONAL_NUMBER)
            self.cursor.advance()
            return LiteralNode(value=int(curr))

        raise ExpressionParseError(ErrorKind.UNEXPECTED_CHARACTER)

    def parse_mul_div(self) -> ExprAST:
        node = self.parse_primary()
        while self.cursor.current_char() in _MUL_OPS:
            op = self.cursor.current_char()
            self.cursor.advance()
            right = self.parse_primary()
            node = BinOpNode(op=op, left=node, right=right)  # type: ignore[arg-type]
        return node

    def parse_add_sub(self) -> ExprAST:
        node = self.parse_mul_div()
        while self.cursor.current_char() in _ADD_OPS:
            op = self.cursor.current_char()
            self.cursor.advance()
            right = self.parse_mul_div()
            node = BinOpNode(op=op, left=node, right=right)  # type: ignore[arg-type]
        return node


class RecursiveDescentParser:
    """Bezstanowy adapter, nowy DescentParser (i Cursor) na każde wyrażenie."""

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {max_depth}")
        self._max_depth = max_depth

    # -- ExpressionParser protocol ------------------------------------------

    def parse(self, text: str) -> ExprAST:
        engine = DescentParser(text, max_depth=self._max_depth)
        ast = engine.parse()

        if engine.cursor.at_end():
            return ast
        if engine.cursor.current_char() == ")":
            raise ExpressionParseError(ErrorKind.UNMATCHED_CLOSING_PARENTHESIS)
        raise ExpressionParseError(ErrorKind.UNEXPECTED_CHARACTER)
