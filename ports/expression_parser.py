"""
Port: ExpressionParser
Odpowiedzialność: zamiana tekstu wyrażenia na drzewo ExprAST.
"""
from typing import Protocol, runtime_checkable

from contracts import ExprAST


@runtime_checkable
class ExpressionParser(Protocol):
    def parse(self, text: str) -> ExprAST:
        """
        Parses a single-digit arithmetic expression into an AST.

        The whole input must be consumed. Either returns a complete tree
        or raises ExpressionParseError (kind + message); no partial trees.
        """
        ...
