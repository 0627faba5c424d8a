"""
Port: ExpressionSource
Odpowiedzialność: dostarczenie wyrażeń (jedno na linię) do przetworzenia.
"""
from typing import Iterator, Protocol, runtime_checkable


@runtime_checkable
class ExpressionSource(Protocol):
    def expressions(self) -> Iterator[str]:
        """
        Yields expression strings lazily, without line terminators.
        Each call starts a fresh pass over the underlying input.
        """
        ...
