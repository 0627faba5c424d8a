"""
Cursor: pozycja odczytu w tekście wyrażenia.

Bez tokenizera: parser czyta bezpośrednio znaki. Za końcem tekstu
current_char() zwraca None zamiast rzucać IndexError.
"""
from __future__ import annotations


class Cursor:
    def __init__(self, source: str, pos: int = 0) -> None:
        self.source = source
        self.pos = pos

    def current_char(self) -> str | None:
        if self.pos >= len(self.source):
            return None
        return self.source[self.pos]

    def peek_next(self) -> str | None:
        """Znak tuż za bieżącym, bez przesuwania i bez pomijania spacji."""
        nxt = self.pos + 1
        return self.source[nxt] if nxt < len(self.source) else None

    def advance(self) -> None:
        self.pos += 1
        # Pomijana jest co najwyżej jedna spacja
        if self.current_char() == " ":
            self.pos += 1

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, source={self.source!r})"
