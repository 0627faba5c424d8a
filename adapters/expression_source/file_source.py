"""
Adapter: FileExpressionSource / InlineExpressionSource
Implementują port ExpressionSource.

FileExpressionSource czyta plik leniwie, linia po linii; każde wywołanie
expressions() otwiera plik od nowa. Usuwane są tylko znaki końca linii
("\\n", "\\r\\n"); spacje zostają, bo parser traktuje je dosłownie.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

logger = logging.getLogger("digit_calc.file_source")


class FileExpressionSource:
    def __init__(self, path: str | Path, skip_blank: bool = True) -> None:
        self._path = Path(path)
        self._skip_blank = skip_blank

    # -- ExpressionSource protocol -----------------------------------------

    def expressions(self) -> Iterator[str]:
        logger.debug("Reading expressions from %s", self._path)
        with self._path.open(encoding="utf-8", newline="") as fh:
            for line in fh:
                expr = line.rstrip("\r\n")
                if self._skip_blank and not expr.strip():
                    continue
                yield expr


class InlineExpressionSource:
    """Źródło w pamięci (stdin, testy, API)."""

    def __init__(self, lines: Iterable[str], skip_blank: bool = True) -> None:
        self._lines = [line.rstrip("\r\n") for line in lines]
        self._skip_blank = skip_blank

    def expressions(self) -> Iterator[str]:
        for expr in self._lines:
            if self._skip_blank and not expr.strip():
                continue
            yield expr
