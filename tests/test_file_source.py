from __future__ import annotations

import pytest

from adapters.expression_source.file_source import FileExpressionSource, InlineExpressionSource
from ports.expression_source import ExpressionSource


def test_file_source_yields_lines_without_terminators(tmp_path):
    path = tmp_path / "equations.txt"
    path.write_bytes(b"1+2\r\n(2+3)*4\n2 * 3 \n")

    source = FileExpressionSource(path)

    assert isinstance(source, ExpressionSource)
    assert list(source.expressions()) == ["1+2", "(2+3)*4", "2 * 3 "]


def test_file_source_is_restartable(tmp_path):
    path = tmp_path / "equations.txt"
    path.write_text("1+2\n3*4\n", encoding="utf-8")

    source = FileExpressionSource(path)

    assert list(source.expressions()) == list(source.expressions()) == ["1+2", "3*4"]


def test_file_source_skips_blank_lines_by_default(tmp_path):
    path = tmp_path / "equations.txt"
    path.write_text("1+2\n\n   \n3*4\n", encoding="utf-8")

    assert list(FileExpressionSource(path).expressions()) == ["1+2", "3*4"]
    assert list(FileExpressionSource(path, skip_blank=False).expressions()) == ["1+2", "", "   ", "3*4"]


def test_file_source_missing_file_raises_on_iteration(tmp_path):
    source = FileExpressionSource(tmp_path / "missing.txt")

    with pytest.raises(FileNotFoundError):
        list(source.expressions())


def test_inline_source_strips_terminators_and_blanks():
    source = InlineExpressionSource(["1+2\n", "", "4/2\r\n"])

    assert list(source.expressions()) == ["1+2", "4/2"]
