#!/usr/bin/env python3
"""
digitcalc.py — CLI narzędzie DigitCalc.

Liczy wyrażenia arytmetyczne na liczbach jednocyfrowych (+ - * / i nawiasy).
Nie wymaga uruchomionego serwera API.

Konfiguracja: zmienne środowiskowe z prefiksem DIGIT_CALC_
lub plik .env (np. DIGIT_CALC_INPUT_FILE=equations.txt).

Podkomendy:
    run   — policz wszystkie wyrażenia z pliku (równolegle)
    eval  — policz jedno wyrażenie
    tree  — pokaż drzewo AST wyrażenia

Użycie:
    python digitcalc.py run
    python digitcalc.py run --file equations.txt --table
    cat equations.txt | python digitcalc.py run --file -
    python digitcalc.py eval "(2+3)*4" --steps
    python digitcalc.py tree "2+3*4"
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table
from rich.tree import Tree

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.expression_parser.descent_parser import RecursiveDescentParser
from adapters.expression_source.file_source import FileExpressionSource, InlineExpressionSource
from config import Settings
from contracts import BatchReport, BinOpNode, ExprAST, ExpressionError
from ports.expression_source import ExpressionSource
from services.batch_evaluator import BatchEvaluator, format_outcome


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _safe_terminal_text(value: Any) -> str:
    s = str(value)
    encoding = sys.stdout.encoding or "utf-8"
    try:
        s.encode(encoding)
        return s
    except UnicodeEncodeError:
        return s.encode(encoding, errors="replace").decode(encoding, errors="replace")


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(_safe_terminal_text(key), _safe_terminal_text(value))
    _console().print(table)


def _print_report_table(report: BatchReport) -> None:
    table = Table(
        title=f"Expressions [{len(report.outcomes)}]",
        box=box.ASCII,
        show_lines=False,
    )
    table.add_column("#", justify="right", no_wrap=True, style="cyan")
    table.add_column("Expression")
    table.add_column("Result", justify="right")
    table.add_column("Error")
    for o in report.outcomes:
        table.add_row(
            str(o.index),
            _safe_terminal_text(o.expression),
            "" if o.value is None else str(o.value),
            _safe_terminal_text(o.error_message or ""),
        )
    _console().print(table)


def _label(node: ExprAST) -> str:
    return node.op if isinstance(node, BinOpNode) else str(node.value)


def _build_tree(root: ExprAST) -> Tree:
    tree = Tree(_label(root))
    stack: list[tuple[ExprAST, Tree]] = [(root, tree)]
    while stack:
        node, branch = stack.pop()
        if isinstance(node, BinOpNode):
            left = branch.add(_label(node.left))
            right = branch.add(_label(node.right))
            stack.append((node.right, right))
            stack.append((node.left, left))
    return tree


def _source(args: argparse.Namespace, settings: Settings) -> ExpressionSource:
    path = args.file or settings.input_file
    if path == "-":
        return InlineExpressionSource(sys.stdin.read().splitlines(), skip_blank=settings.skip_blank_lines)
    return FileExpressionSource(path, skip_blank=settings.skip_blank_lines)


# -- podkomendy ------------------------------------------------------------

def _run(args: argparse.Namespace, settings: Settings) -> int:
    source = _source(args, settings)
    try:
        expressions = list(source.expressions())
    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        return 1

    workers = args.workers or settings.max_workers
    batch = BatchEvaluator(
        parser=RecursiveDescentParser(max_depth=settings.max_nesting_depth),
        max_workers=workers,
    )
    report = batch.evaluate_batch(expressions)

    if args.table:
        _print_report_table(report)
    else:
        for outcome in report.outcomes:
            print(format_outcome(outcome))
    print(f"{report.succeeded} ok, {report.failed} failed", file=sys.stderr)
    return 0


def _eval(args: argparse.Namespace, settings: Settings) -> int:
    try:
        ast = RecursiveDescentParser(max_depth=settings.max_nesting_depth).parse(args.expression)
        result = ASTEvaluator().eval_expr(ast)
    except ExpressionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(f"{args.expression} = {result.value}")
    if args.steps:
        _print_kv_table(
            "Steps",
            [(str(i), step) for i, step in enumerate(result.steps, start=1)],
        )
    return 0


def _tree(args: argparse.Namespace, settings: Settings) -> int:
    try:
        ast = RecursiveDescentParser(max_depth=settings.max_nesting_depth).parse(args.expression)
    except ExpressionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    _console().print(_build_tree(ast))
    return 0


# -- main ------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="digitcalc",
        description="DigitCalc — kalkulator wyrażeń jednocyfrowych",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # run
    p = sub.add_parser("run", help="Policz wszystkie wyrażenia z pliku")
    p.add_argument("--file", "-f", help="Plik z wyrażeniami ('-' = stdin)")
    p.add_argument("--table", action="store_true", help="Wyniki jako tabela")
    p.add_argument("--workers", "-w", type=int, default=None, metavar="N")

    # eval
    p = sub.add_parser("eval", help="Policz jedno wyrażenie")
    p.add_argument("expression", help="Wyrażenie, np. \"(2+3)*4\"")
    p.add_argument("--steps", "-s", action="store_true",
                   help="Pokaż kroki obliczeń")

    # tree
    p = sub.add_parser("tree", help="Pokaż drzewo AST wyrażenia")
    p.add_argument("expression", help="Wyrażenie, np. \"2+3*4\"")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    cmds = {
        "run":  _run,
        "eval": _eval,
        "tree": _tree,
    }
    return cmds[args.command](args, settings)


if __name__ == "__main__":
    sys.exit(main())
