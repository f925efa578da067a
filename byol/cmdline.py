"""
Interactive interpreter for byol, a small Lisp with S-Expressions,
Q-Expressions and a flat global environment.

For example:

    byol

starts a read-evaluate-print loop, and

    byol -e "join {1 2} {3}"

evaluates one line and exits. Lines piped on standard input are evaluated
one by one without a banner or prompt.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator, Optional, TextIO

from byol import config
from byol.errors import ByolSyntaxError
from byol.interpreter import Interpreter
from byol.printer import print_value
from byol.reader.parser import parse
from byol.debug_utils.ast_stats import summary, format_tree

logger = logging.getLogger(__name__)

VERSION = "0.0.1"

parser = argparse.ArgumentParser(
    prog="byol",
    description="Interactive interpreter for the byol Lisp.",
)
parser.add_argument("-e", "--eval", dest="expr", action="append",
                    help="Evaluate EXPR, print the result and exit. May be repeated.")
parser.add_argument("-p", "--prelude", type=Path,
                    help="Evaluate each line of this file before starting.")
parser.add_argument("-a", "--show-ast", action="store_true",
                    help="After each result, print the parse tree and its statistics.")
parser.add_argument("--log-level",
                    help="Logging level (default from BYOL_LOG_LEVEL, else WARNING).")


def run_line(interp: Interpreter, line: str, out: TextIO, show_ast: bool = False) -> None:
    """Evaluate one line and write exactly one result line (plus the tree if asked)."""
    try:
        tree = parse(line)
    except ByolSyntaxError as exc:
        print(exc, file=out)
        return
    print_value(interp.eval_tree(tree), file=out)
    if show_ast:
        print(summary(tree), file=out)
        out.write(format_tree(tree))


def repl(interp: Interpreter, lines: Iterable[str], out: Optional[TextIO] = None,
         show_ast: bool = False) -> None:
    out = out or sys.stdout
    for line in lines:
        if not line.strip():
            continue
        run_line(interp, line, out, show_ast)


def _prompted_lines(prompt: str) -> Iterator[str]:
    try:
        import readline  # noqa: F401  line editing and history for input()
    except ImportError:
        pass
    while True:
        try:
            yield input(prompt)
        except EOFError:
            print()
            return


def load_prelude(path: Optional[Path]) -> Optional[str]:
    if path is None:
        return None
    logger.info("loading prelude from %s", path)
    return path.read_text(encoding="utf-8")


def run(args: argparse.Namespace, stdin: Optional[TextIO] = None) -> int:
    stdin = stdin or sys.stdin
    logging.basicConfig(
        level=(args.log_level or config.get_log_level()).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        prelude = load_prelude(args.prelude or config.get_prelude_path())
    except OSError as exc:
        logger.error("cannot read prelude: %s", exc)
        prelude = None
    interp = Interpreter(prelude=prelude)

    if args.expr:
        repl(interp, args.expr, show_ast=args.show_ast)
    elif not stdin.isatty():
        repl(interp, (line.rstrip("\n") for line in stdin), show_ast=args.show_ast)
    else:
        print(f"BYOL Version {VERSION}")
        print("Press CTRL-C to Exit\n")
        try:
            repl(interp, _prompted_lines(config.get_prompt()), show_ast=args.show_ast)
        except KeyboardInterrupt:
            print()
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    return run(parser.parse_args(argv))
