"""
Copyright (C) 2025 yuygfgg

This file is part of rpnutils.

rpnutils is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

rpnutils is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with rpnutils.  If not, see <https://www.gnu.org/licenses/>.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .errors import ExpressionError
from .infix2postfix import UnclosedParenPolicy, shunting_yard
from .tokenizer import tokenize
from .validate import validate_infix, validate_postfix

logger = logging.getLogger("rpnutils")


class CheckFailed(ExpressionError):
    pass


def _setup_logging(verbose: bool) -> None:
    level = (
        logging.DEBUG
        if verbose or os.environ.get("RPNUTILS_DEBUG")
        else logging.INFO
    )
    logger.setLevel(level)
    if not logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="infix2postfix",
        description="Convert infix arithmetic expressions to postfix (RPN).",
    )
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("expressions", nargs="*", metavar="EXPR", help="infix expression")
    p.add_argument(
        "-i",
        "--input",
        type=Path,
        help="read expressions from FILE, one per line",
    )
    p.add_argument("-o", "--output", type=Path, help="write postfix output to FILE")
    p.add_argument(
        "--unclosed-paren",
        choices=[policy.value for policy in UnclosedParenPolicy],
        default=UnclosedParenPolicy.ERROR.value,
        help="handling of a '(' that is never closed (default: error)",
    )
    p.add_argument(
        "--check",
        action="store_true",
        help="validate the infix input and the postfix output",
    )
    p.add_argument(
        "--dump",
        action="store_true",
        help="print token dumps of infix and postfix lists to stderr",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


_VALUE_OPTIONS = frozenset({"-i", "--input", "-o", "--output", "--unclosed-paren"})


def _looks_like_expression(arg: str) -> bool:
    # "-5*2", "-(1+2)" and "--5" are expressions; "-v", "--dump" and "--" are not.
    body = arg.lstrip("-")
    return arg.startswith("-") and body != "" and not body[0].isalpha()


def _shield_expressions(argv: list[str]) -> list[str]:
    """
    Prefix a space to positional expressions that start with '-'.

    argparse takes such arguments for unknown options. The tokenizer skips
    the space, and argument order is kept.
    """
    shielded = []
    prev = None
    for arg in argv:
        if prev not in _VALUE_OPTIONS and _looks_like_expression(arg):
            arg = " " + arg
        shielded.append(arg)
        prev = arg
    return shielded


def convert_line(
    expression: str, policy: UnclosedParenPolicy, check: bool, dump: bool
) -> str:
    infix = tokenize(expression)
    if dump:
        sys.stderr.write(f"infix: {expression}\n{infix.dump()}\n")
    if check and not validate_infix(infix):
        raise CheckFailed(f"Invalid infix expression: {expression}")

    postfix = shunting_yard(infix, policy)
    if dump:
        sys.stderr.write(f"postfix: {postfix}\n{postfix.dump()}\n")
    if check and not validate_postfix(postfix):
        raise CheckFailed(f"Invalid postfix expression: {postfix}")
    return str(postfix)


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    if argv is None:
        argv = sys.argv[1:]
    ns = parser.parse_args(_shield_expressions(argv))
    _setup_logging(ns.verbose)

    expressions = [e[1:] if e.startswith(" -") else e for e in ns.expressions]
    if ns.input is not None:
        try:
            text = ns.input.read_text(encoding="utf-8")
        except OSError as e:
            sys.stderr.write(f"Error: cannot read {ns.input}: {e}\n")
            return 1
        expressions.extend(line for line in text.splitlines() if line.strip())
    if not expressions:
        parser.error("no expression given (pass EXPR or --input FILE)")

    policy = UnclosedParenPolicy(ns.unclosed_paren)
    results: list[str] = []
    for expression in expressions:
        try:
            results.append(convert_line(expression, policy, ns.check, ns.dump))
        except ExpressionError as e:
            sys.stderr.write(f"Error: {e}\n")
            return 1
        logger.debug("%s -> %s", expression, results[-1])

    output = "\n".join(results) + "\n"
    if ns.output is not None:
        try:
            ns.output.write_text(output, encoding="utf-8")
        except OSError as e:
            sys.stderr.write(f"Error: cannot write {ns.output}: {e}\n")
            return 1
        logger.info("Wrote %d expressions to %s", len(results), ns.output)
    else:
        sys.stdout.write(output)
    return 0

