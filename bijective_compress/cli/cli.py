"""
Command line front end.
Accumulates -c/-d/-C/-D into one net shift and applies it to a single file:
read -> encode -> shift -> decode -> write, writing only if every step succeeded.
"""

import re
import sys
from argparse import ArgumentParser, ArgumentTypeError, Namespace
from contextlib import contextmanager
from os import path
from typing import Iterator, List, Optional

from bijective_compress.engine.engine import CompressionEngine
from bijective_compress.shared.config import HELP_TEXT
from bijective_compress.shared.errors import CompressError, InvalidArgument
from bijective_compress.shared.file_io import check_target, read_file, write_file
from bijective_compress.shared.log import IntTrace, configure_logging, get_logger

logger = get_logger("cli")

PREFIX_BASES = {"0x": 16, "0b": 2, "0o": 8}
DIGITS = "0123456789abcdef"

# A cluster of short flags: no-argument flags, optionally ending in -C/-D and its operand
FLAG_CLUSTER = re.compile(r"^-([vhcd]*)([CD].*)?$", re.DOTALL)


class CompressArgumentParser(ArgumentParser):
    """ArgumentParser that raises InvalidArgument instead of exiting with status 2."""

    def error(self, message: str):
        raise InvalidArgument(f"Error parsing arguments: {message}")


def parse_integer(text: str) -> int:
    """
    Parse a signed integer literal of any size.
    - Whitespace anywhere in the literal is ignored
    - Optional leading '-'
    - 0x/0b/0o prefixes select base 16/2/8, a bare leading 0 selects octal
    - Decimal otherwise
    """
    literal = "".join(text.split())
    sign = 1
    if literal.startswith("-"):
        sign, literal = -1, literal[1:]

    base, body = 10, literal
    prefix = literal[:2].lower()
    if prefix in PREFIX_BASES:
        base, body = PREFIX_BASES[prefix], literal[2:]
    elif len(literal) > 1 and literal[0] == "0":
        base, body = 8, literal[1:]

    if not body or any(c not in DIGITS[:base] for c in body.lower()):
        raise InvalidArgument("Argument is not an integer.")
    return sign * int(body, base)


def shift_operand(text: str) -> int:
    """argparse type for -C/-D operands."""
    try:
        return parse_integer(text)
    except InvalidArgument as e:
        raise ArgumentTypeError(str(e)) from e


def build_parser(prog: Optional[str] = None) -> CompressArgumentParser:
    parser = CompressArgumentParser(prog=prog, add_help=False)
    parser.add_argument("-v", dest="verbose", action="store_true", help="debug mode")
    parser.add_argument("-h", dest="help", action="store_true", help="show usage and exit")
    parser.add_argument("-c", dest="compress_once", action="count", default=0, help="compress once")
    parser.add_argument("-d", dest="decompress_once", action="count", default=0, help="decompress once")
    parser.add_argument("-C", dest="compress_many", action="append", type=shift_operand, default=[], metavar="N", help="compress N times")
    parser.add_argument("-D", dest="decompress_many", action="append", type=shift_operand, default=[], metavar="N", help="decompress N times")
    parser.add_argument("filenames", nargs="*", metavar="FILENAME")
    return parser


def net_shift(args: Namespace) -> int:
    """Sum every -c/-d/-C/-D occurrence into one signed shift."""
    return (args.compress_once - args.decompress_once
            + sum(args.compress_many) - sum(args.decompress_many))


def select_filename(filenames: List[str]) -> str:
    if not filenames:
        raise InvalidArgument("No filename specified.")
    if len(filenames) > 1:
        raise InvalidArgument("Too many arguments.")
    return filenames[0]


def join_operands(argv: List[str]) -> List[str]:
    """
    Attach a detached -C/-D operand to its flag (["-C", "-0x10"] -> ["-C-0x10"]).
    The word after -C or -D is always its operand, even when it starts with '-'.
    """
    joined: List[str] = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--":
            joined.extend(argv[i:])
            break
        match = FLAG_CLUSTER.match(arg)
        if match and match.group(2) in ("C", "D") and i + 1 < len(argv):
            joined.append(arg + argv[i + 1])
            i += 2
            continue
        joined.append(arg)
        i += 1
    return joined


def wants_help(argv: List[str]) -> bool:
    """
    Return True when -h is reached before any flag error, scanning left to right.
    Expects operands already joined to their flags.
    """
    for arg in argv:
        if arg == "--": break
        if arg == "-" or not arg.startswith("-"): continue
        match = FLAG_CLUSTER.match(arg)
        if not match:
            return False
        if "h" in match.group(1):
            return True
        if match.group(2):
            try:
                parse_integer(match.group(2)[1:])
            except InvalidArgument:
                return False
    return False


@contextmanager
def unlimited_int_digits() -> Iterator[None]:
    """Lift the int/str conversion digit limit, restoring the previous one on exit."""
    if not hasattr(sys, "set_int_max_str_digits"):
        yield
        return
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


def run_compress(file_path: str, shift: int, verbose: bool = False, engine: Optional[CompressionEngine] = None) -> int:
    """
    Shift the contents of file_path by `shift` steps in place.
    Returns the new file length. The file is untouched if any step fails.
    """
    engine = engine or CompressionEngine()
    check_target(file_path)
    contents: bytes = read_file(file_path, verbose=verbose)
    result: bytes = engine.compress_bytes(contents, shift)
    write_file(file_path, result, verbose=verbose)
    return len(result)


def run_cli(argv: Optional[List[str]] = None, prog: Optional[str] = None) -> int:
    """
    Parse argv, run the requested shift and return the process exit status.
    Errors are printed to stderr and yield status 1.
    """
    parser = build_parser(prog or path.basename(sys.argv[0]))
    argv = join_operands(sys.argv[1:] if argv is None else list(argv))

    # -C/-D operands and verbose traces may exceed the default int/str digit limit
    with unlimited_int_digits():
        if wants_help(argv):
            print(HELP_TEXT % {"prog": parser.prog}, end="")
            return 0

        try:
            args = parser.parse_intermixed_args(argv)
            configure_logging(args.verbose)
            file_path = select_filename(args.filenames)
            shift = net_shift(args)
            logger.debug("compress = %s", IntTrace(shift))

            run_compress(file_path, shift, verbose=args.verbose)
        except CompressError as e:
            print(e, file=sys.stderr)
            return 1
    return 0


def main() -> None:
    sys.exit(run_cli())
