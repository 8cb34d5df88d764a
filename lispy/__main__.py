"""
Lispy - read-eval-print loop and script runner
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

# Readline support for history and line editing
try:
    import readline  # noqa: F401
except ImportError:
    pass

from lispy import __version__
from lispy.errors import LispyError, LispySyntaxError
from lispy.interpreter import Interpreter
from lispy.printer import format_value
from lispy.types.values import Error

logger = logging.getLogger("lispy")

PROMPT = "lispy> "


def create_arg_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        prog='lispy',
        description='Lispy - a small Lisp with Q-Expressions',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s                      # Interactive mode
    %(prog)s script.lspy          # Run a script
    %(prog)s -e "+ 1 2"           # Evaluate one line and print it
    %(prog)s --no-prelude         # Builtins only
        """
    )
    parser.add_argument('scripts', nargs='*', help='Lispy files to load in order')
    parser.add_argument('-e', '--eval', dest='code', help='Evaluate CODE and print the result')
    parser.add_argument('--no-prelude', action='store_true', help='Do not load the standard prelude')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def run_scripts(itp: Interpreter, scripts: list) -> int:
    for script in scripts:
        path = Path(script)
        try:
            results = itp.load(path.read_text(encoding='utf-8'))
        except OSError as e:
            print(f"Cannot read {path}: {e}", file=sys.stderr)
            return 1
        except LispySyntaxError as e:
            print(f"{path}: Syntax error: {e}", file=sys.stderr)
            return 1
        for value in results:
            if isinstance(value, Error):
                print(format_value(value))
    return 0


def repl(itp: Interpreter) -> None:
    print(f"Lispy Version {__version__}")
    print("Press Ctrl+D to Exit\n")
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue
        if not line.strip():
            continue
        try:
            print(itp.run(line))
        except LispySyntaxError as e:
            print(f"Syntax error: {e}")


def main(argv: Optional[list] = None) -> int:
    args = create_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        itp = Interpreter(prelude=None if args.no_prelude else 'auto')
    except LispyError as e:
        logger.error("%s", e)
        return 1

    if args.scripts:
        status = run_scripts(itp, args.scripts)
        if status:
            return status
    if args.code is not None:
        try:
            print(itp.run(args.code))
        except LispySyntaxError as e:
            print(f"Syntax error: {e}", file=sys.stderr)
            return 1
    if not args.scripts and args.code is None:
        repl(itp)
    return 0


if __name__ == '__main__':
    sys.exit(main())
