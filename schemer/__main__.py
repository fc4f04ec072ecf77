"""
Interpreter for the Schemer language.

    schemer

starts an interactive session, and

    schemer program.scm

loads program.scm and prints the value of its last form.
"""
import argparse
import logging
import sys

from schemer.builtin.env_builtin import primitive_bindings
from schemer.config import get_log_level
from schemer.errors import SchemerError
from schemer.interpreter import Interpreter
from schemer.repl import run_repl

parser = argparse.ArgumentParser(
    prog="schemer",
    description="Interpreter for a small Scheme dialect.",
)
parser.add_argument("program", nargs="?", help="file to load; omit for an interactive session")
parser.add_argument("--log-level", default=None, help="logging level (default: $SCHEMER_LOG_LEVEL or WARNING)")


def run(args) -> int:
    logging.basicConfig(level=args.log_level.upper() if args.log_level else get_log_level())
    env = primitive_bindings()
    if args.program is None:
        run_repl(env)
        return 0
    try:
        result = Interpreter(env).load(args.program)
    except (SchemerError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    except RecursionError:
        print("Recursion depth exceeded", file=sys.stderr)
        return 1
    print(result)
    return 0


def main(argv=None) -> int:
    return run(parser.parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
