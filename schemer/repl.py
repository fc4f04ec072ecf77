"""Line-oriented read-eval-print loop.

Each line is read as a single expression and evaluated in the session's
global environment. Errors are reported as text and the loop continues.
"""
from __future__ import annotations

import logging
import sys
from typing import TextIO

from schemer.config import get_prompt
from schemer.errors import SchemerError
from schemer.reader.parser import read
from schemer.types.environment import Environment
from schemer.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)

QUIT = "quit"


def eval_string(env: Environment, line: str) -> str:
    """Evaluate one line and render the result, or the error message."""
    try:
        return evaluate(read(line), env).to_text()
    except (SchemerError, OSError) as exc:
        logger.debug("recovered from %s", type(exc).__name__)
        return str(exc)
    except RecursionError:
        logger.debug("recovered from RecursionError")
        return "Recursion depth exceeded"


def run_repl(env: Environment, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    prompt = get_prompt()
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        line = line.strip()
        if line == QUIT:
            break
        if not line:
            continue
        stdout.write(eval_string(env, line) + "\n")
