"""Interactive confirmation prompts."""

from __future__ import annotations

import sys

YES_ANSWERS = ("y", "yes")


def ask(question: str) -> str:
    """Print ``question`` and return the trimmed answer line.

    End of input (closed or non-interactive stdin) counts as an empty answer.
    """
    sys.stdout.write(question)
    sys.stdout.flush()
    line = sys.stdin.readline()
    return line.strip()


def is_yes(answer: str) -> bool:
    """True for ``y``/``yes`` in any case."""
    return answer.strip().lower() in YES_ANSWERS
