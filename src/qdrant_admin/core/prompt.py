"""Interactive confirmation for operator-facing scripts."""

from collections.abc import Callable

Confirm = Callable[[str], bool]

_AFFIRMATIVE = ("y", "yes")


def confirm(question: str) -> bool:
    """Ask a yes/no question on the console.

    Only an explicit ``y``/``yes`` counts as yes; an empty answer is a no.

    Args:
        question: Question shown to the operator.

    Returns:
        bool: True if the operator answered yes.
    """
    response = input(f"{question} (y/N): ").strip().lower()
    return response in _AFFIRMATIVE
