"""Questionary prompts used while scaffolding.

Both prompts share one style and one cancellation rule: Ctrl+C or a
closed prompt (questionary answers None) raises SelectionAbortedError.
"""

from __future__ import annotations

from collections.abc import Sequence

import questionary
from questionary import Style

from kickoff.utils.errors import SelectionAbortedError
from kickoff.utils.logging import log_message

custom_style = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
        ("separator", "fg:cyan"),
        ("instruction", "fg:white"),
        ("text", ""),
        ("disabled", "fg:gray italic"),
    ]
)


def _ask(question: questionary.Question, kind: str) -> str:
    """Run a built question and return its answer as a string."""
    try:
        answer = question.ask()
    except KeyboardInterrupt as e:
        raise SelectionAbortedError("User cancelled with Ctrl+C") from e
    if answer is None:
        raise SelectionAbortedError(f"User cancelled {kind} prompt")
    return str(answer)


def prompt_input(message: str, default: str = "") -> str:
    """Ask for free text. An empty answer is returned as-is.

    Raises:
        SelectionAbortedError: If the prompt is cancelled
    """
    log_message(f"Prompt input: {message}")
    answer = _ask(questionary.text(message, default=default, style=custom_style), "input")
    log_message(f"User input: {answer[:50]}")
    return answer


def prompt_select(
    message: str,
    choices: Sequence[str | questionary.Choice],
    default: str | None = None,
) -> str:
    """Ask the user to pick one entry.

    Args:
        message: Question shown above the list
        choices: Plain strings or questionary.Choice objects
        default: Value highlighted when the list opens

    Returns:
        The chosen value

    Raises:
        SelectionAbortedError: If the prompt is cancelled
    """
    log_message(f"Prompt select: {message}")
    question = questionary.select(
        message,
        choices=list(choices),
        default=default,
        style=custom_style,
    )
    answer = _ask(question, "selection")
    log_message(f"User selected: {answer}")
    return answer


__all__ = [
    "custom_style",
    "prompt_input",
    "prompt_select",
]
