"""Interactive menus for KICKOFF.

This module provides the template picker and the destination
directory prompt used by the scaffolding pipeline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import questionary

from kickoff.ui.prompts import prompt_input, prompt_select
from kickoff.utils.logging import log_message

if TYPE_CHECKING:
    from kickoff.pipeline.models import TemplateCatalog

TEMPLATE_PROMPT = "Select a template (✅ marks recommended)"
DIRECTORY_PROMPT = (
    "Enter a directory name, e.g. . (a full stop, pull into the current directory) "
    "or test-create (pull into ./test-create); it is created automatically"
)


def build_template_choices(catalog: TemplateCatalog) -> list[questionary.Choice]:
    """Build one choice per template with its description alongside the name."""
    width = max((len(t.name) for t in catalog), default=0)
    choices = []
    for template in catalog:
        title = template.name
        if template.description:
            title = f"{template.name.ljust(width)}  {template.description}"
        choices.append(questionary.Choice(title, value=template.name))
    return choices


def show_template_menu(catalog: TemplateCatalog) -> str:
    """Display the template picker and return the chosen template name.

    Raises:
        SelectionAbortedError: If user cancels
    """
    name = prompt_select(TEMPLATE_PROMPT, build_template_choices(catalog))
    log_message(f"Template selection: {name}")
    return name


def ask_destination_dir() -> str:
    """Ask for the destination directory.

    No default is offered and an empty answer is returned as-is.

    Raises:
        SelectionAbortedError: If user cancels
    """
    return prompt_input(DIRECTORY_PROMPT)


__all__ = [
    "DIRECTORY_PROMPT",
    "TEMPLATE_PROMPT",
    "ask_destination_dir",
    "build_template_choices",
    "show_template_menu",
]
