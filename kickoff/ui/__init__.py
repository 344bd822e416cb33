"""UI components for KICKOFF.

This package contains:
- prompts: Questionary-based user input prompts
- menus: Template picker and destination directory prompt
"""

from kickoff.ui.menus import (
    ask_destination_dir,
    build_template_choices,
    show_template_menu,
)
from kickoff.ui.prompts import (
    custom_style,
    prompt_input,
    prompt_select,
)

__all__ = [
    # Prompts
    "custom_style",
    "prompt_input",
    "prompt_select",
    # Menus
    "ask_destination_dir",
    "build_template_choices",
    "show_template_menu",
]
