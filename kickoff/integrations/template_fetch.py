"""Template fetch tool integration.

Wraps the degit-style command (``pnpx tiged`` by default) that copies a
remote template directory into a local path.
"""

from __future__ import annotations

import shlex
import shutil
import subprocess

from kickoff.utils.errors import PullError
from kickoff.utils.logging import log_command, log_message

DEFAULT_FETCH_TOOL = "pnpx tiged"


def build_fetch_command(tool: str, source: str, destination: str) -> list[str]:
    """Build the argument list for the fetch tool.

    The destination is appended even when empty so the tool reports the
    problem itself.
    """
    return [*shlex.split(tool), source, destination]


def run_fetch_tool(
    source: str,
    destination: str,
    tool: str = DEFAULT_FETCH_TOOL,
    *,
    template: str | None = None,
) -> None:
    """Run the fetch tool and wait for it to finish.

    Output is streamed to the terminal so the tool's own diagnostics
    (existing directory, network failure) reach the user.

    Args:
        source: Remote template path, e.g. "ModyQyW/create/templates/vue-naive"
        destination: Local directory
        tool: Fetch tool command line
        template: Template name for error messages (defaults to source)

    Raises:
        PullError: If the tool is missing or exits non-zero
    """
    template_name = template or source
    command = build_fetch_command(tool, source, destination)
    if not command[:-2]:
        raise PullError(template_name, destination, "no fetch tool configured")

    executable = shutil.which(command[0])
    if executable is None:
        raise PullError(template_name, destination, f"{command[0]} not found in PATH")
    command[0] = executable

    display = shlex.join([*shlex.split(tool), source, destination])
    log_message(f"Running {display}")
    try:
        result = subprocess.run(command)
    except OSError as e:
        raise PullError(template_name, destination, str(e)) from e

    log_command(display, result.returncode)
    if result.returncode != 0:
        raise PullError(
            template_name,
            destination,
            f"'{display}' exited with code {result.returncode}",
        )


__all__ = [
    "DEFAULT_FETCH_TOOL",
    "build_fetch_command",
    "run_fetch_tool",
]
