"""Terminal output for kickoff.

Messages are tagged with a bracketed label and mirrored to the debug log.
Errors are the only output written to stderr, and each one is printed as a
single unwrapped line.

Message text is escaped before printing. Paths, template names and
exception strings can contain square brackets that Rich would otherwise
read as markup.
"""

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from kickoff import __version__

custom_theme = Theme(
    {
        "error": "bold red",
        "success": "bold green",
        "warning": "bold yellow",
        "info": "bold blue",
        "header": "bold magenta",
        "step": "bold cyan",
        "highlight": "bold white",
    }
)

console = Console(theme=custom_theme)
console_err = Console(theme=custom_theme, stderr=True)


def _emit(target: Console, kind: str, color: str, message: str, soft_wrap: bool = False) -> None:
    """Print a labelled message and record it in the log."""
    from kickoff.utils.logging import log_message

    label = kind.upper()
    target.print(
        f"[{kind}][[{label}]][/{kind}] [{color}]{escape(message)}[/{color}]",
        soft_wrap=soft_wrap,
    )
    log_message(f"{label}: {message}")


def print_error(message: str) -> None:
    """Write one error line to stderr."""
    _emit(console_err, "error", "red", message, soft_wrap=True)


def print_success(message: str) -> None:
    _emit(console, "success", "green", message)


def print_warning(message: str) -> None:
    _emit(console, "warning", "yellow", message)


def print_info(message: str) -> None:
    _emit(console, "info", "cyan", message)


def print_header(title: str) -> None:
    """Print a section title framed by blank lines."""
    console.print()
    console.print(f"[header]=== {escape(title)} ===[/header]")
    console.print()


def print_step(message: str) -> None:
    """Announce a pipeline stage."""
    console.print(f"[step]➜[/step] {escape(message)}")


_BANNER = r"""
[bold magenta] _  _____ ___ _  _____  ___ ___
| |/ /_ _/ __| |/ / _ \| __| __|
| ' < | | (__| ' < (_) | _|| _|
|_|\_\___\___|_|\_\___/|_| |_|
[/bold magenta]
[bold cyan]Project Scaffolding[/bold cyan]
[white]Version {version}[/white]
"""


def show_banner() -> None:
    console.print(_BANNER.format(version=__version__))


def show_version() -> None:
    """Print the version and the external tools a run depends on."""
    console.print(f"[bold]KICKOFF[/bold] v{__version__}")
    console.print()
    console.print("Uses:")
    console.print("  - fnm (to install Node.js LTS)")
    console.print("  - pnpx tiged (to pull templates)")
    console.print()


__all__ = [
    "console",
    "console_err",
    "custom_theme",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_header",
    "print_step",
    "show_banner",
    "show_version",
]
