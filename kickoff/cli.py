"""CLI interface for KICKOFF.

This module provides the Typer-based command-line interface: the main
command, the version callback and the glue that runs the scaffolding
pipeline next to the background update check.
"""

from typing import Annotated

import typer

from kickoff.config.manager import ConfigManager
from kickoff.integrations.update_notifier import UpdateNotifier
from kickoff.pipeline import Pipeline, RunContext
from kickoff.utils.console import (
    print_error,
    print_info,
    print_success,
    show_banner,
    show_version,
)
from kickoff.utils.errors import ExitCode, KickoffError
from kickoff.utils.logging import log_message, setup_logging

# Create Typer app
app = typer.Typer(
    name="kickoff",
    help="KICKOFF - Scaffold a new project from a template",
    add_completion=False,
    no_args_is_help=False,
)


def version_callback(value: bool) -> None:
    """Display version and exit."""
    if value:
        show_version()
        raise typer.Exit()


def _start_update_check(config: ConfigManager, enabled: bool) -> UpdateNotifier | None:
    """Start the update check unless disabled by flag or config."""
    if not enabled or not config.settings.update_check:
        log_message("Update check disabled")
        return None
    notifier = UpdateNotifier()
    notifier.start()
    return notifier


def _run_scaffold(
    config: ConfigManager,
    template: str | None = None,
    directory: str | None = None,
    check_updates: bool = True,
) -> RunContext:
    """Run the scaffolding pipeline.

    Raises:
        KickoffError: From the first stage that fails
    """
    notifier = _start_update_check(config, check_updates)
    try:
        pipeline = Pipeline.from_config(config, template=template, directory=directory)
        ctx = pipeline.run()
        print_success(f"Project ready in {ctx.destination_dir}")
        return ctx
    finally:
        if notifier is not None:
            notifier.notify()


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def main(
    directory: Annotated[
        str | None,
        typer.Argument(
            help="Destination directory for the new project (prompted if omitted)",
        ),
    ] = None,
    template: Annotated[
        str | None,
        typer.Option(
            "--template",
            "-p",
            help="Template name; skips the selection prompt when it matches",
        ),
    ] = None,
    show_config: Annotated[
        bool,
        typer.Option(
            "--config",
            help="Show current configuration and exit",
        ),
    ] = False,
    no_update_check: Annotated[
        bool,
        typer.Option(
            "--no-update-check",
            help="Skip the check for a newer kickoff release",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version information",
        ),
    ] = None,
) -> None:
    """KICKOFF - Scaffold a new project from a template.

    Makes sure the local Node.js matches the latest LTS major, lets you
    pick a template and pulls it into DIRECTORY.
    """
    setup_logging()

    try:
        # Show banner
        show_banner()

        # Load configuration
        config = ConfigManager()
        config.load()

        # Handle --config flag
        if show_config:
            config.show()
            raise typer.Exit()

        _run_scaffold(
            config,
            template=template,
            directory=directory,
            check_updates=not no_update_check,
        )

    except KickoffError as e:
        print_error(str(e))
        raise typer.Exit(e.exit_code) from e

    except KeyboardInterrupt as e:
        print_info("\nOperation cancelled by user")
        raise typer.Exit(ExitCode.GENERAL_ERROR) from e


__all__ = ["app", "main", "version_callback"]
