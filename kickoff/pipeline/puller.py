"""Stage 5: resolve the destination directory and pull the template."""

from __future__ import annotations

from collections.abc import Callable

from kickoff.config.settings import DEFAULT_TEMPLATE_SOURCE
from kickoff.integrations.template_fetch import DEFAULT_FETCH_TOOL, run_fetch_tool
from kickoff.pipeline.models import RunContext
from kickoff.ui.menus import ask_destination_dir
from kickoff.utils.console import print_success
from kickoff.utils.logging import log_message

DirectoryPrompt = Callable[[], str]
FetchRunner = Callable[..., None]


def template_source_path(source: str, template: str) -> str:
    """Join the repository prefix and the template name."""
    return f"{source.rstrip('/')}/{template}"


class TemplatePuller:
    """Pulls the selected template into the destination directory.

    The directory comes from the command line when given and non-empty,
    otherwise from a prompt. The answer is not validated here; the fetch
    tool reports problems such as an existing directory itself.

    Args:
        directory: Destination from the command line, if any
        source: Repository path prefix for templates
        tool: Fetch tool command line
        ask_directory: Directory prompt (defaults to the questionary prompt)
        fetch: Runs the fetch tool; signature (source, destination, tool, template=)
    """

    def __init__(
        self,
        directory: str | None = None,
        *,
        source: str = DEFAULT_TEMPLATE_SOURCE,
        tool: str = DEFAULT_FETCH_TOOL,
        ask_directory: DirectoryPrompt | None = None,
        fetch: FetchRunner | None = None,
    ) -> None:
        self.directory = directory
        self.source = source
        self.tool = tool
        self._ask_directory = ask_directory or ask_destination_dir
        self._fetch = fetch or run_fetch_tool

    def resolve_directory(self, ctx: RunContext) -> str:
        """Fill destination_dir on the context and return it.

        Raises:
            SelectionAbortedError: If the prompt is cancelled
        """
        if self.directory:
            ctx.destination_dir = self.directory
        else:
            ctx.prompted_for_directory = True
            ctx.destination_dir = self._ask_directory()
        return ctx.destination_dir

    def run(self, ctx: RunContext) -> None:
        """Resolve the directory and run the fetch tool.

        Raises:
            SelectionAbortedError: If the directory prompt is cancelled
            PullError: If the fetch tool fails
        """
        template = ctx.selected_template
        if not template:
            raise ValueError("A template must be selected before pulling")

        destination = self.resolve_directory(ctx)
        source = template_source_path(self.source, template)
        log_message(f"Pulling {source} into {destination!r}")
        self._fetch(source, destination, self.tool, template=template)
        print_success(f"Template '{template}' pulled into {destination or '(empty path)'}")


__all__ = ["TemplatePuller", "template_source_path"]
