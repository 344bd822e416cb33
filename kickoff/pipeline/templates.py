"""Stages 3 and 4: fetch the template manifest and choose a template."""

from __future__ import annotations

from collections.abc import Callable

import httpx

from kickoff.config.settings import DEFAULT_TEMPLATES_MANIFEST_URL
from kickoff.integrations.http import DEFAULT_TIMEOUT_SECONDS, fetch_json
from kickoff.pipeline.models import RunContext, TemplateCatalog
from kickoff.ui.menus import show_template_menu
from kickoff.utils.console import print_info, print_warning
from kickoff.utils.errors import CatalogFetchError
from kickoff.utils.logging import log_message
from kickoff.utils.retry import RetryConfig

TEMPLATE_LIST_RESOURCE = "template list"

TemplatePicker = Callable[[TemplateCatalog], str]


class TemplateCatalogFetcher:
    """Downloads the template manifest.

    Args:
        url: Manifest URL
        timeout_seconds: HTTP timeout
        retry_config: Retry policy for the download
        http_client: Optional shared client
    """

    def __init__(
        self,
        url: str = DEFAULT_TEMPLATES_MANIFEST_URL,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        retry_config: RetryConfig | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.retry_config = retry_config
        self.http_client = http_client

    def fetch(self) -> TemplateCatalog:
        """Download and parse the manifest.

        Raises:
            CatalogFetchError: On network failure or an unparseable payload
        """
        payload = fetch_json(
            self.url,
            resource=TEMPLATE_LIST_RESOURCE,
            timeout_seconds=self.timeout_seconds,
            retry_config=self.retry_config,
            http_client=self.http_client,
        )
        try:
            catalog = TemplateCatalog.from_json(payload)
        except ValueError as e:
            raise CatalogFetchError(TEMPLATE_LIST_RESOURCE, str(e)) from e
        if not len(catalog):
            raise CatalogFetchError(TEMPLATE_LIST_RESOURCE, "no templates listed")
        return catalog

    def run(self, ctx: RunContext) -> None:
        ctx.template_catalog = self.fetch()
        log_message(f"Templates available: {', '.join(ctx.template_catalog.names())}")


class TemplateSelector:
    """Resolves the template to pull.

    A name given on the command line that exactly matches a catalog entry is
    used without prompting. Anything else, including an unknown name, falls
    through to the interactive picker.

    Args:
        requested: Template name from the command line, if any
        pick: Interactive picker (defaults to the questionary menu)
    """

    def __init__(self, requested: str | None = None, *, pick: TemplatePicker | None = None) -> None:
        self.requested = requested
        self._pick = pick or show_template_menu

    def run(self, ctx: RunContext) -> None:
        """Set selected_template on the context.

        Raises:
            SelectionAbortedError: If the picker is cancelled
        """
        catalog = ctx.template_catalog
        if catalog is None:
            raise ValueError("Template catalog must be fetched before selecting")

        if self.requested:
            match = catalog.find(self.requested)
            if match is not None:
                ctx.selected_template = match.name
                print_info(f"Using template '{match.name}' (skipped selection)")
                return
            print_warning(
                f"Unknown template '{self.requested}'. "
                f"Available: {', '.join(catalog.names()) or '(none)'}"
            )

        ctx.prompted_for_template = True
        ctx.selected_template = self._pick(catalog)


__all__ = [
    "TEMPLATE_LIST_RESOURCE",
    "TemplateCatalogFetcher",
    "TemplateSelector",
]
