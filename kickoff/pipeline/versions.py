"""Stage 1: fetch the Node.js release index and find the latest LTS."""

from __future__ import annotations

import httpx

from kickoff.config.settings import DEFAULT_NODE_INDEX_URL
from kickoff.integrations.http import DEFAULT_TIMEOUT_SECONDS, fetch_json
from kickoff.pipeline.models import RunContext, VersionCatalog, parse_major
from kickoff.utils.errors import CatalogFetchError
from kickoff.utils.logging import log_message
from kickoff.utils.retry import RetryConfig

RELEASE_LIST_RESOURCE = "Node.js release list"


class VersionCatalogFetcher:
    """Downloads the release index and derives the LTS version and major.

    Args:
        url: Release index URL
        timeout_seconds: HTTP timeout
        retry_config: Retry policy for the download
        http_client: Optional shared client
    """

    def __init__(
        self,
        url: str = DEFAULT_NODE_INDEX_URL,
        *,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        retry_config: RetryConfig | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.retry_config = retry_config
        self.http_client = http_client

    def fetch(self) -> VersionCatalog:
        """Download and parse the release index.

        Raises:
            CatalogFetchError: On network failure or an unparseable payload
        """
        payload = fetch_json(
            self.url,
            resource=RELEASE_LIST_RESOURCE,
            timeout_seconds=self.timeout_seconds,
            retry_config=self.retry_config,
            http_client=self.http_client,
        )
        try:
            return VersionCatalog.from_json(payload)
        except ValueError as e:
            raise CatalogFetchError(RELEASE_LIST_RESOURCE, str(e)) from e

    def run(self, ctx: RunContext) -> None:
        """Fill version_catalog, lts_version and lts_major on the context.

        Raises:
            CatalogFetchError: If the download fails or no LTS release exists
        """
        catalog = self.fetch()
        lts = catalog.latest_lts()
        if lts is None:
            raise CatalogFetchError(RELEASE_LIST_RESOURCE, "no LTS release found")

        try:
            lts_major = parse_major(lts.version)
        except ValueError as e:
            raise CatalogFetchError(RELEASE_LIST_RESOURCE, str(e)) from e

        ctx.version_catalog = catalog
        ctx.lts_version = lts.version
        ctx.lts_major = lts_major
        log_message(f"Latest LTS: {lts.version} (major {lts_major}, {len(catalog)} releases)")


__all__ = ["RELEASE_LIST_RESOURCE", "VersionCatalogFetcher"]
