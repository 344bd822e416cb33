"""Check PyPI for a newer kickoff release.

The check runs on a daemon thread so it never delays the pipeline, and it
never raises: any network or parsing problem simply means no notice.
"""

from __future__ import annotations

import logging
import threading

import httpx
from packaging import version

from kickoff import PACKAGE_NAME, __version__
from kickoff.utils.console import print_info

logger = logging.getLogger(__name__)

PYPI_URL_TEMPLATE = "https://pypi.org/pypi/{package}/json"
_TIMEOUT = 3.0  # seconds


def is_newer(candidate: str, current: str) -> bool:
    """Return True if candidate is a strictly newer release than current.

    Uses packaging.version, so a final release is newer than its own
    release candidates. Unparseable versions are never newer.
    """
    try:
        return version.parse(candidate) > version.parse(current)
    except version.InvalidVersion:
        return False


class UpdateNotifier:
    """One-shot update check.

    Usage:
        notifier = UpdateNotifier()
        notifier.start()
        ...  # run the pipeline
        notifier.notify()

    Args:
        current_version: Installed version to compare against
        package: Distribution name on PyPI
        http_client: Optional client, mainly for tests
    """

    def __init__(
        self,
        current_version: str = __version__,
        package: str = PACKAGE_NAME,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.current_version = current_version
        self.package = package
        self._http_client = http_client
        self._thread: threading.Thread | None = None
        self.latest_version: str | None = None

    def check(self) -> str | None:
        """Fetch the latest published version. Returns None on any error."""
        url = PYPI_URL_TEMPLATE.format(package=self.package)
        try:
            if self._http_client is not None:
                resp = self._http_client.get(url, timeout=_TIMEOUT)
            else:
                resp = httpx.get(url, timeout=_TIMEOUT)
            resp.raise_for_status()
            latest = resp.json()["info"]["version"]
        except Exception:
            logger.debug("Update check failed", exc_info=True)
            return None

        self.latest_version = str(latest)
        return self.latest_version

    def start(self) -> None:
        """Start the check in the background. Calling twice has no effect."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self.check, name="kickoff-update-check", daemon=True)
        self._thread.start()

    def notify(self, wait_seconds: float = 0.0) -> bool:
        """Print a notice if a newer version was found.

        Args:
            wait_seconds: How long to wait for a still-running check

        Returns:
            True if a notice was printed
        """
        if self._thread is not None:
            self._thread.join(timeout=wait_seconds)

        latest = self.latest_version
        if latest and is_newer(latest, self.current_version):
            print_info(
                f"Update available: {self.current_version} → {latest}. "
                f"Run 'pip install -U {self.package}' to update."
            )
            return True
        return False


__all__ = [
    "PYPI_URL_TEMPLATE",
    "UpdateNotifier",
    "is_newer",
]
