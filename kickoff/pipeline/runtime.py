"""Stage 2: make sure the local Node.js major matches the latest LTS."""

from __future__ import annotations

from collections.abc import Callable

from kickoff.integrations.node import get_node_version, install_node_major
from kickoff.pipeline.models import RunContext, parse_major
from kickoff.utils.console import print_info, print_success, print_warning
from kickoff.utils.errors import RuntimeInstallError
from kickoff.utils.logging import log_message

VersionReader = Callable[[], str | None]
Installer = Callable[[int, str, str], None]


class RuntimeReconciler:
    """Compares the installed Node.js major with the LTS major.

    When node is missing, unreadable or on a different major, the LTS major
    is installed through the version manager. The install runs to
    completion before this stage returns.

    Args:
        tool: Version manager executable (fnm)
        strict: Re-raise RuntimeInstallError instead of reporting it
        read_version: Returns the ``node -v`` output or None
        install: Installs a major; signature (major, fallback_version, tool)
    """

    def __init__(
        self,
        tool: str = "fnm",
        *,
        strict: bool = False,
        read_version: VersionReader | None = None,
        install: Installer | None = None,
    ) -> None:
        self.tool = tool
        self.strict = strict
        self._read_version = read_version or get_node_version
        self._install = install or install_node_major

    def detect(self, ctx: RunContext) -> None:
        """Fill current_version and current_major; both stay None if unknown."""
        version = self._read_version()
        ctx.current_version = version
        ctx.current_major = None
        if version is None:
            log_message("Node.js not detected")
            return
        try:
            ctx.current_major = parse_major(version)
        except ValueError:
            log_message(f"Could not parse node version: {version!r}")

    def needs_install(self, ctx: RunContext) -> bool:
        return ctx.current_major is None or ctx.current_major != ctx.lts_major

    def install_lts(self, ctx: RunContext) -> None:
        """Install the LTS major and alias it as default.

        Raises:
            RuntimeInstallError: If the version manager fails
        """
        if ctx.lts_major is None or ctx.lts_version is None:
            raise ValueError("LTS version must be resolved before installing")
        ctx.runtime_install_attempted = True
        print_info(f"Installing Node.js {ctx.lts_major} with {self.tool}...")
        self._install(ctx.lts_major, ctx.lts_version, self.tool)
        print_success(f"Node.js {ctx.lts_major} installed and set as default")

    def run(self, ctx: RunContext) -> None:
        """Detect the runtime and install the LTS major if needed.

        Install failures are reported and recorded on the context; they only
        propagate when ``strict`` is set.

        Raises:
            RuntimeInstallError: In strict mode, if the install fails
        """
        self.detect(ctx)

        if not self.needs_install(ctx):
            print_info(f"Node.js {ctx.current_version} matches the latest LTS major")
            return

        if ctx.current_major is None:
            print_warning("Node.js was not found")
        else:
            print_warning(
                f"Node.js {ctx.current_version} does not match the latest LTS "
                f"{ctx.lts_version}"
            )

        try:
            self.install_lts(ctx)
        except RuntimeInstallError as e:
            ctx.runtime_install_error = str(e)
            if self.strict:
                raise
            print_warning(str(e))


__all__ = ["RuntimeReconciler"]
