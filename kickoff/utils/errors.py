"""Custom exceptions and exit codes for KICKOFF.

This module defines the exit codes and exception hierarchy used throughout
the application. Every fatal pipeline failure collapses to the same exit
code; the exception type only changes the message shown to the user.
"""

from enum import IntEnum
from typing import ClassVar

FNM_INSTALL_URL = "https://github.com/Schniz/fnm"


class ExitCode(IntEnum):
    """Process exit codes.

    These codes are used for consistent error reporting and can be
    checked by calling scripts or CI systems.
    """

    SUCCESS = 0
    GENERAL_ERROR = 1


class KickoffError(Exception):
    """Base exception for KICKOFF errors.

    All custom exceptions in this application should inherit from this class.
    Each exception type has an associated exit code for proper error reporting.
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        """Initialize the exception."""
        super().__init__(message)
        self._exit_code = exit_code

    @property
    def exit_code(self) -> ExitCode:
        """Get the exit code for this exception."""
        if self._exit_code is not None:
            return self._exit_code
        return self.__class__._default_exit_code


class CatalogFetchError(KickoffError):
    """A remote catalog could not be fetched or understood.

    Raised when:
    - The HTTP request fails (connection error, timeout, non-2xx status)
    - The payload is not valid JSON or has an unexpected shape
    - The release catalog contains no LTS entry

    Attributes:
        resource: Human-readable name of the catalog (e.g. "template list")
        reason: Short description of the underlying failure
    """

    def __init__(self, resource: str, reason: str = "") -> None:
        self.resource = resource
        self.reason = reason
        message = f"Unable to fetch the {resource}, please check your network."
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class RuntimeInstallError(KickoffError):
    """The version manager failed to install or alias a Node.js release.

    Attributes:
        major: Major version that was requested
        fallback_version: Full version the user should install manually
        tool: Name of the version manager that was invoked
    """

    def __init__(
        self,
        major: int,
        fallback_version: str,
        tool: str = "fnm",
        reason: str = "",
    ) -> None:
        self.major = major
        self.fallback_version = fallback_version
        self.tool = tool
        self.reason = reason
        install_hint = f"Install {tool} first"
        if tool == "fnm":
            install_hint = f"{install_hint} ({FNM_INSTALL_URL})"
        message = (
            f"Unable to install Node.js {major} automatically with {tool}. "
            f"{install_hint}, or install Node.js LTS {fallback_version} manually."
        )
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class SelectionAbortedError(KickoffError):
    """User cancelled an interactive prompt.

    Raised when:
    - User presses Ctrl+C while a prompt is open
    - The prompt returns no answer (e.g. stdin closed)
    """


class PullError(KickoffError):
    """The template fetch tool failed to materialize the template.

    Attributes:
        template: Template identifier that was requested
        destination: Destination directory passed to the tool
    """

    def __init__(self, template: str, destination: str, reason: str = "") -> None:
        self.template = template
        self.destination = destination
        self.reason = reason
        message = f"Failed to pull template '{template}' into '{destination}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


__all__ = [
    "ExitCode",
    "KickoffError",
    "CatalogFetchError",
    "RuntimeInstallError",
    "SelectionAbortedError",
    "PullError",
    "FNM_INSTALL_URL",
]
