"""Node.js runtime integration.

Reads the locally installed Node.js version and installs a release line
through a version manager (fnm by default).
"""

from __future__ import annotations

import shutil
import subprocess

from kickoff.utils.errors import RuntimeInstallError
from kickoff.utils.logging import log_command, log_message

NODE_VERSION_TIMEOUT_SECONDS = 10


def get_node_version(node_cmd: str = "node") -> str | None:
    """Return the output of ``node -v``, or None when it cannot be read.

    Returns:
        Version string such as "v20.10.0", or None if node is missing,
        exits non-zero, times out, cannot be executed or prints nothing.
    """
    try:
        result = subprocess.run(
            [node_cmd, "-v"],
            capture_output=True,
            text=True,
            stdin=subprocess.DEVNULL,
            timeout=NODE_VERSION_TIMEOUT_SECONDS,
            check=True,
        )
    except FileNotFoundError:
        log_message(f"{node_cmd} not found in PATH")
        return None
    except subprocess.CalledProcessError as e:
        log_command(f"{node_cmd} -v", e.returncode)
        return None
    except subprocess.TimeoutExpired:
        log_message(f"{node_cmd} -v timed out")
        return None
    except OSError as e:
        log_message(f"{node_cmd} could not be started: {e}")
        return None

    log_command(f"{node_cmd} -v", result.returncode)
    version = result.stdout.strip()
    return version or None


def install_node_major(major: int, fallback_version: str, tool: str = "fnm") -> None:
    """Install a Node.js major with the version manager and make it the default.

    Runs ``<tool> install <major>`` followed by ``<tool> alias <major> default``
    and waits for both to finish.

    Args:
        major: Major version to install
        fallback_version: Full version suggested to the user on failure
        tool: Version manager executable

    Raises:
        RuntimeInstallError: If the tool is missing or either command fails
    """
    executable = shutil.which(tool)
    if executable is None:
        raise RuntimeInstallError(major, fallback_version, tool, reason=f"{tool} not found in PATH")

    for args in (["install", str(major)], ["alias", str(major), "default"]):
        command = [executable, *args]
        display = " ".join([tool, *args])
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                stdin=subprocess.DEVNULL,
            )
        except OSError as e:
            log_message(f"Failed to run {display}: {e}")
            raise RuntimeInstallError(major, fallback_version, tool, reason=str(e)) from e

        log_command(display, result.returncode)
        if result.returncode != 0:
            detail = result.stderr.strip() or result.stdout.strip()
            reason = f"'{display}' exited with code {result.returncode}"
            if detail:
                reason = f"{reason}: {detail.splitlines()[-1]}"
            raise RuntimeInstallError(major, fallback_version, tool, reason=reason)


__all__ = [
    "NODE_VERSION_TIMEOUT_SECONDS",
    "get_node_version",
    "install_node_major",
]
