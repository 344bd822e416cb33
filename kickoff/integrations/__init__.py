"""External collaborators for KICKOFF.

This package contains:
- http: JSON catalog downloads over httpx
- node: node -v and the fnm version manager
- template_fetch: the degit-style template fetch tool
- update_notifier: one-shot PyPI update check
"""

from kickoff.integrations.http import fetch_json
from kickoff.integrations.node import get_node_version, install_node_major
from kickoff.integrations.template_fetch import build_fetch_command, run_fetch_tool
from kickoff.integrations.update_notifier import UpdateNotifier

__all__ = [
    "UpdateNotifier",
    "build_fetch_command",
    "fetch_json",
    "get_node_version",
    "install_node_major",
    "run_fetch_tool",
]
