"""KICKOFF - Scaffold a new project from a remote template.

This package provides a Python CLI application that checks the local
Node.js runtime against the latest LTS release and pulls a project
template into a directory of your choice.
"""

__version__ = "0.1.0"
SCRIPT_NAME = "KICKOFF"
PACKAGE_NAME = "kickoff"

__all__ = [
    "__version__",
    "SCRIPT_NAME",
    "PACKAGE_NAME",
]
