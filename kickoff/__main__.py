"""Entry point for running kickoff as a module.

This allows running the application with:
    python -m kickoff [OPTIONS] [DIR]
"""

from kickoff.cli import app

if __name__ == "__main__":
    app()
