"""
Main entry point for the railchain CLI.

This module serves as the entry point when running the package as a module:
    python -m railchain

or after installation:
    railchain
"""

from .app.cli import app

if __name__ == "__main__":
    app()
