"""
WCAG Server CLI package.

Provides the Typer application behind the ``wcag`` command.
"""

from .cli import app

__all__ = ["app"]
