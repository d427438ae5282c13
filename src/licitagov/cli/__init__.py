"""Command line interface for LicitaGov."""

from .app import app

__all__ = ["app"]
