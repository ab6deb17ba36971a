"""Command-line interface (``heuropt``)."""

from .main import main

__all__ = ["main"]
