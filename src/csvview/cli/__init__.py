"""Command-line entry point and interactive viewer."""

from .commands import main

__all__ = ["main"]
