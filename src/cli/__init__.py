"""Command line entry point for leetsync."""

from .main import main

__all__ = ["main"]
