"""Command-line interface package for the comment refresh tooling."""

from .app import build_parser, create_comment_store, main, run

__all__ = [
    "build_parser",
    "create_comment_store",
    "main",
    "run",
]
