"""
Command-line interface for logseq.
"""

from logseq.cli.main import cli

__all__ = ["cli"]
