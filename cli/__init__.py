"""
CLI module for flatgraph.

The command-line interface providing demo, path, distance and boundary commands.
"""

from cli.main import app

__all__ = ["app"]
