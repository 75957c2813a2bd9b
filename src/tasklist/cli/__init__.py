"""Command line front-end for the task list."""

from tasklist.cli.main import cli


__all__ = ['cli']
