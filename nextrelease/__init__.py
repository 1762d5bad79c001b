"""Determine the contents of the next release of a GitHub-hosted project."""

__version__ = "0.1.0"
