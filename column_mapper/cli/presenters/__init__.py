"""Presenters for CLI output formatting.

This module contains presenter classes that format and display information
to the user via the CLI. Presenters are responsible for formatting data
structures into human-readable output.
"""

from .mapping import MappingPresenter

__all__ = ["MappingPresenter"]
