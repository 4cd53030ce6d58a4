"""CLI entry point for the column mapper.

For new code, import directly from column_mapper.cli
"""

from __future__ import annotations

from .cli import app

__all__ = ["app"]


if __name__ == "__main__":  # pragma: no cover - manual CLI invocation
    app()
