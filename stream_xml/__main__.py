"""CLI entry point for ``python -m stream_xml``."""

from __future__ import annotations

from .cli import app

if __name__ == "__main__":  # pragma: no cover - manual CLI invocation
    app()
