"""Entry point for ``python -m lwctest``."""

from __future__ import annotations

from lwctest.cli.app import main

if __name__ == "__main__":  # pragma: no cover - manual execution guard
    raise SystemExit(main())
