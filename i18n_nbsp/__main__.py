"""Allow ``python -m i18n_nbsp`` to run the checker CLI."""

from __future__ import annotations

from .nbsp_check.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
