"""``python -m greetkit`` behaves exactly like the ``greetkit`` console script."""

from __future__ import annotations

from .entry import main

if __name__ == "__main__":
    raise SystemExit(main())
