"""Console script entry point with production wiring.

Sits at package level, outside the adapters layer, so the composition root
can be handed to the CLI without adapters importing it.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``greetkit`` console script and return its exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
