"""Console script entry point with production wiring.

Lives at package level so the composition root is wired in here rather
than imported by the adapters layer.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``fnexercises`` console script and return its exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
