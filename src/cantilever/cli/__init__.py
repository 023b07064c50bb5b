"""CLI modules for running optimization and evaluation.

Note: avoid importing submodules at import-time. This keeps `python -m cantilever.cli.<cmd>`
free of `runpy` warnings and keeps pymoo out of plain evaluation runs.
"""

from __future__ import annotations


def run_ga_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `cantilever.cli.run_ga.main`."""

    from .run_ga import main

    return main(argv)


def run_single_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `cantilever.cli.run_single.main`."""

    from .run_single import main

    return main(argv)


__all__ = ["run_ga_main", "run_single_main"]
