"""CLI modules for prediction and tick simulation.

Note: avoid importing submodules at import-time. This keeps `python -m tidelunar.cli.<cmd>`
free of `runpy` warnings and avoids side effects from eager imports.
"""

from __future__ import annotations


def predict_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `tidelunar.cli.predict.main`."""

    from .predict import main

    return main(argv)


def simulate_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `tidelunar.cli.simulate.main`."""

    from .simulate import main

    return main(argv)


__all__ = ["predict_main", "simulate_main"]
