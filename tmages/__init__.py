"""tmages: browse directories and preview images inline in the terminal.

``main`` runs the CLI; navigation lives in ``tmages.state`` and the Kitty
graphics encoder in ``tmages.preview``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint so importing the package stays cheap."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["main"]
