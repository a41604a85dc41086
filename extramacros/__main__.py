"""Module entrypoint for running extramacros as ``python -m extramacros``."""

from __future__ import annotations

from extramacros.cli import main


if __name__ == "__main__":
    main()
