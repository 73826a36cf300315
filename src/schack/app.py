"""Application entry point."""

from __future__ import annotations

import sys

from schack.ui.bootstrap import run_application


def main() -> None:
    """Launch the Schack application."""
    sys.exit(run_application())


if __name__ == "__main__":
    main()
