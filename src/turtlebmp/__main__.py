"""Console entrypoint for turtlebmp.

This module delegates to :mod:`turtlebmp.cli` so that running
``python -m turtlebmp`` or the installed ``turtlebmp`` console script
executes the same code.
"""

from __future__ import annotations

from turtlebmp.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`turtlebmp.cli.main`)."""
    cli_main()


if __name__ == "__main__":
    main()
