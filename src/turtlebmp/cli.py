"""Command-line interface for turtlebmp.

Draws one of the demo scenes from :mod:`turtlebmp.examples.scenes` and
writes it as a BMP, optionally streaming numbered frames while drawing.
Fatal engine errors end the process with exit status 1 after logging the
diagnostic.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from turtlebmp import __version__
from turtlebmp.config import USE_SETTINGS_INTERVAL, make_runtime_config, make_turtle
from turtlebmp.core.errors import TurtleFatalError
from turtlebmp.examples.scenes import SCENES

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    When ``argv`` is None the values are read from ``sys.argv`` as usual.
    Accepting an ``argv`` list makes the parser testable programmatically.
    """
    p = argparse.ArgumentParser(description="turtlebmp demo renderer")
    p.add_argument(
        "--scene",
        choices=sorted(SCENES),
        default="square",
        help="Demo scene to draw (default: square)",
    )
    p.add_argument(
        "--out",
        type=str,
        default="turtle.bmp",
        help="Output bitmap path (default: turtle.bmp)",
    )
    p.add_argument(
        "--width",
        type=int,
        default=None,
        help="Canvas width in px (overrides settings)",
    )
    p.add_argument(
        "--height",
        type=int,
        default=None,
        help="Canvas height in px (overrides settings)",
    )
    p.add_argument(
        "--video",
        type=int,
        nargs="?",
        const=USE_SETTINGS_INTERVAL,
        default=None,
        metavar="PIXELS",
        help=(
            "Write a numbered frame every PIXELS pen pixels while drawing "
            "(default: frame_interval from settings)"
        ),
    )
    p.add_argument(
        "--frames-dir",
        dest="frames_dir",
        type=str,
        default=None,
        help="Directory for video frames (overrides settings)",
    )
    p.add_argument(
        "--settings",
        type=str,
        default=None,
        help="Path to a settings JSON file (default: $TURTLEBMP_HOME/settings.json)",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    p.add_argument(
        "--version",
        action="store_true",
        help="Print the version and exit",
    )
    return p.parse_args(argv)


def run(args: argparse.Namespace) -> Path:
    """Draw the selected scene and write it; return the bitmap path."""
    rc = make_runtime_config(args=args)
    t = make_turtle(rc)
    if rc.video_interval is not None:
        t.begin_video(rc.video_interval)
    SCENES[args.scene](t)
    if rc.video_interval is not None:
        t.save_frame()
        t.end_video()
        logger.info("wrote %d frames to %s", t.frames.frame_count, t.frames.directory)
    out = t.save_bmp(args.out)
    if t.canvas.out_of_bounds_count:
        logger.info("%d pixels fell outside the canvas", t.canvas.out_of_bounds_count)
    return out


def main(argv: list[str] | None = None) -> None:
    """Synchronous entrypoint for the turtlebmp CLI."""
    args = parse_args(argv)

    if args.version:
        print(f"turtlebmp {__version__}")
        return

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        run(args)
    except ValidationError as e:
        logger.error("invalid settings: %s", e)
        sys.exit(2)
    except TurtleFatalError as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
