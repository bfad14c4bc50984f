"""Examples package for turtlebmp.

Demo scenes used by the CLI; they only touch the public Turtle surface.
"""

from . import scenes as scenes

__all__ = ["scenes"]
