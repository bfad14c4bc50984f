"""Runtime configuration helpers.

Small aggregator that merges persisted :class:`Settings` with optional CLI
overrides and builds the :class:`~turtlebmp.core.turtle.Turtle` a run draws
with. CLI values win over persisted ones for the current session only.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .core.turtle import Turtle
from .settings.schema import Settings
from .settings.store import SettingsStore

# value of ``--video`` given without a number
USE_SETTINGS_INTERVAL = "settings"


@dataclass(slots=True)
class RuntimeConfig:
    settings: Settings
    video_interval: Optional[int] = None
    verbose: bool = False


def make_runtime_config(*, args: Optional[object] = None) -> RuntimeConfig:
    """Build a RuntimeConfig from persisted settings and *args* overrides.

    *args* is argparse.Namespace-like. Recognized attributes: ``settings``
    (path to a settings JSON file), ``width``, ``height``, ``frames_dir``,
    ``video`` and ``verbose``. Missing or None attributes keep the persisted
    value. ``video`` set to :data:`USE_SETTINGS_INTERVAL` enables video with
    the persisted ``frame_interval``.
    """
    settings_path = getattr(args, "settings", None) if args is not None else None
    settings = SettingsStore.load(Path(settings_path) if settings_path else None)

    if args is None:
        return RuntimeConfig(settings=settings)

    overrides: dict[str, object] = {}
    for attr, key in (
        ("width", "width"),
        ("height", "height"),
        ("frames_dir", "output_dir"),
    ):
        v = getattr(args, attr, None)
        if v is not None:
            overrides[key] = v
    video = getattr(args, "video", None)
    if video is not None and video != USE_SETTINGS_INTERVAL:
        overrides["frame_interval"] = video
    if overrides:
        # re-validate so CLI values go through the same checks
        settings = Settings.model_validate(settings.model_dump() | overrides)

    return RuntimeConfig(
        settings=settings,
        video_interval=settings.frame_interval if video is not None else None,
        verbose=bool(getattr(args, "verbose", False)),
    )


def make_turtle(rc: RuntimeConfig) -> Turtle:
    """Create a Turtle sized and colored per *rc*."""
    s = rc.settings
    t = Turtle(
        s.width,
        s.height,
        background=s.background,
        max_oob_reports=s.max_oob_reports,
        frames_dir=s.output_dir,
        frame_pattern=s.frame_pattern,
        frame_interval=s.frame_interval,
    )
    t.set_pen_color(*s.pen_color)
    t.set_fill_color(*s.fill_color)
    return t
