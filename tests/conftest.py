from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from turtlebmp.codec.bmp import DecodedBitmap, decode_bmp, encode_bmp
from turtlebmp.core.turtle import Turtle


@pytest.fixture(autouse=True)
def turtlebmp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    monkeypatch.setenv("TURTLEBMP_HOME", str(home))
    return home


@pytest.fixture
def decode_turtle() -> Callable[[Turtle], DecodedBitmap]:
    def _decode(t: Turtle) -> DecodedBitmap:
        return decode_bmp(encode_bmp(t.canvas))

    return _decode
