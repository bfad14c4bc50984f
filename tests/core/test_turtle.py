from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from turtlebmp.codec.bmp import DecodedBitmap
from turtlebmp.core.errors import BitmapWriteError, TooManyVerticesError
from turtlebmp.core.turtle import Turtle, TurtleState

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)


def test_reset_defaults() -> None:
    t = Turtle(50, 50)
    assert t.state == TurtleState(0.0, 0.0, 0.0, BLACK, GREEN, True, False)
    t.go_to(5, 5)
    t.turn_left(30)
    t.set_pen_color(1, 2, 3)
    t.begin_fill()
    t.pen_up()
    t.reset()
    assert t.state == TurtleState()
    assert t.fill_vertex_count == 0
    # the canvas keeps what was drawn
    assert t.canvas.get(5, 5) == BLACK


def test_forward_draws_along_heading() -> None:
    t = Turtle(50, 50)
    t.forward(10)
    assert t.get_x() == pytest.approx(10.0)
    assert t.get_y() == pytest.approx(0.0)
    for x in range(0, 11):
        assert t.canvas.get(x, 0) == BLACK
    assert t.canvas.get(11, 0) == WHITE
    t.turn_left(90)
    t.backward(5)
    assert t.position == pytest.approx((10.0, -5.0))


def test_turn_wraps_both_ways() -> None:
    t = Turtle(10, 10)
    t.turn_right(90)
    assert t.heading == 270.0
    t.turn_left(450)
    assert t.heading == 0.0
    t.set_heading(-45)
    assert t.heading == 315.0


def test_strafe_keeps_heading() -> None:
    t = Turtle(50, 50)
    t.pen_up()
    t.strafe_left(10)
    assert t.position == pytest.approx((0.0, 10.0), abs=1e-9)
    assert t.heading == 0.0
    t.strafe_right(20)
    assert t.position == pytest.approx((0.0, -10.0), abs=1e-9)
    assert t.heading == 0.0


def test_pen_up_moves_without_drawing() -> None:
    t = Turtle(20, 20)
    before = t.canvas.to_bytes()
    t.pen_up()
    t.go_to(5, 5)
    t.forward(3)
    assert t.canvas.to_bytes() == before
    t.dot()
    assert t.canvas.get(8, 5) == BLACK


def test_go_to_rounds_half_away_from_zero() -> None:
    t = Turtle(20, 20)
    t.pen_up()
    t.go_to(-2.5, 0.4)
    t.pen_down()
    t.go_to(-2.5, 0.4)
    assert t.canvas.get(-3, 0) == BLACK
    assert t.get_x() == -2.5


def test_backup_restore_single_level() -> None:
    t = Turtle(20, 20)
    t.go_to(3, 4)
    t.backup()
    snapshot = t.state.copy()
    t.go_to(-5, 1)
    t.set_fill_color(9, 9, 9)
    t.turn_left(33)
    t.pen_up()
    t.backup()
    t.restore()
    # the second backup replaced the first one
    assert t.state != snapshot
    assert t.get_x() == -5


def test_restore_without_backup_gives_defaults() -> None:
    t = Turtle(20, 20)
    t.go_to(3, 4)
    t.restore()
    assert t.state == TurtleState()


def test_fill_records_vertices_only_with_pen_down() -> None:
    t = Turtle(50, 50)
    t.begin_fill()
    t.go_to(5, 0)
    t.pen_up()
    t.go_to(5, 5)
    t.pen_down()
    t.go_to(0, 5)
    assert t.fill_vertex_count == 2
    t.end_fill()
    assert t.fill_vertex_count == 0
    assert t.state.filled is False


def test_end_fill_without_begin_is_a_no_op() -> None:
    t = Turtle(20, 20)
    before = t.canvas.to_bytes()
    t.end_fill()
    assert t.canvas.to_bytes() == before


def test_too_many_vertices_is_fatal() -> None:
    t = Turtle(100, 100, polygon_limit=128)
    t.begin_fill()
    for i in range(128):
        t.go_to(i % 40, i % 3)
    with pytest.raises(TooManyVerticesError):
        t.go_to(0, 0)


def test_filled_square_scenario(
    decode_turtle: Callable[[Turtle], DecodedBitmap],
) -> None:
    t = Turtle(100, 100)
    t.set_fill_color(*RED)
    t.begin_fill()
    for x, y in ((-10, -10), (10, -10), (10, 10), (-10, 10)):
        t.go_to(x, y)
    t.end_fill()

    for y in range(-9, 10):
        for x in range(-9, 10):
            assert t.canvas.get(x, y) == RED
    for i in range(-10, 11):
        assert t.canvas.get(i, -10) == BLACK
        assert t.canvas.get(i, 10) == BLACK
        assert t.canvas.get(-10, i) == BLACK
        assert t.canvas.get(10, i) == BLACK

    img = decode_turtle(t)
    # canvas center is column 50, row 50 of the stored image
    assert img.pixel(50, 50) == RED
    assert img.pixel(0, 60) == WHITE
    assert img.pixel(50, 90) == WHITE


def test_draw_circle_with_fill() -> None:
    t = Turtle(60, 60)
    t.set_fill_color(*RED)
    t.begin_fill()
    t.draw_circle(0, 0, 10)
    t.end_fill()
    assert t.canvas.get(0, 0) == RED
    assert t.canvas.get(5, 5) == RED
    assert t.canvas.get(10, 0) == BLACK
    assert t.canvas.get(0, -10) == BLACK
    assert t.canvas.get(12, 0) == WHITE


def test_draw_circle_without_fill_leaves_center() -> None:
    t = Turtle(60, 60)
    t.draw_circle(0, 0, 10)
    assert t.canvas.get(0, 0) == WHITE
    assert t.canvas.get(-10, 0) == BLACK


def test_fill_circle_at_current_position_truncates() -> None:
    t = Turtle(60, 60)
    t.pen_up()
    t.go_to(-4.7, 3.9)
    t.fill_circle(1)
    assert t.canvas.get(-4, 3) == GREEN
    assert t.canvas.get(-5, 4) == WHITE


def test_fill_pixels_do_not_emit_frames(tmp_path: Path) -> None:
    t = Turtle(20, 20, frames_dir=tmp_path)
    t.begin_video(1)
    t.fill_circle(3, 0, 0)
    assert t.frames.frame_count == 0
    t.draw_pixel(0, 0)
    assert t.frames.frame_count == 1
    assert (tmp_path / "frame00001.bmp").exists()


def test_video_frames_follow_pen_pixels(tmp_path: Path) -> None:
    t = Turtle(20, 20, frames_dir=tmp_path)
    t.begin_video(2)
    t.draw_line(0, 0, 4, 0)
    # counts 0, 2 and 4 trigger frames
    assert sorted(p.name for p in tmp_path.iterdir()) == [
        "frame00001.bmp",
        "frame00002.bmp",
        "frame00003.bmp",
    ]
    t.draw_pixel(100, 100)
    assert t.frames.pixel_count == 5
    t.end_video()
    t.draw_line(0, 1, 4, 1)
    assert t.frames.frame_count == 3
    assert t.save_frame().name == "frame00004.bmp"


def test_draw_int_single_digit() -> None:
    t = Turtle(30, 30)
    t.draw_int(7)
    on = {(0, 0), (1, 0), (2, 0), (3, 0), (3, -1), (2, -2), (1, -3), (1, -4)}
    for y in range(-4, 1):
        for x in range(0, 4):
            expected = BLACK if (x, y) in on else WHITE
            assert t.canvas.get(x, y) == expected


def test_draw_int_multi_digit_advances_five_pixels() -> None:
    t = Turtle(40, 40)
    t.draw_int(10)
    # "1" top row is 0110, "0" top row is 0110 shifted by five
    assert t.canvas.get(1, 0) == BLACK
    assert t.canvas.get(6, 0) == BLACK
    assert t.canvas.get(5, 0) == WHITE
    assert t.canvas.get(4, 0) == WHITE


def test_draw_int_negative_rejected() -> None:
    t = Turtle(20, 20)
    with pytest.raises(ValueError):
        t.draw_int(-3)


def test_draw_turtle_preserves_state_and_backup() -> None:
    t = Turtle(80, 80)
    t.set_pen_color(10, 20, 30)
    t.set_fill_color(*RED)
    t.go_to(2, 3)
    t.backup()
    backup = t.backup_state.copy()
    t.turn_left(45)
    state = t.state.copy()
    before = t.canvas.to_bytes()

    t.draw_turtle()

    assert t.state == state
    assert t.backup_state == backup
    assert t.canvas.to_bytes() != before
    # the body center is the fill color ringed by the pen color
    assert t.canvas.get(2, 3) == RED


def test_save_bmp(tmp_path: Path) -> None:
    t = Turtle(8, 8)
    t.forward(3)
    out = t.save_bmp(tmp_path / "t.bmp")
    assert out.read_bytes()[:2] == b"BM"
    with pytest.raises(BitmapWriteError):
        t.save_bmp(tmp_path / "nope" / "t.bmp")


def test_begin_video_defaults_to_configured_interval(tmp_path: Path) -> None:
    t = Turtle(20, 20, frames_dir=tmp_path, frame_interval=3)
    t.begin_video()
    t.draw_line(0, 0, 5, 0)
    assert t.frames.frame_count == 2
