"""Demo scenes drawn through the public Turtle surface.

Each scene takes a freshly reset :class:`~turtlebmp.core.turtle.Turtle`
and draws around the canvas center. Scenes are registered in ``SCENES`` by
name so the CLI can pick one.
"""

from __future__ import annotations

from typing import Callable, Dict

from turtlebmp.core.turtle import Turtle


def square(t: Turtle) -> None:
    """Red filled square with a black outline."""
    t.set_fill_color(255, 0, 0)
    t.pen_up()
    t.go_to(-40, -40)
    t.pen_down()
    t.begin_fill()
    for _ in range(4):
        t.forward(80)
        t.turn_left(90)
    t.end_fill()


def star(t: Turtle) -> None:
    """Five-pointed star; the pentagon in the middle stays empty (even-odd)."""
    t.set_pen_color(0, 0, 128)
    t.set_fill_color(255, 200, 0)
    t.pen_up()
    t.go_to(-60, 20)
    t.pen_down()
    t.begin_fill()
    for _ in range(5):
        t.forward(120)
        t.turn_right(144)
    t.end_fill()


def circles(t: Turtle) -> None:
    """Concentric outlined circles with a filled core."""
    for r in range(10, 90, 10):
        t.draw_circle(0, 0, r)
    t.set_fill_color(0, 128, 255)
    t.begin_fill()
    t.draw_circle(0, 0, 8)
    t.end_fill()


def spiral(t: Turtle) -> None:
    """Square spiral with a color ramp."""
    for i in range(1, 60):
        t.set_pen_color((i * 4) % 256, 0, 255 - (i * 4) % 256)
        t.forward(i * 3)
        t.turn_left(91)


def turtle_icon(t: Turtle) -> None:
    """A ring of turtle icons with each one's index stamped beside it."""
    t.set_fill_color(0, 160, 0)
    for i in range(8):
        t.pen_up()
        t.set_heading(i * 45)
        t.forward(70)
        t.draw_turtle()
        t.strafe_right(18)
        t.draw_int(i)
        t.go_to(0, 0)


def digits(t: Turtle) -> None:
    """The digits 0-9 and a larger number."""
    t.pen_up()
    t.go_to(-25, 10)
    t.draw_int(1234567890)
    t.go_to(-10, -10)
    t.draw_int(2024)


SCENES: Dict[str, Callable[[Turtle], None]] = {
    "square": square,
    "star": star,
    "circles": circles,
    "spiral": spiral,
    "turtle": turtle_icon,
    "digits": digits,
}
