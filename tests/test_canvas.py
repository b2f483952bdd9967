import io

import numpy as np
import pytest

from canvas import OFF_COLOUR, ON_COLOUR, ConsoleCanvas
from world import World


def test_canvas_starts_off():
    canvas = ConsoleCanvas(3, 2)
    assert canvas.grid.shape == (2, 3)
    assert (canvas.grid == OFF_COLOUR).all()
    assert canvas.frame() == " .  .  . \n .  .  . \n"


def test_draw_and_render():
    out = io.StringIO()
    canvas = ConsoleCanvas(3, 2, out=out)
    canvas.draw_pixel(0, 1, ON_COLOUR)
    canvas.draw_pixel(1, 2, ON_COLOUR)
    canvas.draw_pixel(1, 2, OFF_COLOUR)
    canvas.render()
    assert out.getvalue() == " .  @  . \n .  .  . \n"


def test_unknown_colour_is_rejected():
    canvas = ConsoleCanvas(2, 2)
    with pytest.raises(ValueError):
        canvas.draw_pixel(0, 0, 7)


def test_canvas_tracks_world():
    world = World.random(9, 7, np.random.default_rng(21))
    canvas = ConsoleCanvas(9, 7)
    world.paint(canvas)
    for _ in range(15):
        world.advance_generation(canvas)
        np.testing.assert_array_equal(canvas.grid, world.alive_grid())
