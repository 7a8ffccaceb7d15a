import numpy as np
import pytest

from chromagrad.colors import Color, BLACK, WHITE
from chromagrad.gradients import StopGradient
from chromagrad.render import Checkerboard, Compositor, Solid
from chromagrad.render.compositor import (
    blend_over,
    checkerboard_tile,
    np_blend_over,
    np_checkerboard_tiles,
    sample_line,
)

RED = Color(1.0, 0.0, 0.0)
HALF_RED = Color(1.0, 0.0, 0.0, 0.5)
BOARD = Checkerboard(Color(0.2, 0.2, 0.2), Color(0.05, 0.05, 0.05))


def test_blend_over():
    assert blend_over(HALF_RED, WHITE).to_hex() == "#ff8080"
    assert blend_over(RED, WHITE) == RED
    assert blend_over(Color(1.0, 0.0, 0.0, 0.0), BLACK) == BLACK


def test_np_blend_over_matches_scalar():
    fg = np.array([HALF_RED.value, Color(0.0, 1.0, 0.0, 0.25).value])
    out = np_blend_over(fg, WHITE.to_array())
    assert out.shape == (2, 4)
    np.testing.assert_allclose(out[0], blend_over(HALF_RED, WHITE).value)
    np.testing.assert_allclose(out[:, 3], [1.0, 1.0])


def test_checkerboard_tiles():
    assert [checkerboard_tile(x, 0) for x in range(6)] == [0, 0, 1, 1, 0, 0]
    assert [checkerboard_tile(x, 1) for x in range(6)] == [1, 1, 0, 0, 1, 1]
    tiles = np_checkerboard_tiles(6, 3)
    assert tiles.shape == (3, 6)
    assert tiles.tolist() == [[checkerboard_tile(x, y) for x in range(6)] for y in range(3)]


def test_sample_line():
    gradient = StopGradient.from_stops(["red", "blue"])
    line = sample_line(gradient, 5)
    assert line.shape == (5, 4)
    np.testing.assert_allclose(line[0], RED.value)
    assert sample_line(gradient, 0).shape == (0, 4)


def test_solid_grid_repeats_rows():
    gradient = StopGradient.from_stops(["red", "blue"])
    grid = Compositor(Solid(WHITE)).composite_grid(gradient, 5, 3)
    assert grid.shape == (3, 10, 4)
    np.testing.assert_allclose(grid[:, :, 3], 1.0)
    np.testing.assert_allclose(grid[0], grid[2])
    np.testing.assert_allclose(grid[0, 0], RED.value)


def test_checkerboard_grid_shows_through_transparency():
    gradient = StopGradient.from_stops([Color(1.0, 0.0, 0.0, 0.0), Color(0.0, 0.0, 1.0, 0.0)])
    grid = Compositor(BOARD).composite_grid(gradient, 3, 2)
    first, second = BOARD.first.value, BOARD.second.value
    np.testing.assert_allclose(grid[0, 0], first)
    np.testing.assert_allclose(grid[0, 2], second)
    np.testing.assert_allclose(grid[1, 0], second)
    np.testing.assert_allclose(grid[1, 2], first)


@pytest.mark.parametrize(
    "background, expected",
    [(Solid(WHITE), "#ff8080"), (BOARD, Color(0.6, 0.1, 0.1).to_hex())],
)
def test_composite_colors(background, expected):
    (color,) = Compositor(background).composite_colors([HALF_RED])
    assert color.to_hex() == expected


def test_swatch_background_is_the_first_tile():
    assert checkerboard_tile(0, 0) == 0
    assert Compositor(BOARD).swatch_background() == BOARD.first
    assert Compositor(Solid(RED)).swatch_background() == RED
