import numpy as np
import pytest

from chromagrad.colors import Color
from chromagrad.conversions.css import ColorAide
from chromagrad.errors import GradientBuildError
from chromagrad.gradients import FunctionGradient, StopGradient
from chromagrad.types import BlendMode, Interpolation


def test_linear_rgb_midpoint():
    g = StopGradient.from_stops(["red", "blue"], blend_mode=BlendMode.RGB, interpolation=Interpolation.LINEAR)
    assert g.sample(0.5).to_rgba8() == (128, 0, 128, 255)


def test_domain_and_clamping():
    g = StopGradient.from_stops(["red", "lime", "blue"], [10.0, 20.0, 30.0])
    assert g.domain() == (10.0, 30.0)
    assert g.sample(20.0).to_hex() == "#00ff00"
    assert g.sample(-5.0).to_hex() == "#ff0000"
    assert g.sample(99.0).to_hex() == "#0000ff"


def test_two_positions_spread_many_colors():
    g = StopGradient.from_stops(["red", "lime", "blue"], [0.0, 2.0])
    assert g.domain() == (0.0, 2.0)
    assert g.sample(1.0).to_hex() == "#00ff00"


def test_colors_include_both_ends():
    g = StopGradient.from_stops(["black", "white"])
    colors = g.colors(3)
    assert [c.to_hex() for c in colors] == ["#000000", "#808080", "#ffffff"]
    assert g.colors(0) == []
    assert [c.to_hex() for c in g.colors(1)] == ["#000000"]


def test_sample_array_shape():
    g = StopGradient.from_stops([Color(1, 0, 0), Color(0, 0, 1)])
    values = g.sample_array([0.0, 0.5, 1.0])
    assert values.shape == (3, 4)
    assert np.allclose(values[:, 3], 1.0)


def test_alpha_is_interpolated_straight():
    g = StopGradient.from_stops([Color(1, 0, 0, 1.0), Color(1, 0, 0, 0.0)])
    mid = g.sample(0.5)
    assert mid.a == pytest.approx(0.5)
    assert mid.r == pytest.approx(1.0)


def test_hard_stop():
    g = StopGradient.from_stops(["red", "red", "blue", "blue"], [0.0, 0.5, 0.5, 1.0])
    assert g.sample(0.25).to_hex() == "#ff0000"
    assert g.sample(0.75).to_hex() == "#0000ff"


@pytest.mark.parametrize("mode", list(BlendMode))
@pytest.mark.parametrize("interpolation", list(Interpolation))
def test_every_mode_keeps_endpoints(mode, interpolation):
    g = StopGradient.from_stops(["deeppink", "gold", "seagreen"], blend_mode=mode, interpolation=interpolation)
    assert g.sample(0.0).to_hex() == "#ff1493"
    assert g.sample(1.0).to_hex() == "#2e8b57"


@pytest.mark.parametrize("colors, positions", [
    (["red"], None),
    (["red", "blue"], [0.0, 0.5, 1.0]),
    (["red", "lime", "blue"], [0.0, 0.5, 0.2]),
    (["red", "blue"], [0.0, float("nan")]),
    (["red", "blue"], [0.5, 0.5]),
    (["red", "stone"], None),
])
def test_invalid_stops(colors, positions):
    with pytest.raises(GradientBuildError):
        StopGradient.from_stops(colors, positions)


def test_function_gradient_maps_domain():
    g = FunctionGradient(lambda u: Color(u, u, u), domain=(0.0, 10.0))
    assert g.sample(5.0) == Color(0.5, 0.5, 0.5)
    assert g.sample(20.0) == Color(1.0, 1.0, 1.0)
    assert g.sample(float("nan")) == Color(0.0, 0.0, 0.0)


def test_catmull_rom_is_registered():
    assert "catrom" in ColorAide.INTERPOLATE_MAP
    g = StopGradient.from_stops(["deeppink", "gold", "seagreen"], interpolation=Interpolation.CATMULL_ROM)
    assert g.sample(0.5).to_hex() == "#ffd700"


@pytest.mark.parametrize("mode", list(BlendMode))
def test_basis_ends_on_the_outer_stops(mode):
    colors = ["#9e0142", "#f46d43", "#ffffbf", "#66c2a5", "#5e4fa2"]
    g = StopGradient.from_stops(colors, blend_mode=mode, interpolation=Interpolation.BASIS)
    assert g.sample(0.0).to_hex() == "#9e0142"
    assert g.sample(1.0).to_hex() == "#5e4fa2"


def test_interpolator_errors_become_build_errors(monkeypatch):
    def refuse(*args, **kwargs):
        raise ValueError("'catrom' is not a recognized interpolator")

    monkeypatch.setattr(ColorAide, "interpolate", refuse)
    with pytest.raises(GradientBuildError, match="cannot interpolate"):
        StopGradient.from_stops(["red", "blue"], interpolation=Interpolation.CATMULL_ROM)
