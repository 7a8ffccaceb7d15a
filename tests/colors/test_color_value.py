import numpy as np
import pytest

from chromagrad.colors import Color, as_color, BLACK, WHITE
from chromagrad.errors import ColorParseError


def test_css_named_color_to_hex():
    assert Color.from_css("gold").to_hex() == "#ffd700"
    assert Color.from_css("deeppink").to_hex() == "#ff1493"


def test_bare_hex_is_accepted():
    assert Color.from_css("ff00ff").to_hex() == "#ff00ff"
    assert Color.from_css("#C41189").to_hex() == "#c41189"


def test_translucent_hex_has_alpha_byte():
    assert Color.from_css("gold").with_alpha(0.5).to_hex() == "#ffd70080"
    assert Color(1.0, 0.0, 0.0, 0.0).to_hex() == "#ff000000"


def test_invalid_token_raises_value_error():
    with pytest.raises(ColorParseError) as info:
        Color.from_css("stone")
    assert isinstance(info.value, ValueError)
    assert "stone" in str(info.value)


def test_rgba8_clamps_and_rounds_half_up():
    assert Color(1.2, -0.1, 0.5).to_rgba8() == (255, 0, 128, 255)
    assert Color.from_rgba8(255, 0, 85).to_hex() == "#ff0055"


def test_cylindrical_accessors():
    assert Color(1.0, 0.0, 0.0).to_hsla() == (0.0, 1.0, 0.5, 1.0)
    h, s, v, a = Color(0.0, 0.0, 1.0, 0.25).to_hsva()
    assert (h, s, v, a) == (240.0, 1.0, 1.0, 0.25)
    assert Color(1.0, 1.0, 1.0).to_hwba() == (0.0, 1.0, 0.0, 1.0)


def test_colors_are_immutable():
    c = Color(0.1, 0.2, 0.3)
    with pytest.raises(AttributeError):
        c.foo = 1
    with pytest.raises(AttributeError):
        c._value = (0.0, 0.0, 0.0, 1.0)


def test_equality_and_hash():
    assert Color(1, 0, 0) == Color(1.0, 0.0, 0.0, 1.0)
    assert len({Color(1, 0, 0), Color(1.0, 0.0, 0.0), Color(0, 1, 0)}) == 2
    assert Color(1, 0, 0) != Color(1, 0, 0, 0.5)


def test_from_value_and_array():
    c = Color.from_value(np.array([0.2, 0.4, 0.6]))
    assert c.a == 1.0
    assert np.allclose(c.to_array(), [0.2, 0.4, 0.6, 1.0])
    with pytest.raises(ValueError):
        Color.from_value([0.1, 0.2])


def test_as_color_accepts_tokens_and_instances():
    assert as_color("black") == BLACK
    assert as_color(WHITE) is WHITE
    assert list(as_color("white")) == [1.0, 1.0, 1.0, 1.0]
