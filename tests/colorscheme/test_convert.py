from __future__ import annotations

import numpy as np
import pytest

from colorscheme import InvalidArgument
from colorscheme.convert import (
    adjust_saturation,
    hsv_to_rgb_array,
    parse_hex,
    rgb_to_hex,
    rgb_to_hsv,
    rgb_to_hsv_array,
    round_half_up,
    web_safe,
)


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(-2.5) == -2
    assert round_half_up(0.49) == 0


def test_web_safe_snaps_to_multiples_of_51() -> None:
    assert web_safe(0) == 0
    assert web_safe(25) == 0
    assert web_safe(26) == 51
    assert web_safe(128) == 153
    assert web_safe(255) == 255


def test_parse_and_format_hex() -> None:
    assert parse_hex("FF8000") == (255, 128, 0)
    assert parse_hex("ff8000") == (255, 128, 0)
    assert rgb_to_hex(255, 128, 0) == "ff8000"
    assert rgb_to_hex(0, 10, 1) == "000a01"


@pytest.mark.parametrize("bad", ["GGGGGG", "fff", "ff00000", "#ff0000", "", 123, None])
def test_parse_hex_rejects_malformed(bad) -> None:
    with pytest.raises(InvalidArgument):
        parse_hex(bad)


def test_rgb_to_hsv_primary_hues() -> None:
    assert rgb_to_hsv(1.0, 0.0, 0.0) == (0.0, 1.0, 1.0)
    assert rgb_to_hsv(0.0, 1.0, 0.0)[0] == pytest.approx(120.0)
    assert rgb_to_hsv(0.0, 0.0, 1.0)[0] == pytest.approx(240.0)
    # red max with blue > green wraps into [0, 360)
    assert rgb_to_hsv(1.0, 0.0, 1.0)[0] == pytest.approx(300.0)
    assert rgb_to_hsv(0.5, 0.5, 0.5) == (0.0, 0.0, 0.5)


def test_array_conversion_matches_scalar() -> None:
    rgb = np.array(
        [
            [1.0, 0.0, 0.0],
            [0.2, 0.6, 0.4],
            [0.9, 0.1, 0.7],
            [0.3, 0.3, 0.3],
            [0.0, 0.0, 0.0],
        ]
    )
    hsv = rgb_to_hsv_array(rgb)
    for row, expected in zip(hsv, rgb):
        assert tuple(row) == pytest.approx(rgb_to_hsv(*expected))
    np.testing.assert_allclose(hsv_to_rgb_array(hsv), rgb, atol=1e-9)


def test_adjust_saturation() -> None:
    assert adjust_saturation(["ff0000"], -1.0) == ["ffffff"]
    assert adjust_saturation(["ff0000"], 0.3) == ["ff0000"]
    assert adjust_saturation(["808080"], 0.5) == ["804040"]
    assert adjust_saturation([], 0.5) == []
