import re

import pytest

hypothesis = pytest.importorskip("hypothesis", reason="hypothesis is a dev optional dependency")
from hypothesis import given, settings, strategies as st  # type: ignore

from colorscheme import SCHEME_NAMES, ColorScheme, HueTone

HEX_RE = re.compile(r"^[0-9a-f]{6}$")


@given(h=st.floats(-720, 720, allow_nan=False), variation=st.integers(-1, 3), ws=st.booleans())
def test_hue_tone_renders_valid_hex(h, variation, ws):
    c = HueTone(h)
    assert 0 <= c.hue < 360
    assert HEX_RE.match(c.get_hex(ws, variation))


@settings(max_examples=60, deadline=None)
@given(
    name=st.sampled_from(SCHEME_NAMES),
    n=st.integers(2, 16),
    h=st.integers(0, 359),
    distance=st.floats(0, 1),
    seed=st.integers(0, 2**40),
    adjust=st.floats(-1, 1),
)
def test_palette_shape_and_determinism(name, n, h, distance, seed, adjust):
    def build():
        return (
            ColorScheme(n, seed=seed)
            .from_hue(h)
            .set_scheme(name)
            .set_distance(distance)
            .adjust_saturation(adjust)
        )

    s = build()
    flat = s.render()
    assert len(flat) == 4 * n
    assert all(HEX_RE.match(c) for c in flat)
    assert s.render() == flat
    assert build().render() == flat
    assert s.base_hue == h
