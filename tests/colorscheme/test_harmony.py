from __future__ import annotations

"""各スキームの色相割り当てと残りスロットの均等配置。"""

import pytest

from colorscheme import ColorScheme, HueTone, InvalidArgument, SchemeType, string_hash
from colorscheme.harmony import SchemeParams, assign_hues, fill_remaining
from colorscheme.tables import SEASON_SATURATION, SEASON_VALUE, preset_from_sv


def _hues(name: str, h: int, n: int = 4, **kw) -> list[int]:
    s = ColorScheme(n, seed=kw.pop("seed", 1)).from_hue(h).set_scheme(name)
    if "distance" in kw:
        s.set_distance(kw["distance"])
    if "complement" in kw:
        s.add_complement(kw["complement"])
    s.render()
    return [c.hue for c in s.colors]


def test_scheme_type_from_name() -> None:
    assert SchemeType.from_name("splitComplement") is SchemeType.SPLIT_COMPLEMENT
    assert SchemeType.from_name(SchemeType.PHI) is SchemeType.PHI
    with pytest.raises(InvalidArgument):
        SchemeType.from_name("split_complement")


def test_triade() -> None:
    assert _hues("triade", 0, 3, distance=0.5) == [0, 150, 210]
    assert _hues("triade", 0, 3, distance=0.0) == [0, 180, 180]


def test_analogic_with_and_without_complement() -> None:
    assert _hues("analogic", 120, 4, distance=0.5, complement=True) == [120, 150, 90, 300]
    # the unclaimed fourth slot gets a full turn back to the base hue
    assert _hues("analogic", 120, 4, distance=0.5) == [120, 150, 90, 120]


def test_split_complement() -> None:
    assert _hues("splitComplement", 0, 3, distance=1.0) == [0, 150, 210]


def test_square() -> None:
    assert _hues("square", 10) == [10, 100, 190, 280]


def test_phi_steps_by_golden_angle() -> None:
    assert _hues("phi", 0, 5) == [0, 138, 275, 53, 190]


def test_remaining_slots_are_spread_evenly() -> None:
    assert _hues("contrast", 0, 4) == [0, 180, 180, 0]
    assert _hues("contrast", 0, 6) == [0, 180, 90, 180, 270, 0]


def test_shades_and_tints_share_base_hue() -> None:
    assert _hues("shades", 45, 5) == [45] * 5
    assert _hues("tints", 45, 5) == [45] * 5
    # slots past the fifth are spread around the wheel
    assert _hues("tints", 45, 6)[5] == 45


def test_tints_variant_parameters() -> None:
    colors = [HueTone(0) for _ in range(3)]
    used = assign_hues(SchemeType.TINTS, colors, 200, SchemeParams())
    assert used == 3
    assert colors[1].get_variant(0) == pytest.approx((0.3 * 0.75, 0.95))
    assert colors[2].get_variant(3) == pytest.approx((0.9 * 0.6, 0.7))


def test_shades_variant_parameters() -> None:
    colors = [HueTone(0) for _ in range(3)]
    assign_hues(SchemeType.SHADES, colors, 200, SchemeParams())
    assert colors[0].get_variant(0) == pytest.approx((0.9, 0.9))
    assert colors[2].get_variant(3) == pytest.approx((0.9, 0.6 * 0.7))


def test_chaos_offsets_follow_hash() -> None:
    h, seed, n = 100, 77, 6
    hues = _hues("chaos", h, n, seed=seed)
    assert hues[0] == h
    for i in range(1, n):
        expected = (h + string_hash(seed, i, h) % 240 - 120) % 360
        assert hues[i] == expected


def test_chaos_and_perlin_depend_on_seed() -> None:
    for name in ("chaos", "perlin"):
        a = ColorScheme(8, seed=1).from_hue(100).set_scheme(name).render()
        b = ColorScheme(8, seed=2).from_hue(100).set_scheme(name).render()
        assert a != b


def test_seasons() -> None:
    hues = _hues("seasons", 65, 4)
    # shift = floor(65 / 30) * 10 = 20; slot 0 keeps the seed hue after rendering
    assert hues == [65, 80, 50, 230]

    s = ColorScheme(4).from_hue(65).set_scheme("seasons")
    spring = HueTone(110, preset_from_sv(SEASON_SATURATION[0], SEASON_VALUE[0]))
    assert s.render_grouped()[0] == [spring.get_hex(False, j) for j in range(4)]


def test_gradient_walks_shortest_arc() -> None:
    # end hue = (30 + 90 + 30) % 360 = 150
    assert _hues("gradient", 30, 4) == [30, 70, 110, 150]
    assert _hues("gradient", 300, 2) == [300, (300 + 90 + 30) % 360]


def test_perlin_offsets_stay_in_range() -> None:
    h = 180
    hues = _hues("perlin", h, 12, seed=11)
    for hue in hues[1:]:
        d = (hue - h) % 360
        offset = d - 360 if d >= 180 else d
        assert -180 <= offset <= 60


def test_fill_remaining_is_noop_when_all_claimed() -> None:
    colors = [HueTone(h) for h in (10, 20, 30)]
    fill_remaining(colors, 0, 3)
    assert [c.hue for c in colors] == [10, 20, 30]
