from __future__ import annotations

import numpy as np

from colorscheme import string_hash, value_noise_2d


def test_string_hash_known_values() -> None:
    assert string_hash("a") == 97
    # "a:b" -> 97 * 31**2 + ord(":") * 31 + 98
    assert string_hash("a", "b") == 95113


def test_string_hash_is_order_sensitive_and_32bit() -> None:
    assert string_hash(1, 2, 3) != string_hash(3, 2, 1)
    h = string_hash(1234567890123, 15, 359)
    assert 0 <= h < 2**32
    assert h == string_hash(1234567890123, 15, 359)


def test_noise_is_pure() -> None:
    assert value_noise_2d(0.3, -1.7, 42) == value_noise_2d(0.3, -1.7, 42)
    xs = np.linspace(-3, 3, 25)
    a = value_noise_2d(xs, xs[::-1], 7)
    b = value_noise_2d(xs, xs[::-1], 7)
    np.testing.assert_array_equal(a, b)


def test_noise_scalar_and_array_agree() -> None:
    xs = np.array([0.1, 1.5, -2.25])
    ys = np.array([0.7, -0.4, 3.0])
    arr = value_noise_2d(xs, ys, 3)
    for i in range(3):
        assert arr[i] == value_noise_2d(float(xs[i]), float(ys[i]), 3)


def test_noise_range_and_continuity() -> None:
    g = np.linspace(-5, 5, 101)
    xx, yy = np.meshgrid(g, g)
    out = value_noise_2d(xx, yy, 99)
    assert out.shape == xx.shape
    assert np.all(out >= -1.0) and np.all(out <= 1.0)
    # coherent: tiny steps give tiny changes
    assert abs(value_noise_2d(2.0, 3.0, 99) - value_noise_2d(2.0 + 1e-7, 3.0, 99)) < 1e-4


def test_noise_depends_on_seed() -> None:
    g = np.linspace(-2, 2, 9)
    a = value_noise_2d(g, g + 0.5, 1)
    b = value_noise_2d(g, g + 0.5, 2)
    assert not np.array_equal(a, b)
