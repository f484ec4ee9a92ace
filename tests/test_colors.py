import pytest

from obsidian_kit import colors
from obsidian_kit.colors import Srgba


def test_to_vec4_returns_components():
    assert colors.U1.to_vec4() == (0.094, 0.094, 0.102, 1.0)


def test_focus_is_accent_with_alpha():
    assert colors.ACCENT.with_alpha(0.15) == colors.FOCUS
    assert colors.ACCENT.with_alpha(0.5) == colors.TEXT_SELECT


def test_with_alpha_keeps_rgb():
    c = colors.U3.with_alpha(0.25)
    assert c.to_vec4()[:3] == colors.U3.to_vec4()[:3]
    assert c.alpha == 0.25


def test_mix_endpoints():
    a, b = colors.U1, colors.ACCENT
    assert a.mix(b, 0.0) == a
    for got, want in zip(a.mix(b, 1.0).to_vec4(), b.to_vec4()):
        assert got == pytest.approx(want)


def test_mix_midpoint_lies_between():
    a, b = colors.X_RED, colors.Z_BLUE
    mid = a.mix(b, 0.5)
    for m, x, y in zip(mid.to_vec4(), a.to_vec4(), b.to_vec4()):
        assert min(x, y) <= m <= max(x, y)
        assert m == pytest.approx((x + y) / 2)


def test_to_linear_fixed_points_and_alpha():
    assert Srgba(0.0, 1.0, 0.0, 0.3).to_linear() == (0.0, 1.0, 0.0, 0.3)


def test_to_linear_darkens_midtones_monotonically():
    values = [Srgba(v, v, v).to_linear()[0] for v in (0.01, 0.2, 0.5, 0.8)]
    assert values == sorted(values)
    assert all(lin < v for lin, v in zip(values, (0.01, 0.2, 0.5, 0.8)))


def test_transparent_has_zero_alpha():
    assert colors.TRANSPARENT.to_linear()[3] == 0.0