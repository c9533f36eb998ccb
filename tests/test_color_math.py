import itertools

import pytest

from logokit.color_math import (
    NEAR_BLACK,
    WHITE,
    escape_xml,
    hex_to_rgb,
    hsl_to_rgb,
    luminance,
    mix,
    normalize_hex,
    readable_text_color,
    rgb_to_hex,
    rgb_to_hsl,
    shift_hue,
)


@pytest.mark.parametrize("raw, expected", [
    ("abc", "#AABBCC"),
    ("#abc", "#AABBCC"),
    ("#1d4ed8", "#1D4ED8"),
    ("  1D4ED8 ", "#1D4ED8"),
])
def test_normalize_hex_accepts_short_and_long_forms(raw, expected):
    assert normalize_hex(raw) == expected


@pytest.mark.parametrize("raw", ["", None, "xyz", "#12345", "#1234567", "rgb(0,0,0)", "##abc"])
def test_normalize_hex_rejects_garbage(raw):
    assert normalize_hex(raw) is None


@pytest.mark.parametrize("hex_str", ["#000000", "#FFFFFF", "#1D4ED8", "#0F766E", "#DB2777", "#7F8081"])
def test_hex_rgb_round_trip(hex_str):
    assert rgb_to_hex(*hex_to_rgb(hex_str)) == hex_str


def test_rgb_to_hex_clamps_and_rounds():
    assert rgb_to_hex(-20, 300, 127.5) == "#00FF80"


def test_hsl_round_trip_within_one():
    for r, g, b in itertools.product(range(0, 256, 51), repeat=3):
        rr, gg, bb = hsl_to_rgb(*rgb_to_hsl(r, g, b))
        assert abs(rr - r) <= 1 and abs(gg - g) <= 1 and abs(bb - b) <= 1, (r, g, b)


def test_rgb_to_hsl_hue_in_range():
    h, s, l = rgb_to_hsl(255, 0, 128)
    assert 0 <= h < 360
    assert s == pytest.approx(1.0)


def test_shift_hue_red_to_cyan():
    assert shift_hue("#FF0000", 180) == "#00FFFF"


def test_shift_hue_negative_degrees_wrap():
    assert shift_hue("#FF0000", -90) == shift_hue("#FF0000", 270) == "#8000FF"


def test_shift_hue_keeps_grays():
    assert shift_hue("#808080", 123) == "#808080"


def test_mix_midpoint():
    assert mix("#000000", "#FFFFFF", 0.5) == "#808080"


def test_mix_clamps_t():
    assert mix("#000000", "#FFFFFF", 2) == "#FFFFFF"
    assert mix("#000000", "#FFFFFF", -1) == "#000000"


def test_luminance_extremes():
    assert luminance("#000000") == 0
    assert luminance("#FFFFFF") == pytest.approx(1.0)


def test_readable_text_color_threshold():
    assert readable_text_color("#FFFFFF") == NEAR_BLACK
    assert readable_text_color("#000000") == WHITE
    assert readable_text_color("#1D4ED8") == WHITE


@pytest.mark.parametrize("bg", ["#000000", "#FFFFFF"])
def test_readable_text_color_contrasts_at_extremes(bg):
    assert abs(luminance(readable_text_color(bg)) - luminance(bg)) > 0.1


def test_escape_xml():
    assert escape_xml("""<a href="x">Tom & Jerry's</a>""") == (
        "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&#39;s&lt;/a&gt;"
    )
