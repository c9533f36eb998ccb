import xml.etree.ElementTree as ET

import pytest

from logokit.color_math import readable_text_color
from logokit.composer import (
    mode_colors,
    optimize_svg_for_figma,
    render_logo_svg,
    render_pattern_logos,
    variant_grid,
)
from logokit.marks import load_mark
from logokit.models import BrandInput, LogoLayout, LogoMode, PatternId
from logokit.palette import generate_palette_for_pattern

MARK = '<circle cx="192" cy="192" r="100" fill="currentColor"/>'
DIVIDER = 'opacity="0.10"'


@pytest.fixture
def palette(brand):
    return generate_palette_for_pattern(brand, PatternId.A)


def test_variant_grid_is_exhaustive_and_unique():
    pairs = list(variant_grid())
    assert len(pairs) == len(LogoLayout) * len(LogoMode) == 8
    assert len(set(pairs)) == 8


def test_render_pattern_logos_names_and_pairs(brand, palette):
    logos = render_pattern_logos(brand, palette, PatternId.A, MARK, "acme-pay")
    assert len(logos) == 8
    assert {(l.layout, l.mode) for l in logos} == set(variant_grid())
    first = logos[0]
    assert first.svg.filename == "acme-pay-pattern-a-horizontal-default.svg"
    assert first.figma_svg.filename == "acme-pay-pattern-a-horizontal-default.figma.svg"
    assert first.png.filename.endswith(".png")
    assert first.jpeg.filename.endswith(".jpg")


@pytest.mark.parametrize("layout", list(LogoLayout))
def test_dimensions(brand, palette, layout):
    svg = render_logo_svg(layout, LogoMode.DEFAULT, MARK, brand, palette, PatternId.A)
    root = ET.fromstring(svg)
    expected = ("1200", "320") if layout == LogoLayout.HORIZONTAL else ("512", "512")
    assert (root.get("width"), root.get("height")) == expected


def test_hostile_service_name_is_escaped(palette):
    brand = BrandInput(service_name='A<B & "C" \'D\'', service_description="x < y & z > w")
    for layout, mode in variant_grid():
        svg = render_logo_svg(layout, mode, MARK, brand, palette, PatternId.A)
        assert "A<B" not in svg
        assert "x < y" not in svg
        assert "A&lt;B &amp; &quot;C&quot; &#39;D&#39;" in svg
        root = ET.fromstring(svg)   # still well-formed
        texts = [t.text for t in root.iter("{http://www.w3.org/2000/svg}text")]
        assert 'A<B & "C" \'D\'' in texts
        assert 'A<B & "C" \'D\' ' in root.get("aria-label")


@pytest.mark.parametrize("pattern_id, has_divider", [
    (PatternId.A, True),
    (PatternId.B, False),
    (PatternId.C, True),
])
def test_divider_only_for_non_bold_patterns(brand, pattern_id, has_divider):
    palette = generate_palette_for_pattern(brand, pattern_id)
    svg = render_logo_svg(LogoLayout.HORIZONTAL, LogoMode.DEFAULT, MARK, brand, palette, pattern_id)
    assert (DIVIDER in svg) is has_divider


def test_square_layout_has_no_divider(brand, palette):
    svg = render_logo_svg(LogoLayout.SQUARE, LogoMode.DEFAULT, MARK, brand, palette, PatternId.A)
    assert DIVIDER not in svg


@pytest.mark.parametrize("pattern_id, weight, tracking", [
    (PatternId.A, "700", "0.5"),
    (PatternId.B, "800", "0.5"),
    (PatternId.C, "600", "2"),
])
def test_typography_per_pattern(brand, pattern_id, weight, tracking):
    palette = generate_palette_for_pattern(brand, pattern_id)
    svg = render_logo_svg(LogoLayout.SQUARE, LogoMode.DEFAULT, MARK, brand, palette, pattern_id)
    assert f'font-weight="{weight}" letter-spacing="{tracking}"' in svg


def test_mode_colors(palette):
    assert mode_colors(LogoMode.DEFAULT, palette) == (
        palette.background.hex, palette.text.hex, palette.primary.hex,
    )
    assert mode_colors(LogoMode.DARK, palette) == ("#0B0F1A", "#FFFFFF", palette.accent.hex)
    assert mode_colors(LogoMode.MONO, palette) == ("#FFFFFF", "#111827", "#111827")
    contrast = readable_text_color(palette.primary.hex)
    assert mode_colors(LogoMode.INVERT, palette) == (palette.primary.hex, contrast, contrast)


def test_mark_colour_applied_through_current_color(brand, palette):
    svg = render_logo_svg(LogoLayout.HORIZONTAL, LogoMode.DARK, MARK, brand, palette, PatternId.A)
    assert f'style="color:{palette.accent.hex}">{MARK}</g>' in svg


def test_background_is_not_drawn(brand, palette):
    svg = render_logo_svg(LogoLayout.SQUARE, LogoMode.DARK, MARK, brand, palette, PatternId.A)
    assert 'width="100%"' not in svg
    assert "#0B0F1A" not in svg


def test_optimize_svg_for_figma():
    raw = '<svg>\n  <!-- note -->\n  <g   transform="x"/>\n</svg>\n'
    assert optimize_svg_for_figma(raw) == '<svg><g transform="x"/></svg>'


def test_figma_variant_of_real_mark_is_equivalent(brand, palette):
    mark = load_mark("japanese-modern")
    logos = render_pattern_logos(brand, palette, PatternId.A, mark, "acme-pay")
    for logo in logos:
        figma = logo.figma_svg.content
        assert "<!--" not in figma
        assert len(figma) <= len(logo.svg.content)
        assert ET.fromstring(figma).tag == ET.fromstring(logo.svg.content).tag
