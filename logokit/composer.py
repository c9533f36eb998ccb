"""
composer.py — Compose mark + wordmark + palette into SVG logo documents.

Per pattern the composer emits every (layout, mode) pair:

  layouts:  horizontal 1200×320 lockup, square 512×512 icon
  modes:    default  — palette background/text, primary mark
            dark     — near-black ground, white text, accent mark
            mono     — white ground, near-black text and mark
            invert   — primary ground, contrast text and mark

The background is never drawn here; PNGs stay transparent and the
exporter injects a solid rect for JPEGs. All user text is XML-escaped.
"""

from __future__ import annotations

import itertools
import re
from typing import Iterator, List, NamedTuple, Tuple

from .catalog import CANVAS, DARK_BACKGROUND
from .color_math import NEAR_BLACK, WHITE, escape_xml, readable_text_color
from .models import (
    BrandInput,
    BrandPalette,
    GeneratedLogoFile,
    LogoLayout,
    LogoMode,
    PatternId,
    RasterAsset,
    SvgAsset,
)

FONT_STACK = (
    "Noto Sans JP",
    "Hiragino Sans",
    "Yu Gothic",
    "Meiryo",
    "system-ui",
    "-apple-system",
    "Segoe UI",
    "sans-serif",
)


class ModeColors(NamedTuple):
    background: str
    text: str
    mark: str


class Typography(NamedTuple):
    weight: int
    tracking: float


def variant_grid() -> Iterator[Tuple[LogoLayout, LogoMode]]:
    """Every (layout, mode) pair exactly once."""
    return itertools.product(LogoLayout, LogoMode)


def mode_colors(mode: LogoMode, palette: BrandPalette) -> ModeColors:
    if mode == LogoMode.DARK:
        return ModeColors(DARK_BACKGROUND, WHITE, palette.accent.hex)
    if mode == LogoMode.MONO:
        return ModeColors(WHITE, NEAR_BLACK, NEAR_BLACK)
    if mode == LogoMode.INVERT:
        bg = palette.primary.hex
        contrast = readable_text_color(bg)
        return ModeColors(bg, contrast, contrast)
    return ModeColors(palette.background.hex, palette.text.hex, palette.primary.hex)


def typography(pattern_id: PatternId) -> Typography:
    if pattern_id == PatternId.B:
        return Typography(weight=800, tracking=0.5)
    if pattern_id == PatternId.C:
        return Typography(weight=600, tracking=2)
    return Typography(weight=700, tracking=0.5)


def has_divider(pattern_id: PatternId) -> bool:
    # the bold pattern drops the "ma" divider on purpose
    return pattern_id != PatternId.B


def optimize_svg_for_figma(svg: str) -> str:
    """Same document, no comments, collapsed whitespace."""
    out = re.sub(r"<!--[\s\S]*?-->", "", svg)
    out = re.sub(r"\s{2,}", " ", out)
    out = re.sub(r">\s+<", "><", out)
    return out.strip()


# ── SVG assembly ──────────────────────────────────────────────────────────────

def render_logo_svg(
    layout: LogoLayout,
    mode: LogoMode,
    mark_svg: str,
    brand: BrandInput,
    palette: BrandPalette,
    pattern_id: PatternId,
) -> str:
    """
    Build one logo document.

    Args:
        layout:     horizontal lockup or square icon
        mode:       colour scheme variant
        mark_svg:   inner fragment from the mark template (uses currentColor)
        brand:      brief — service name / description become the wordmark
        palette:    the pattern's palette
        pattern_id: drives typography weight, tracking and the divider

    Returns:
        Complete SVG document as a string.
    """
    canvas = CANVAS[layout]
    c = mode_colors(mode, palette)
    t = typography(pattern_id)
    name = escape_xml(brand.service_name)
    sub = escape_xml(brand.service_description)
    font_family = escape_xml(", ".join(FONT_STACK))
    root = (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{canvas.width}" height="{canvas.height}" '
        f'viewBox="{canvas.view_box}" role="img"'
    )

    if layout == LogoLayout.HORIZONTAL:
        parts: List[str] = [
            f'{root} aria-label="{name} logo">',
            f'<g transform="translate(64,64) scale(0.38)" style="color:{c.mark}">{mark_svg}</g>',
            '<g transform="translate(330,102)">',
            f'<text x="0" y="0" fill="{c.text}" font-family="{font_family}" font-size="84" '
            f'font-weight="{t.weight}" letter-spacing="{t.tracking}">{name}</text>',
            f'<text x="2" y="66" fill="{c.text}" opacity="0.75" font-family="{font_family}" font-size="22" '
            f'font-weight="500" letter-spacing="0.2">{sub}</text>',
            "</g>",
        ]
        if has_divider(pattern_id):
            parts.append(f'<rect x="300" y="84" width="2" height="152" fill="{c.text}" opacity="0.10"/>')
        parts.append("</svg>")
        return "".join(parts)

    return "".join([
        f'{root} aria-label="{name} icon">',
        f'<g transform="translate(156,110) scale(0.52)" style="color:{c.mark}">{mark_svg}</g>',
        f'<text x="256" y="410" text-anchor="middle" fill="{c.text}" font-family="{font_family}" '
        f'font-size="46" font-weight="{t.weight}" letter-spacing="{t.tracking}">{name}</text>',
        "</svg>",
    ])


def logo_basename(slug: str, pattern_id: PatternId, layout: LogoLayout, mode: LogoMode) -> str:
    return f"{slug}-pattern-{pattern_id.value.lower()}-{layout.value}-{mode.value}"


def render_pattern_logos(
    brand: BrandInput,
    palette: BrandPalette,
    pattern_id: PatternId,
    mark_svg: str,
    slug: str,
) -> Tuple[GeneratedLogoFile, ...]:
    """All 8 (layout × mode) variants for one pattern."""
    logos = []
    for layout, mode in variant_grid():
        svg = render_logo_svg(layout, mode, mark_svg, brand, palette, pattern_id)
        base = logo_basename(slug, pattern_id, layout, mode)
        logos.append(GeneratedLogoFile(
            layout=layout,
            mode=mode,
            svg=SvgAsset(filename=f"{base}.svg", content=svg),
            figma_svg=SvgAsset(filename=f"{base}.figma.svg", content=optimize_svg_for_figma(svg)),
            png=RasterAsset(filename=f"{base}.png"),
            jpeg=RasterAsset(filename=f"{base}.jpg"),
        ))
    return tuple(logos)
