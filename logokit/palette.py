"""
palette.py — Derive one BrandPalette per design pattern.

Pipeline per pattern:
  1. primary   — user main_color if valid hex, else industry default
  2. candidates — secondary = hue +22°, accent = hue +140° (+165° for wa_tech)
  3. pattern tuning
       A  conservative: both candidates pulled back toward primary
       B  bold:         raw hue shifts, no mixing
       C  minimal:      everything darkened toward near-black
  4. user sub_color overrides secondary (accent is never user-set)
  5. background white, except B + startup → primary tinted at 8%
  6. text = readable colour on background
  7. fixed 9-step grayscale

Pure functions of (input, pattern): same input → byte-identical palette.
"""

from __future__ import annotations

import json
from typing import Dict, Mapping, NamedTuple, Sequence

from .catalog import FALLBACK_PRIMARY, GRAYSCALE_STOPS, INDUSTRY_PRIMARY, PATTERNS
from .color_math import NEAR_BLACK, WHITE, hex_to_rgb, mix, normalize_hex, readable_text_color, shift_hue
from .models import RGB, BrandInput, BrandPalette, Industry, Mood, PaletteColor, PatternId

# ── Usage labels ──────────────────────────────────────────────────────────────

USAGE_PRIMARY = ("Logo mark", "Headings", "Links")
USAGE_SECONDARY = ("Supporting elements", "Subheadings")
USAGE_ACCENT = ("CTA", "Emphasis", "Notifications")
USAGE_BACKGROUND = ("Background",)
USAGE_TEXT = ("Body text", "Logo text")
USAGE_CTA = ("CTA buttons", "Highlight labels")

GRAY_USAGE_TEXT = ("Text", "Headings")
GRAY_USAGE_MID = ("Secondary text", "Borders")
GRAY_USAGE_BACKGROUND = ("Background",)


def _color(hex_str: str, usage: Sequence[str]) -> PaletteColor:
    normalized = normalize_hex(hex_str) or NEAR_BLACK
    r, g, b = hex_to_rgb(normalized)
    return PaletteColor(hex=normalized, rgb=RGB(r=r, g=g, b=b), usage=tuple(usage))


def _grayscale() -> tuple:
    # labels are positional, not derived from the palette
    ramp = []
    for i, h in enumerate(GRAYSCALE_STOPS):
        if i <= 2:
            usage = GRAY_USAGE_TEXT
        elif i >= 7:
            usage = GRAY_USAGE_BACKGROUND
        else:
            usage = GRAY_USAGE_MID
        ramp.append(_color(h, usage))
    return tuple(ramp)


def default_primary(industry: Industry) -> str:
    return INDUSTRY_PRIMARY.get(industry, FALLBACK_PRIMARY)


class _Tuned(NamedTuple):
    primary: str
    secondary: str
    accent: str


def _tune_for_pattern(primary: str, pattern_id: PatternId, mood: Mood) -> _Tuned:
    base_secondary = shift_hue(primary, 22)
    base_accent = shift_hue(primary, 165 if mood == Mood.WA_TECH else 140)

    if pattern_id == PatternId.A:
        return _Tuned(
            primary=primary,
            secondary=mix(primary, base_secondary, 0.55),
            accent=mix(primary, base_accent, 0.45),
        )
    if pattern_id == PatternId.B:
        return _Tuned(
            primary=primary,
            secondary=shift_hue(primary, 50 if mood == Mood.STARTUP else 35),
            accent=shift_hue(primary, 190 if mood == Mood.WA_TECH else 170),
        )
    # C: lower chroma so the mark survives print, compression and small sizes
    return _Tuned(
        primary=mix(primary, NEAR_BLACK, 0.25),
        secondary=mix(base_secondary, NEAR_BLACK, 0.32),
        accent=mix(base_accent, NEAR_BLACK, 0.22),
    )


# ── Public API ────────────────────────────────────────────────────────────────

def generate_palette_for_pattern(brand: BrandInput, pattern_id: PatternId) -> BrandPalette:
    """
    Build the 6-role palette + grayscale for one pattern.

    Args:
        brand:      Validated brief
        pattern_id: A, B or C

    Returns:
        BrandPalette with normalised #RRGGBB values.
    """
    pattern_id = PatternId(pattern_id)
    user_primary = normalize_hex(brand.main_color)
    user_secondary = normalize_hex(brand.sub_color)
    primary = user_primary or default_primary(brand.industry)

    tuned = _tune_for_pattern(primary, pattern_id, brand.mood)
    secondary = user_secondary or tuned.secondary
    accent = tuned.accent

    if pattern_id == PatternId.B and brand.mood == Mood.STARTUP:
        background = mix(primary, WHITE, 0.92)
    else:
        background = WHITE
    text = readable_text_color(background)

    return BrandPalette(
        primary=_color(tuned.primary, USAGE_PRIMARY),
        secondary=_color(secondary, USAGE_SECONDARY),
        accent=_color(accent, USAGE_ACCENT),
        background=_color(background, USAGE_BACKGROUND),
        text=_color(text, USAGE_TEXT),
        cta=_color(accent, USAGE_CTA),
        grayscale=_grayscale(),
    )


def generate_palette_set(brand: BrandInput) -> Dict[PatternId, BrandPalette]:
    return {p.id: generate_palette_for_pattern(brand, p.id) for p in PATTERNS}


# ── Documents ─────────────────────────────────────────────────────────────────

_ROLES = ("primary", "secondary", "accent", "background", "text", "cta")


def _swatch(c: PaletteColor) -> str:
    return f"{c.hex} / rgb({c.rgb.r}, {c.rgb.g}, {c.rgb.b})  usage: {' / '.join(c.usage)}"


def palette_markdown(palettes: Mapping[PatternId, BrandPalette]) -> str:
    """Human-readable palette reference (palette.md)."""
    lines = ["# Colour Palette", ""]
    for p in PATTERNS:
        palette = palettes[p.id]
        lines += [f"## Pattern {p.id.value}", ""]
        for role in _ROLES:
            lines.append(f"- {role}: {_swatch(getattr(palette, role))}")
        lines += ["", "- grayscale:"]
        for g in palette.grayscale:
            lines.append(f"  - {_swatch(g)}")
        lines.append("")
    return "\n".join(lines)


def palette_json(palettes: Mapping[PatternId, BrandPalette]) -> str:
    """Machine-readable palette export (palette.json), keyed by pattern id."""
    data = {p.id.value: palettes[p.id].model_dump(mode="json") for p in PATTERNS}
    return json.dumps(data, indent=2, ensure_ascii=False)
