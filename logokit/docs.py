"""
docs.py — Template-filled explanatory text for each pattern and the kit.

Per pattern:  reasons.md, growth-story.md, one-liner.txt, trademark-note.md
Per project:  guideline.md

No model calls here. Richer rationale can be swapped in afterwards by
enrichment.apply_rationale().
"""

from __future__ import annotations

from typing import Sequence

from .catalog import CANVAS, DesignPattern
from .models import BrandInput, BrandPalette, GeneratedPattern, LogoLayout, LogoMode, PatternId

_TONE = {
    PatternId.A: "generous whitespace and quiet trust",
    PatternId.B: "a strong, symbolic silhouette",
    PatternId.C: "the strength of the fewest elements",
}


def build_reasons(brand: BrandInput, pattern: DesignPattern, palette: BrandPalette) -> str:
    return "\n".join([
        f"## Pattern {pattern.id.value}: {pattern.title}",
        "",
        "### Why this shape",
        f"- {pattern.description}",
        "- The structure keeps deliberate negative space so the logo does not clog up when scaled down.",
        "- The wordmark carries the identity; the mark supports it instead of competing with it.",
        "",
        "### Why these colours",
        f"- Primary ({palette.primary.hex}) anchors the palette, balancing trust and recognisability.",
        f"- Secondary ({palette.secondary.hex}) plays a supporting role; accent ({palette.accent.hex}) "
        "is reserved for CTAs and emphasis.",
        "",
        "### How it connects to the service",
        f"- It supports the value of “{brand.service_description}” with a composed, orderly "
        "impression rather than loud effects.",
        "",
        "### Why it lasts",
        "- Flat, mostly single-colour construction survives print, compression and small sizes.",
        "- Horizontal and square layouts are both first-class, so web, social and slides stay consistent.",
        "",
        "### Note (trademarks / similar logos)",
        "- This output is generated automatically and similar logos may exist. Check **trademarks and "
        "logos in your own and adjacent categories** before adopting it (this is not legal advice).",
    ])


def build_growth_story(brand: BrandInput, pattern_id: PatternId) -> str:
    return "\n".join([
        f"## Growth story (Pattern {pattern_id.value})",
        "",
        "- **Now (MVP)**: the logo states the promise clearly. Whitespace and legibility come first.",
        "- **Expansion (more features)**: sub-brands and feature tags attach without breaking the spacing system.",
        "- **Maturity (multiple products)**: the square icon becomes a shared crest; colour and secondary "
        "shapes differentiate each product.",
        "",
        f"As “{brand.service_name}” grows, the skeleton of the logo stays put and extends into "
        "a system that is strong in day-to-day use.",
    ])


def build_one_liner(brand: BrandInput, pattern_id: PatternId) -> str:
    tone = _TONE.get(pattern_id, _TONE[PatternId.A])
    return (
        f"The “{brand.service_name}” logo uses {tone} to support "
        f"“{brand.service_description}” over the long run."
    )


def build_trademark_note(brand: BrandInput) -> str:
    return "\n".join([
        "## Similar logo check (trademark aid)",
        "",
        "- Before adopting, compare visually against logos of competitors and adjacent categories.",
        "- If possible, search trademark databases for the service name, abbreviations and the logo's "
        "impression (seal, circle, geometric).",
        "- This is a general reminder, not a legal opinion or guarantee.",
        "",
        f"Subject: {brand.service_name}",
    ])


# ── Kit guideline ─────────────────────────────────────────────────────────────

def build_guideline_markdown(brand: BrandInput, patterns: Sequence[GeneratedPattern]) -> str:
    """Usage rules shared by every pattern in the kit (guideline.md)."""
    horizontal = CANVAS[LogoLayout.HORIZONTAL]
    square = CANVAS[LogoLayout.SQUARE]

    lines = [
        f"# Logo Guideline — {brand.service_name}",
        "",
        f"> {brand.service_description}",
        "",
        "## Layouts",
        "",
        f"- **horizontal** ({horizontal.width}×{horizontal.height}): headers, slide covers, email signatures.",
        f"- **square** ({square.width}×{square.height}): app icons, social avatars, favicons.",
        "",
        "## Colour modes",
        "",
        f"- **{LogoMode.DEFAULT.value}**: light backgrounds; the standard choice.",
        f"- **{LogoMode.DARK.value}**: dark UI and night themes; the mark switches to the accent colour.",
        f"- **{LogoMode.MONO.value}**: fax, stamps, single-colour print, embossing.",
        f"- **{LogoMode.INVERT.value}**: on the primary brand colour (banners, merchandise).",
        "",
        "## Clear space and minimum size",
        "",
        "- Keep clear space around the logo of at least half the mark's height on every side.",
        "- Horizontal lockup: do not render below 120px wide on screen or 30mm in print.",
        "- Square icon: do not render below 24px; at 16px use the mark alone without the name.",
        "",
        "## Patterns",
        "",
    ]
    for p in patterns:
        lines += [
            f"### Pattern {p.id.value}: {p.title}",
            "",
            p.description,
            "",
            f"- primary {p.palette.primary.hex} / secondary {p.palette.secondary.hex} / "
            f"accent {p.palette.accent.hex} / background {p.palette.background.hex}",
            f"- {p.one_liner}",
            "",
        ]
    lines += [
        "## Files",
        "",
        "- `.svg`: master vector. `.figma.svg`: same drawing with comments and whitespace stripped.",
        "- `.png`: transparent background. `.jpg`: background filled per mode.",
        "- File names follow `<service>-pattern-<id>-<layout>-<mode>.<ext>`.",
        "",
        "## Don'ts",
        "",
        "- Do not stretch, skew or rotate the logo.",
        "- Do not recolour the mark outside the palette or add gradients and shadows.",
        "- Do not place the default mode on busy photos; use dark or invert instead.",
        "- Do not change the typeface or letter-spacing of the wordmark.",
        "",
    ]
    return "\n".join(lines)
