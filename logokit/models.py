"""
models.py — Data model for a generated logo kit.

Everything here is an immutable pydantic model: a project is built once
from a BrandInput and never edited afterwards. Enrichment and other
post-processing return copies (model_copy) instead of mutating.

  BrandInput            validated brief (boundary)
  PaletteColor          one swatch: hex + rgb + usage labels
  BrandPalette          6 roles + 9-step grayscale, one per pattern
  GeneratedLogoFile     one (layout, mode) variant of a pattern's logo
  GeneratedPattern      palette + docs + 8 logo variants
  GeneratedLogoProject  meta + 3 patterns + project docs
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


# ── Enumerations ──────────────────────────────────────────────────────────────

class Mood(str, Enum):
    JAPANESE_MODERN = "japanese_modern"
    WA_TECH = "wa_tech"
    MINIMAL = "minimal"
    BOLD = "bold"
    STARTUP = "startup"


class Industry(str, Enum):
    SAAS = "saas"
    HR = "hr"
    AI = "ai"
    MARKETING = "marketing"
    FINTECH = "fintech"
    OTHER = "other"


class PatternId(str, Enum):
    A = "A"
    B = "B"
    C = "C"


class LogoLayout(str, Enum):
    HORIZONTAL = "horizontal"
    SQUARE = "square"


class LogoMode(str, Enum):
    DEFAULT = "default"
    DARK = "dark"
    MONO = "mono"
    INVERT = "invert"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ── Input ─────────────────────────────────────────────────────────────────────

class BrandInput(_Frozen):
    """The brief. Colours are free-form; invalid hex falls back inside the palette engine."""
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    service_name: str = Field(min_length=1, max_length=60, description="Wordmark text")
    service_description: str = Field(min_length=1, max_length=400, description="Tagline / secondary line")
    mood: Mood = Mood.JAPANESE_MODERN
    industry: Industry = Industry.SAAS
    main_color: Optional[str] = Field(default=None, description="Optional primary hex, e.g. '#1D4ED8'")
    sub_color: Optional[str] = Field(default=None, description="Optional secondary hex")


# ── Palette ───────────────────────────────────────────────────────────────────

class RGB(_Frozen):
    r: int
    g: int
    b: int


class PaletteColor(_Frozen):
    hex: str
    rgb: RGB
    usage: Tuple[str, ...] = ()


class BrandPalette(_Frozen):
    primary: PaletteColor
    secondary: PaletteColor
    accent: PaletteColor
    background: PaletteColor
    text: PaletteColor
    cta: PaletteColor
    grayscale: Tuple[PaletteColor, ...]


# ── Generated output ──────────────────────────────────────────────────────────

class SvgAsset(_Frozen):
    filename: str
    content: str


class RasterAsset(_Frozen):
    filename: str


class GeneratedLogoFile(_Frozen):
    layout: LogoLayout
    mode: LogoMode
    svg: SvgAsset
    figma_svg: SvgAsset
    png: RasterAsset
    jpeg: RasterAsset


class GeneratedPattern(_Frozen):
    id: PatternId
    title: str
    description: str
    palette: BrandPalette
    reasons: str
    growth_story: str
    one_liner: str
    trademark_note: str
    logos: Tuple[GeneratedLogoFile, ...]

    def find_logo(self, layout: LogoLayout, mode: LogoMode) -> Optional[GeneratedLogoFile]:
        for logo in self.logos:
            if logo.layout == layout and logo.mode == mode:
                return logo
        return None


class ProjectMeta(_Frozen):
    generator: str
    version: str
    catalog_version: str
    created_at: str
    input: BrandInput
    service_slug: str
    seed: str


class GeneratedLogoProject(_Frozen):
    meta: ProjectMeta
    patterns: Tuple[GeneratedPattern, ...]
    guideline_markdown: str
    palette_markdown: str

    def pattern(self, pattern_id: PatternId) -> Optional[GeneratedPattern]:
        for p in self.patterns:
            if p.id == pattern_id:
                return p
        return None

    def logo_count(self) -> int:
        return sum(len(p.logos) for p in self.patterns)
