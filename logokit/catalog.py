"""
catalog.py — Static lookup tables shared by the palette engine and composer.

Read-only, versioned data. Bump CATALOG_VERSION whenever a value here
changes, since palettes and logos derived from it change too.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from .models import Industry, LogoLayout, PatternId

CATALOG_VERSION = "2024.1"


# ── Design patterns ───────────────────────────────────────────────────────────

@dataclass(frozen=True)
class DesignPattern:
    id: PatternId
    title: str
    description: str
    template: str       # mark template id under logokit/templates/


PATTERNS: Tuple[DesignPattern, ...] = (
    DesignPattern(
        id=PatternId.A,
        title="Classic / Versatile (trust)",
        description=(
            "Readability and breathing room first. A safe skeleton that extends "
            "cleanly to web, social and slide decks."
        ),
        template="japanese-modern",
    ),
    DesignPattern(
        id=PatternId.B,
        title="Bold / Distinctive (symbolic)",
        description=(
            "Leans harder on a seal-like abstract symbol. A memorable hook "
            "with a strong silhouette."
        ),
        template="japanese-bold",
    ),
    DesignPattern(
        id=PatternId.C,
        title="Minimal / Long-term (scales down)",
        description=(
            "Built from the fewest possible elements. Holds up as an app icon "
            "and inside product UI for years."
        ),
        template="japanese-minimal",
    ),
)


# ── Colour tables ─────────────────────────────────────────────────────────────

INDUSTRY_PRIMARY: Mapping[Industry, str] = MappingProxyType({
    Industry.FINTECH:   "#0F766E",   # teal
    Industry.HR:        "#2563EB",   # blue
    Industry.AI:        "#7C3AED",   # violet
    Industry.MARKETING: "#DB2777",   # pink
    Industry.SAAS:      "#1D4ED8",   # royal blue
})
FALLBACK_PRIMARY = "#111827"

GRAYSCALE_STOPS: Tuple[str, ...] = (
    "#0B0F1A",
    "#111827",
    "#374151",
    "#6B7280",
    "#9CA3AF",
    "#D1D5DB",
    "#E5E7EB",
    "#F3F4F6",
    "#FFFFFF",
)

DARK_BACKGROUND = "#0B0F1A"


# ── Canvas sizes ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Canvas:
    width: int
    height: int

    @property
    def view_box(self) -> str:
        return f"0 0 {self.width} {self.height}"


CANVAS: Mapping[LogoLayout, Canvas] = MappingProxyType({
    LogoLayout.HORIZONTAL: Canvas(1200, 320),
    LogoLayout.SQUARE:     Canvas(512, 512),
})
