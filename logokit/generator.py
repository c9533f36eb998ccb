"""
generator.py — Assemble a complete GeneratedLogoProject in one pass.

  brief → slug + seed → 3 palettes → per pattern: mark, 8 logos, 4 docs
        → guideline.md + palette.md → GeneratedLogoProject

Usage:
    from logokit.generator import generate_logo_project, project_preview

    project = generate_logo_project(BrandInput(service_name="Acme", service_description="Payroll"))
    project.logo_count()       # → 24
    project_preview(project)   # → JSON-ready dict without raster references
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional

from . import __version__
from .catalog import CATALOG_VERSION, PATTERNS
from .composer import render_pattern_logos
from .docs import build_growth_story, build_guideline_markdown, build_one_liner, build_reasons, build_trademark_note
from .identity import slugify, stable_seed
from .marks import load_mark
from .models import BrandInput, BrandPalette, GeneratedLogoProject, GeneratedPattern, PatternId, ProjectMeta
from .palette import generate_palette_set, palette_markdown

logger = logging.getLogger(__name__)

GENERATOR_NAME = "logokit"


def project_seed(brand: BrandInput, slug: str) -> str:
    data = brand.model_dump(mode="json", exclude_none=True)
    data["service_slug"] = slug
    return stable_seed(data)


def generate_logo_project(
    brand: BrandInput,
    palettes: Optional[Mapping[PatternId, BrandPalette]] = None,
    *,
    mark_loader: Callable[[str], str] = load_mark,
    created_at: Optional[datetime] = None,
) -> GeneratedLogoProject:
    """
    Build the whole kit in memory (vector only; nothing touches disk).

    Args:
        brand:       Validated brief
        palettes:    Pre-computed palettes (default: generate_palette_set(brand))
        mark_loader: template id → inner SVG fragment
        created_at:  Timestamp for meta (default: now, UTC)

    Returns:
        GeneratedLogoProject with 3 patterns × 8 logos.

    Raises:
        MarkTemplateError: a pattern's mark template is missing or malformed.
    """
    palettes = palettes or generate_palette_set(brand)
    slug = slugify(brand.service_name)
    seed = project_seed(brand, slug)
    logger.info(f"Generating logo project slug={slug} seed={seed}")

    patterns = []
    for design in PATTERNS:
        palette = palettes[design.id]
        mark_svg = mark_loader(design.template)
        patterns.append(GeneratedPattern(
            id=design.id,
            title=design.title,
            description=design.description,
            palette=palette,
            reasons=build_reasons(brand, design, palette),
            growth_story=build_growth_story(brand, design.id),
            one_liner=build_one_liner(brand, design.id),
            trademark_note=build_trademark_note(brand),
            logos=render_pattern_logos(brand, palette, design.id, mark_svg, slug),
        ))

    stamp = (created_at or datetime.now(timezone.utc)).isoformat()
    return GeneratedLogoProject(
        meta=ProjectMeta(
            generator=GENERATOR_NAME,
            version=__version__,
            catalog_version=CATALOG_VERSION,
            created_at=stamp,
            input=brand,
            service_slug=slug,
            seed=seed,
        ),
        patterns=tuple(patterns),
        guideline_markdown=build_guideline_markdown(brand, patterns),
        palette_markdown=palette_markdown(palettes),
    )


def project_preview(project: GeneratedLogoProject) -> Dict[str, Any]:
    """Trimmed JSON structure: meta, docs, palettes and raw SVG (no raster filenames)."""
    return {
        "meta": project.meta.model_dump(mode="json"),
        "guideline_markdown": project.guideline_markdown,
        "palette_markdown": project.palette_markdown,
        "patterns": [
            {
                "id": p.id.value,
                "title": p.title,
                "description": p.description,
                "palette": p.palette.model_dump(mode="json"),
                "reasons": p.reasons,
                "growth_story": p.growth_story,
                "one_liner": p.one_liner,
                "trademark_note": p.trademark_note,
                "logos": [
                    {"layout": l.layout.value, "mode": l.mode.value, "svg": l.svg.content}
                    for l in p.logos
                ],
            }
            for p in project.patterns
        ],
    }
