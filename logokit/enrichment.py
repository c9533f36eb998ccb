"""
enrichment.py — Optional LLM rewrite of each pattern's rationale.

The generator's own template text is always complete; enrichment only
replaces GeneratedPattern.reasons when the model returns something
substantial. Nothing is mutated: every step returns a new object, so the
core output stays deterministic and testable offline.

Usage:
    generate_text = gemini_text_generator(settings)   # None without GEMINI_API_KEY
    if generate_text:
        project = enrich_project(project, generate_text)
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from google import genai

from .config import Settings
from .models import BrandInput, BrandPalette, GeneratedLogoProject, GeneratedPattern

logger = logging.getLogger(__name__)

MIN_RATIONALE_LENGTH = 40

TextGenerator = Callable[[str], str]


def build_explain_prompt(brand: BrandInput, pattern: GeneratedPattern, palette: BrandPalette) -> str:
    """Prompt asking the model to explain one pattern's design decisions in markdown."""
    return f"""\
You are a senior brand designer writing the rationale for a logo proposal.

## SERVICE
Name: {brand.service_name}
Description: {brand.service_description}
Mood: {brand.mood.value}
Industry: {brand.industry.value}

## PATTERN {pattern.id.value}: {pattern.title}
{pattern.description}

## PALETTE
primary {palette.primary.hex} · secondary {palette.secondary.hex} · accent {palette.accent.hex}
background {palette.background.hex} · text {palette.text.hex}

Write the rationale in markdown with exactly these sections:
## Pattern {pattern.id.value}: {pattern.title}
### Why this shape
### Why these colours
### How it connects to the service
### Why it lasts
### Note (trademarks / similar logos)

Rules:
- 2–4 short bullet points per section, concrete and specific to this service
- Refer to the hex values above; do not invent new colours
- The trademark note must say the logo was generated automatically and is not legal advice
- Output the markdown only, no preamble"""


def apply_rationale(
    pattern: GeneratedPattern,
    text: Optional[str],
    min_length: int = MIN_RATIONALE_LENGTH,
) -> GeneratedPattern:
    """Return `pattern` unchanged, or a copy whose reasons are replaced by `text`."""
    cleaned = (text or "").strip()
    if len(cleaned) <= min_length:
        return pattern
    return pattern.model_copy(update={"reasons": cleaned})


def enrich_project(project: GeneratedLogoProject, generate_text: TextGenerator) -> GeneratedLogoProject:
    """
    Run `generate_text` once per pattern and swap in usable rationales.

    A failing or empty call keeps that pattern's template rationale.
    """
    brand = project.meta.input
    enriched = []
    for pattern in project.patterns:
        prompt = build_explain_prompt(brand, pattern, pattern.palette)
        try:
            text = generate_text(prompt)
        except Exception as exc:
            logger.warning(f"Rationale enrichment failed for pattern {pattern.id.value}: {exc}")
            enriched.append(pattern)
            continue
        updated = apply_rationale(pattern, text)
        if updated is pattern:
            logger.info(f"Pattern {pattern.id.value}: model text too short — keeping template rationale")
        enriched.append(updated)
    return project.model_copy(update={"patterns": tuple(enriched)})


def gemini_text_generator(settings: Settings) -> Optional[TextGenerator]:
    """google-genai backed text generator, or None when GEMINI_API_KEY is unset."""
    if not settings.ai_available:
        return None
    client = genai.Client(api_key=settings.gemini_api_key)

    def _generate(prompt: str) -> str:
        response = client.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
        )
        return (response.text or "").strip()

    return _generate
