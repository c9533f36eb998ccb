"""
errors.py — Exception hierarchy for logokit.

Input problems never surface here: bad hex values and unknown industries
resolve to defaults inside the core. What remains is fatal.
"""

from __future__ import annotations


class LogoKitError(Exception):
    """Base class for every fatal logokit failure."""


class MarkTemplateError(LogoKitError):
    """A mark template is missing or lacks its start/end markers (deployment defect)."""


class ExportError(LogoKitError):
    """Writing, rasterising or archiving the kit failed."""
