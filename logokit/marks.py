"""
marks.py — Load logo marks from the bundled SVG templates.

Each template under logokit/templates/<id>.svg is a full SVG document for
previewing in an editor; only the fragment between the marker comments
is used by the composer:

    <!-- logokit:mark:start -->
    ...paths drawn in a 384×384 box with fill="currentColor"...
    <!-- logokit:mark:end -->
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from .errors import MarkTemplateError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

MARK_START = "<!-- logokit:mark:start -->"
MARK_END = "<!-- logokit:mark:end -->"


def extract_mark(svg_text: str, source: str = "<template>") -> str:
    start = svg_text.find(MARK_START)
    end = svg_text.find(MARK_END, start + len(MARK_START)) if start != -1 else -1
    if start == -1 or end == -1:
        raise MarkTemplateError(f"Mark markers not found in {source}")
    return svg_text[start + len(MARK_START):end].strip()


@lru_cache(maxsize=32)
def _load_cached(template_id: str, templates_dir: str) -> str:
    path = Path(templates_dir) / f"{template_id}.svg"
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MarkTemplateError(f"Mark template '{template_id}' unreadable: {path}") from exc
    mark = extract_mark(text, source=path.name)
    logger.debug(f"Loaded mark '{template_id}' ({len(mark)} chars)")
    return mark


def load_mark(template_id: str, templates_dir: Optional[Union[str, Path]] = None) -> str:
    """
    Return the inner SVG fragment for a mark template.

    Raises:
        MarkTemplateError: file missing or markers absent.
    """
    directory = Path(templates_dir) if templates_dir else TEMPLATES_DIR
    return _load_cached(template_id, str(directory.resolve()))
