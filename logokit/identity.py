"""
identity.py — Filesystem-safe slugs and reproducible seeds.

  slugify("Café Ñandú")     → "cafe-nandu"
  slugify("テスト")          → "doya-<10 hex>"   (non-Latin fallback)
  stable_seed({"b": 1, "a": 2}) == stable_seed({"a": 2, "b": 1})
"""

from __future__ import annotations

import hashlib
import json
import re
import time
import unicodedata
from typing import Any, Mapping

SLUG_FALLBACK_PREFIX = "doya"

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """
    ASCII slug for paths and filenames.

    Diacritics are decomposed and dropped; everything outside [a-z0-9]
    collapses to single hyphens. Names with no Latin letters or digits
    fall back to a short sha1 of the name so the slug is never empty.
    """
    raw = str(name or "").strip()
    decomposed = unicodedata.normalize("NFKD", raw)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    slug = _NON_SLUG_RE.sub("-", stripped.lower()).strip("-")
    if slug:
        return slug

    source = raw.lower() or str(int(time.time() * 1000))
    digest = hashlib.sha1(source.encode("utf-8")).hexdigest()[:10]
    return f"{SLUG_FALLBACK_PREFIX}-{digest}"


def stable_seed(data: Mapping[str, Any]) -> str:
    """First 16 hex chars of SHA-256 over key-sorted compact JSON."""
    payload = json.dumps(data, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]
