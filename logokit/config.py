"""
config.py — Runtime settings read from the environment.

  LOGO_KIT_OUTPUT_DIR      where kits are written (default: <tmp>/logokit-outputs)
  GEMINI_API_KEY           optional, enables rationale enrichment
  LOGO_KIT_GEMINI_MODEL    model used for enrichment (default: gemini-2.5-flash)
  LOGO_KIT_RASTER_WORKERS  parallel PNG/JPEG renders (default: 4)

The CLI calls load_dotenv() before Settings.from_env(), so a local .env works.
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"
DEFAULT_RASTER_WORKERS = 4


def _default_output_dir() -> Path:
    return Path(tempfile.gettempdir()) / "logokit-outputs"


def _parse_workers(raw: Optional[str]) -> int:
    if not raw:
        return DEFAULT_RASTER_WORKERS
    try:
        return max(1, int(raw))
    except ValueError:
        logger.warning(f"LOGO_KIT_RASTER_WORKERS={raw!r} is not an integer — using {DEFAULT_RASTER_WORKERS}")
        return DEFAULT_RASTER_WORKERS


@dataclass(frozen=True)
class Settings:
    output_dir: Path
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_GEMINI_MODEL
    raster_workers: int = DEFAULT_RASTER_WORKERS

    @property
    def ai_available(self) -> bool:
        return bool(self.gemini_api_key)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        out = (env.get("LOGO_KIT_OUTPUT_DIR") or "").strip()
        return cls(
            output_dir=Path(out) if out else _default_output_dir(),
            gemini_api_key=(env.get("GEMINI_API_KEY") or "").strip(),
            gemini_model=(env.get("LOGO_KIT_GEMINI_MODEL") or "").strip() or DEFAULT_GEMINI_MODEL,
            raster_workers=_parse_workers(env.get("LOGO_KIT_RASTER_WORKERS")),
        )
