"""
exporter.py — Materialise a GeneratedLogoProject on disk and ZIP it.

Layout under <output_dir>/<slug>/:

  kit/
    meta.json  guideline.md  palette.md  palette.json
    pattern-a/ reasons.md  growth-story.md  one-liner.txt  trademark-note.md
               logos/  <slug>-pattern-a-<layout>-<mode>.{svg,figma.svg,png,jpg}
    pattern-b/ ...
    pattern-c/ ...
    mockups/   <slug>-slide.svg
  <slug>-logo-kit.zip          ← kit/ compressed, paths relative to kit/

Failure split:
  - resetting the old <slug>/ tree is best effort → ResetOutcome, logged
  - every write / render / archive failure        → ExportError (fatal)

PNG renders are transparent. JPEGs get a solid background rect injected
as the first child of <svg> before rendering.
"""

from __future__ import annotations

import io
import json
import logging
import os
import re
import shutil
import zipfile
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, NamedTuple, Optional, Tuple, Union

from PIL import Image

from .catalog import DARK_BACKGROUND
from .color_math import WHITE, normalize_hex
from .config import Settings
from .errors import ExportError
from .models import GeneratedLogoProject, LogoLayout, LogoMode, PatternId
from .palette import palette_json

logger = logging.getLogger(__name__)

JPEG_QUALITY = 92
MOCKUP_FONT = "system-ui, -apple-system, Noto Sans JP, sans-serif"


# ── Result types ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ResetOutcome:
    """Outcome of the best-effort cleanup of a previous export."""
    path: Path
    removed: bool
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ExportResult:
    service_dir: Path
    kit_dir: Path
    zip_path: Path
    reset: ResetOutcome
    file_count: int

    @property
    def zip_filename(self) -> str:
        return self.zip_path.name

    def read_bytes(self) -> bytes:
        return self.zip_path.read_bytes()


# ── Rasterisation ─────────────────────────────────────────────────────────────

RenderFn = Callable[[str, Path], None]


class Rasterizer(NamedTuple):
    png: RenderFn
    jpeg: RenderFn


def _svg_to_png_bytes(svg: str) -> bytes:
    import cairosvg  # needs the native cairo library; only loaded when rendering
    return cairosvg.svg2png(bytestring=svg.encode("utf-8"))


def render_png(svg: str, out_path: Path) -> None:
    """Transparent PNG at the document's own width/height."""
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(_svg_to_png_bytes(svg))


def render_jpeg(svg_with_bg: str, out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with Image.open(io.BytesIO(_svg_to_png_bytes(svg_with_bg))) as img:
        img.convert("RGB").save(str(out_path), "JPEG", quality=JPEG_QUALITY, optimize=True)


DEFAULT_RASTERIZER = Rasterizer(png=render_png, jpeg=render_jpeg)


def background_for_mode(mode: LogoMode, primary_hex: str) -> str:
    if mode == LogoMode.DARK:
        return DARK_BACKGROUND
    if mode == LogoMode.INVERT:
        return normalize_hex(primary_hex) or WHITE
    return WHITE


def inject_background(svg: str, bg_hex: str) -> str:
    """Insert a full-canvas rect as the first child of the root <svg>."""
    bg = normalize_hex(bg_hex) or WHITE
    return re.sub(
        r"<svg([^>]*)>",
        lambda m: f'<svg{m.group(1)}><rect width="100%" height="100%" fill="{bg}"/>',
        svg,
        count=1,
    )


# ── Filesystem helpers ────────────────────────────────────────────────────────

def reset_directory(path: Path) -> ResetOutcome:
    """Delete a previous export. Never raises; failures are logged and reported.

    A symlink or plain file at the path is unlinked, never followed.
    """
    if not os.path.lexists(path):
        return ResetOutcome(path=path, removed=False)
    try:
        if path.is_symlink() or not path.is_dir():
            path.unlink()
        else:
            shutil.rmtree(path)
    except OSError as exc:
        logger.warning(f"Could not reset {path}: {exc} — continuing")
        return ResetOutcome(path=path, removed=False, error=str(exc))
    return ResetOutcome(path=path, removed=True)


def _write_text(path: Path, content: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"Failed to write {path}: {exc}") from exc


def create_zip(source_dir: Path, zip_path: Path) -> int:
    """
    Compress every file under source_dir into zip_path.

    The archive is written to a .part file and renamed once complete, so
    zip_path only ever exists as a finished archive.

    Returns:
        Number of entries written.
    """
    tmp_path = zip_path.with_name(zip_path.name + ".part")
    files = sorted(p for p in source_dir.rglob("*") if p.is_file())
    try:
        zip_path.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(tmp_path, "w", zipfile.ZIP_DEFLATED, compresslevel=9) as zf:
            for p in files:
                zf.write(p, p.relative_to(source_dir).as_posix())
        os.replace(tmp_path, zip_path)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise ExportError(f"ZIP creation failed for {zip_path.name}: {exc}") from exc

    logger.info(f"ZIP created: {zip_path.name} ({zip_path.stat().st_size // 1024} KB, {len(files)} files)")
    return len(files)


# ── Mockup ────────────────────────────────────────────────────────────────────

def build_mockup_svg(project: GeneratedLogoProject) -> Optional[str]:
    """Slide-style sample using pattern A's default horizontal logo."""
    pattern = project.pattern(PatternId.A)
    logo = pattern.find_logo(LogoLayout.HORIZONTAL, LogoMode.DEFAULT) if pattern else None
    if logo is None:
        return None
    return "".join([
        '<svg xmlns="http://www.w3.org/2000/svg" width="1600" height="900" viewBox="0 0 1600 900">',
        '<rect width="1600" height="900" fill="#FFFFFF"/>',
        '<rect x="80" y="70" width="1440" height="760" rx="24" fill="#F3F4F6"/>',
        f'<text x="120" y="190" font-family="{MOCKUP_FONT}" font-size="44" fill="#111827" '
        'font-weight="700">Pitch deck sample</text>',
        '<g transform="translate(120,240) scale(0.85)">',
        inject_background(logo.svg.content, "#F3F4F6"),
        "</g>",
        f'<text x="120" y="720" font-family="{MOCKUP_FONT}" font-size="28" fill="#374151">'
        "Give the logo generous margins; it sits steadily in headers and on cover slides.</text>",
        "</svg>",
    ])


# ── Export ────────────────────────────────────────────────────────────────────

def _run_raster_jobs(jobs: List[Tuple[RenderFn, str, Path]], max_workers: int) -> None:
    """Render every job; waits for all of them, then raises the first failure."""
    failures: List[Tuple[Path, Exception]] = []
    with ThreadPoolExecutor(max_workers=max(1, max_workers)) as executor:
        futures = {executor.submit(fn, svg, path): path for fn, svg, path in jobs}
        for future in as_completed(futures):
            try:
                future.result()
            except Exception as exc:
                failures.append((futures[future], exc))

    if failures:
        failures.sort(key=lambda f: str(f[0]))
        path, exc = failures[0]
        raise ExportError(
            f"Rasterising {path.name} failed ({len(failures)} of {len(jobs)} renders failed): {exc}"
        ) from exc


def export_project_to_disk(
    project: GeneratedLogoProject,
    output_dir: Optional[Union[str, Path]] = None,
    *,
    settings: Optional[Settings] = None,
    rasterizer: Optional[Rasterizer] = None,
) -> ExportResult:
    """
    Write the full kit for `project` and ZIP it.

    Args:
        project:    Output of generate_logo_project()
        output_dir: Base directory (default: settings.output_dir)
        settings:   Runtime settings (default: Settings.from_env())
        rasterizer: PNG/JPEG render functions (default: cairosvg + Pillow)

    Returns:
        ExportResult with the kit directory and the ZIP path.

    Raises:
        ExportError: any write, render or archive failure.
    """
    settings = settings or Settings.from_env()
    rasterizer = rasterizer or DEFAULT_RASTERIZER
    base = Path(output_dir) if output_dir else settings.output_dir
    slug = project.meta.service_slug
    service_dir = base / slug
    kit_dir = service_dir / "kit"

    reset = reset_directory(service_dir)
    try:
        kit_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ExportError(f"Cannot create {kit_dir}: {exc}") from exc

    # ── Project docs ─────────────────────────────────────────────────────────
    _write_text(kit_dir / "meta.json", project.meta.model_dump_json(indent=2))
    _write_text(kit_dir / "guideline.md", project.guideline_markdown)
    _write_text(kit_dir / "palette.md", project.palette_markdown)
    _write_text(kit_dir / "palette.json", palette_json({p.id: p.palette for p in project.patterns}))

    # ── Per-pattern docs + vectors; collect raster jobs ──────────────────────
    jobs: List[Tuple[RenderFn, str, Path]] = []
    for pattern in project.patterns:
        p_dir = kit_dir / f"pattern-{pattern.id.value.lower()}"
        _write_text(p_dir / "reasons.md", pattern.reasons)
        _write_text(p_dir / "growth-story.md", pattern.growth_story)
        _write_text(p_dir / "one-liner.txt", pattern.one_liner + "\n")
        _write_text(p_dir / "trademark-note.md", pattern.trademark_note)

        logo_dir = p_dir / "logos"
        for logo in pattern.logos:
            _write_text(logo_dir / logo.svg.filename, logo.svg.content)
            _write_text(logo_dir / logo.figma_svg.filename, logo.figma_svg.content)
            bg = background_for_mode(logo.mode, pattern.palette.primary.hex)
            jobs.append((rasterizer.png, logo.svg.content, logo_dir / logo.png.filename))
            jobs.append((rasterizer.jpeg, inject_background(logo.svg.content, bg), logo_dir / logo.jpeg.filename))

    mockup = build_mockup_svg(project)
    if mockup:
        _write_text(kit_dir / "mockups" / f"{slug}-slide.svg", mockup)

    logger.info(f"Rendering {len(jobs)} raster files with {settings.raster_workers} worker(s)")
    _run_raster_jobs(jobs, settings.raster_workers)

    # all writes above have completed; safe to archive
    zip_path = service_dir / f"{slug}-logo-kit.zip"
    file_count = create_zip(kit_dir, zip_path)

    return ExportResult(
        service_dir=service_dir,
        kit_dir=kit_dir,
        zip_path=zip_path,
        reset=reset,
        file_count=file_count,
    )


def write_preview_json(preview: dict, out_path: Path) -> Path:
    """Write a project_preview() dict as pretty JSON."""
    _write_text(out_path, json.dumps(preview, indent=2, ensure_ascii=False))
    return out_path
