"""
logokit — Logo Kit Generator CLI

Usage:
  python -m logokit.main --name "Acme" --description "Payroll for small teams"
  python -m logokit.main --name "Acme" --description "..." --industry fintech --mood startup
  python -m logokit.main --name "Acme" --description "..." --format json --json-out acme.json
  python -m logokit.main --name "Acme" --description "..." --main-color "#0F766E" --ai
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.rule import Rule

from .config import Settings
from .enrichment import enrich_project, gemini_text_generator
from .errors import LogoKitError
from .exporter import ExportResult, export_project_to_disk, write_preview_json
from .generator import generate_logo_project, project_preview
from .models import BrandInput, Industry, Mood
from .palette import generate_palette_set

console = Console(stderr=True)
logger = logging.getLogger("logokit")


# ── CLI ───────────────────────────────────────────────────────────────────────

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Logo Kit Generator — 3 palettes, 24 logos, guidelines, one ZIP"
    )
    parser.add_argument("--name", required=True, help="Service name (wordmark), 1–60 chars")
    parser.add_argument("--description", required=True, help="Service description, 1–400 chars")
    parser.add_argument(
        "--mood",
        choices=[m.value for m in Mood],
        default=Mood.JAPANESE_MODERN.value,
    )
    parser.add_argument(
        "--industry",
        choices=[i.value for i in Industry],
        default=Industry.SAAS.value,
    )
    parser.add_argument("--main-color", default=None, help="Primary colour hex (optional)")
    parser.add_argument("--sub-color", default=None, help="Secondary colour hex (optional)")
    parser.add_argument(
        "--format",
        choices=["zip", "json"],
        default="zip",
        help="zip = render + archive on disk; json = vector-only preview",
    )
    parser.add_argument(
        "--ai",
        action="store_true",
        help="Rewrite each pattern's rationale with Gemini (needs GEMINI_API_KEY)",
    )
    parser.add_argument("--output", default=None, help="Output base directory (default: LOGO_KIT_OUTPUT_DIR)")
    parser.add_argument("--json-out", default=None, help="File for --format json (default: stdout)")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


# ── Pipeline ──────────────────────────────────────────────────────────────────

def run(
    brand: BrandInput,
    settings: Settings,
    return_mode: str = "zip",
    use_ai: bool = False,
    output_dir: Optional[Path] = None,
) -> Union[dict, ExportResult]:
    """
    Generate a kit and return either the JSON preview or the export result.

    Raises:
        LogoKitError: mark template or export failure.
    """
    palettes = generate_palette_set(brand)
    project = generate_logo_project(brand, palettes)
    console.print(
        f"  [green]✓[/green] {len(project.patterns)} patterns, {project.logo_count()} logos "
        f"[dim](slug={project.meta.service_slug} seed={project.meta.seed})[/dim]"
    )

    if use_ai:
        generate_text = gemini_text_generator(settings)
        if generate_text is None:
            console.print("  [yellow]⚠ --ai requested but GEMINI_API_KEY is not set — using template rationale[/yellow]")
        else:
            console.print("  [cyan]→ Enriching rationale with Gemini...[/cyan]")
            project = enrich_project(project, generate_text)

    if return_mode == "json":
        return project_preview(project)

    console.print("  [cyan]→ Rendering PNG/JPEG and packaging ZIP...[/cyan]")
    return export_project_to_disk(project, output_dir, settings=settings)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    _setup_logging(args.verbose)
    settings = Settings.from_env()

    console.print(Rule("[bold magenta]Logo Kit Generator[/bold magenta]"))

    try:
        brand = BrandInput(
            service_name=args.name,
            service_description=args.description,
            mood=args.mood,
            industry=args.industry,
            main_color=args.main_color,
            sub_color=args.sub_color,
        )
    except ValidationError as exc:
        console.print(f"[bold red]Invalid input:[/bold red] {exc.error_count()} problem(s)")
        for err in exc.errors():
            field = ".".join(str(p) for p in err["loc"])
            console.print(f"  • {field}: {err['msg']}")
        return 1

    t0 = time.time()
    try:
        result = run(
            brand,
            settings,
            return_mode=args.format,
            use_ai=args.ai,
            output_dir=Path(args.output) if args.output else None,
        )
    except LogoKitError as exc:
        logger.debug("Generation failed", exc_info=True)
        console.print(f"[bold red]Generation failed:[/bold red] {exc}")
        return 1

    if isinstance(result, dict):
        if args.json_out:
            try:
                path = write_preview_json(result, Path(args.json_out))
            except LogoKitError as exc:
                console.print(f"[bold red]Could not write JSON:[/bold red] {exc}")
                return 1
            console.print(f"  [green]✓[/green] Preview written to [bold]{path}[/bold]")
        else:
            sys.stdout.write(json.dumps(result, indent=2, ensure_ascii=False) + "\n")
        return 0

    reset_note = "" if result.reset.ok else f"\n[yellow]Previous output not fully removed: {result.reset.error}[/yellow]"
    console.print(
        Panel(
            f"{result.file_count} file(s) packaged in [bold]{time.time() - t0:.1f}s[/bold]\n"
            f"Kit: [bold]{result.kit_dir}[/bold]\n"
            f"ZIP: [bold]{result.zip_path}[/bold]" + reset_note,
            title="[bold green]Logo Kit Ready[/bold green]",
            border_style="green",
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
