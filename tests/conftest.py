from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import List, Tuple

import pytest

from logokit.config import Settings
from logokit.exporter import Rasterizer
from logokit.generator import generate_logo_project
from logokit.models import BrandInput

FIXED_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def brand() -> BrandInput:
    return BrandInput(
        service_name="Acme Pay",
        service_description="Payroll for small teams",
    )


@pytest.fixture
def japanese_brand() -> BrandInput:
    return BrandInput(service_name="テスト", service_description="説明")


@pytest.fixture
def project(brand):
    return generate_logo_project(brand, created_at=FIXED_TIME)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(output_dir=tmp_path / "out", raster_workers=2)


class FakeRasterizer:
    """Writes placeholder bytes and records what it was asked to render."""

    def __init__(self) -> None:
        self.png_calls: List[Tuple[str, Path]] = []
        self.jpeg_calls: List[Tuple[str, Path]] = []

    def png(self, svg: str, out_path: Path) -> None:
        self.png_calls.append((svg, out_path))
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_bytes(b"\x89PNG fake")

    def jpeg(self, svg: str, out_path: Path) -> None:
        self.jpeg_calls.append((svg, out_path))
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_bytes(b"\xff\xd8 fake")

    def as_rasterizer(self) -> Rasterizer:
        return Rasterizer(png=self.png, jpeg=self.jpeg)


@pytest.fixture
def fake_rasterizer() -> FakeRasterizer:
    return FakeRasterizer()
