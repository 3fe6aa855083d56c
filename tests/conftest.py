"""Test configuration and fixtures for site_image_tools.

This module provides:
- Image fixtures synthesized with Pillow/numpy (no checked-in media)
- Item source/sink fixtures (in-memory and local filesystem)
- A pipeline fixture wired to the built-in steps
"""

from collections.abc import Callable
from io import BytesIO
from pathlib import Path
import numpy as np
import pytest
from PIL import Image, ImageDraw
from typing_extensions import override

from site_image_tools.common.item import (
    ItemSink,
    ItemSource,
    OutputItem,
    SavedItem,
    SourceItem,
)

ImageFactory = Callable[..., bytes]


# ============================================================================
# Image Fixtures
# ============================================================================


def synthesize_image(width: int, height: int, mode: str = "RGB", seed: int = 0) -> Image.Image:
    """Gradient + noise + a few shapes, so codecs have real detail to work on."""
    rng = np.random.default_rng(seed)

    x = np.linspace(0, 255, width, dtype=np.float32)
    y = np.linspace(0, 255, height, dtype=np.float32)
    gradient = np.stack(
        [
            np.tile(x, (height, 1)),
            np.tile(y[:, None], (1, width)),
            np.full((height, width), 128, dtype=np.float32),
        ],
        axis=-1,
    )
    noise = rng.normal(0, 25, size=(height, width, 3))
    pixels = np.clip(gradient + noise, 0, 255).astype(np.uint8)

    img = Image.fromarray(pixels)
    draw = ImageDraw.Draw(img)
    draw.ellipse(
        [width // 4, height // 4, 3 * width // 4, 3 * height // 4],
        fill=(200, 100, 100),
    )
    for i in range(0, width, 25):
        draw.line([(i, 0), (i, height)], fill=(255, 255, 255), width=1)

    if mode == "RGBA":
        alpha = Image.new("L", (width, height), 255)
        ImageDraw.Draw(alpha).rectangle([0, 0, width // 2, height], fill=96)
        img.putalpha(alpha)
    elif mode != "RGB":
        img = img.convert(mode)

    return img


@pytest.fixture
def make_image() -> ImageFactory:
    """Factory returning encoded bytes of a synthetic image."""

    def _make(
        width: int,
        height: int,
        format: str = "PNG",
        mode: str = "RGB",
        **save_kwargs: object,
    ) -> bytes:
        img = synthesize_image(width, height, mode)
        buffer = BytesIO()
        img.save(buffer, format=format, **save_kwargs)
        return buffer.getvalue()

    return _make


@pytest.fixture
def jpeg_bytes(make_image: ImageFactory) -> bytes:
    """A 320x240 JPEG encoded at quality 95."""
    return make_image(320, 240, "JPEG", quality=95)


@pytest.fixture
def png_bytes(make_image: ImageFactory) -> bytes:
    """An 800x600 RGBA PNG."""
    return make_image(800, 600, "PNG", mode="RGBA")


@pytest.fixture
def corrupt_bytes() -> bytes:
    return b"\x89PNG\r\n\x1a\n this is not really an image"


# ============================================================================
# Item Source / Sink Fixtures
# ============================================================================


class InMemoryItemStore(ItemSource, ItemSink):
    """In-memory implementation for testing."""

    def __init__(self):
        self.items: dict[str, bytes] = {}
        self.outputs: dict[str, bytes] = {}

    def add(self, identifier: str, body: bytes) -> None:
        self.items[identifier] = body

    @override
    def read(self, identifier: str) -> SourceItem:
        if identifier not in self.items:
            raise FileNotFoundError(f"Input item not found: {identifier}")
        return SourceItem.from_identifier(identifier, self.items[identifier])

    @override
    def write(self, item: OutputItem) -> SavedItem:
        self.outputs[item.identifier] = item.body
        return SavedItem(relative_path=item.identifier, size=len(item.body))


@pytest.fixture
def memory_store() -> InMemoryItemStore:
    return InMemoryItemStore()


@pytest.fixture
def local_store(tmp_path: Path):
    """Provide a LocalItemStore with empty source and output directories."""
    from site_image_tools.common.item_store_impl import LocalItemStore

    source_dir = tmp_path / "source"
    source_dir.mkdir()
    return LocalItemStore(source_dir=source_dir, output_dir=tmp_path / "output")


@pytest.fixture
def step_registry():
    """Built-in steps, without relying on installed entry points."""
    from site_image_tools.plugins.compress_jpg.task import CompressJpgStep
    from site_image_tools.plugins.image_resize.task import ImageResizeStep, ImageScaleStep

    steps = [ImageResizeStep(), ImageScaleStep(), CompressJpgStep()]
    return {step.step_type: step for step in steps}


@pytest.fixture
def pipeline(memory_store: InMemoryItemStore, step_registry):
    from site_image_tools.pipeline import Pipeline

    return Pipeline(memory_store, memory_store, step_registry=step_registry)
