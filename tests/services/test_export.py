"""Tests for the export service."""

from __future__ import annotations

import zipfile
from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image

from screenshot_studio.models import OutputSpec, Slide
from screenshot_studio.services import (
    ExportedImage,
    archive_filename,
    export_all,
    export_single,
    save_images,
    slide_filename,
    write_archive,
)

RED = (255, 0, 0)


def _decode(data: bytes) -> Image.Image:
    img = Image.open(BytesIO(data))
    img.load()
    return img


class TestFilenames:
    """Tests for output naming."""

    def test_slide_filename(self):
        assert slide_filename(1, OutputSpec(width=1290, height=2796)) == "screenshot_1_1290x2796.png"

    def test_archive_filename(self):
        assert archive_filename(OutputSpec(width=1080, height=1920)) == "screenshots_1080x1920.zip"


class TestExportAll:
    """Tests for export_all."""

    @pytest.mark.asyncio
    async def test_names_follow_position_not_id(self, solid_style, small_output):
        slides = [Slide(id=7, text="First"), Slide(id=3, text="Second"), Slide(id="x", text="Third")]
        images = await export_all(slides, solid_style, small_output)

        assert [image.filename for image in images] == [
            "screenshot_1_200x400.png",
            "screenshot_2_200x400.png",
            "screenshot_3_200x400.png",
        ]

    @pytest.mark.asyncio
    async def test_every_image_is_rgb_at_output_size(self, solid_style, small_output):
        images = await export_all([Slide(text="A"), Slide(text="B")], solid_style, small_output)
        for image in images:
            decoded = _decode(image.data)
            assert decoded.format == "PNG"
            assert decoded.mode == "RGB"
            assert decoded.size == (200, 400)

    @pytest.mark.asyncio
    async def test_outputs_follow_input_order(self, solid_style, small_output, make_png):
        """Only the second slide has an image; its output is the second file."""
        slides = [Slide(text="A"), Slide(text="B", image=make_png((10, 10), RED)), Slide(text="C")]
        images = await export_all(slides, solid_style, small_output)

        bottoms = [_decode(image.data).getpixel((100, 399)) for image in images]
        assert bottoms[1] == RED
        assert bottoms[0] != RED and bottoms[2] != RED

    @pytest.mark.asyncio
    async def test_broken_image_does_not_affect_siblings(self, solid_style, small_output, make_png):
        slides = [
            Slide(text="A", image=make_png((10, 10), RED)),
            Slide(text="B", image=b"not an image"),
            Slide(text="C", image=make_png((10, 10), RED)),
        ]
        images = await export_all(slides, solid_style, small_output)

        assert len(images) == 3
        assert _decode(images[0].data).getpixel((100, 399)) == RED
        assert _decode(images[1].data).getpixel((100, 399)) == (242, 139, 130)
        assert _decode(images[2].data).getpixel((100, 399)) == RED

    @pytest.mark.asyncio
    async def test_empty_collection(self, solid_style, small_output):
        assert await export_all([], solid_style, small_output) == []


class TestExportSingle:
    """Tests for export_single."""

    @pytest.mark.asyncio
    async def test_filename_uses_position(self, solid_style, small_output):
        slides = [Slide(text="A"), Slide(text="B")]
        image = await export_single(slides, 1, solid_style, small_output)
        assert image.filename == "screenshot_2_200x400.png"
        assert _decode(image.data).size == (200, 400)

    @pytest.mark.asyncio
    async def test_matches_batch_output(self, solid_style, small_output):
        slides = [Slide(text="Big Sale Today", word_colors={1: "#000000"})]
        single = await export_single(slides, 0, solid_style, small_output)
        (batch,) = await export_all(slides, solid_style, small_output)
        assert single.filename == batch.filename
        assert list(_decode(single.data).getdata()) == list(_decode(batch.data).getdata())

    @pytest.mark.asyncio
    async def test_bad_index(self, solid_style, small_output):
        with pytest.raises(IndexError):
            await export_single([Slide()], 1, solid_style, small_output)


class TestSaving:
    """Tests for archive and directory output."""

    @pytest.fixture
    def images(self) -> list[ExportedImage]:
        return [
            ExportedImage("screenshot_1_200x400.png", b"first"),
            ExportedImage("screenshot_2_200x400.png", b"second"),
        ]

    def test_size_bytes(self, images):
        assert images[1].size_bytes == 6

    def test_write_archive(self, images, tmp_path: Path):
        path = write_archive(images, tmp_path / "nested" / "screenshots_200x400.zip")

        with zipfile.ZipFile(path) as archive:
            assert archive.namelist() == ["screenshot_1_200x400.png", "screenshot_2_200x400.png"]
            assert archive.read("screenshot_2_200x400.png") == b"second"

    def test_save_images(self, images, tmp_path: Path):
        paths = save_images(images, tmp_path / "out")
        assert [p.name for p in paths] == ["screenshot_1_200x400.png", "screenshot_2_200x400.png"]
        assert paths[0].read_bytes() == b"first"
