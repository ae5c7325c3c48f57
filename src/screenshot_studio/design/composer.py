"""Slide compositor: renders a Slide to an exact-size raster with Pillow."""

from __future__ import annotations

import logging
from io import BytesIO

from PIL import Image, ImageDraw

from ..colors import hex_to_rgb
from ..constants import IMAGE_GAP_RATIO
from ..errors import ImageDecodeError
from ..models import OutputSpec, Slide, Style
from .background import paint_background
from .fonts import FontResolver, stroke_width_for
from .geometry import Rect
from .images import decode_image, draw_cover
from .layout import TextLayout, layout_text

_logger = logging.getLogger("compositor")


class SlideCompositor:
    """Compose store screenshots using Pillow.

    Renders, in this order, onto one output surface:
    - The background (solid or angled gradient) over the whole output
    - The caption, word-wrapped and centered at the top, word by word
      in each word's color
    - The slide image, cover-fit into the space left below the caption

    Every size is a fraction of the output, so the same slide renders with
    identical proportions at preview and export resolution.

    Usage:
        compositor = SlideCompositor(style, OutputSpec.from_preset('iPhone 6.7"'))

        image = await compositor.render(slide)
        png = await compositor.render_png(slide)
    """

    def __init__(
        self,
        style: Style,
        output: OutputSpec,
        fonts: FontResolver | None = None,
    ):
        """Initialize the compositor.

        Args:
            style: Text and background style shared by all slides.
            output: Exact output size.
            fonts: Font resolver; a default one is created when omitted.
        """
        self.style = style
        self.output = output
        self.fonts = fonts or FontResolver()

        self.font_px = style.font_px(output.height)
        self.font = self.fonts.get(style.font_weight, self.font_px)
        self.stroke_width = stroke_width_for(style.font_weight, self.font_px)
        self.space_width = self.font.getlength(" ")

    @property
    def output_rect(self) -> Rect:
        return Rect(0, 0, self.output.width, self.output.height)

    def measure(self, word: str) -> float:
        """Pixel width of a word in the caption font.

        Includes the stroke on both sides, so extra bold words wrap and
        center by the width they are drawn at.
        """
        return self.font.getlength(word) + 2 * self.stroke_width

    def layout(self, slide: Slide) -> TextLayout:
        """Lay out the slide caption without drawing it."""
        return layout_text(
            slide.text,
            slide.word_colors,
            self.style.text_color,
            self.output,
            self.measure,
            self.space_width,
            self.font_px,
        )

    def image_rect(self, text_bottom: float) -> Rect:
        """Area below the caption reserved for the slide image.

        The top edge is snapped to a whole pixel and the height clamped at
        zero when the caption already fills the output.
        """
        top = round(text_bottom + self.output.height * IMAGE_GAP_RATIO)
        height = max(0, self.output.height - top)
        return Rect(0, min(top, self.output.height), self.output.width, height)

    def _draw_text(self, draw: ImageDraw.ImageDraw, layout: TextLayout) -> None:
        """Draw each word at its laid-out position in its own color."""
        for word in layout.words:
            fill = hex_to_rgb(word.color)
            draw.text(
                (word.x + self.stroke_width, word.y),
                word.word,
                font=self.font,
                fill=fill,
                anchor="la",
                stroke_width=self.stroke_width,
                stroke_fill=fill,
            )

    async def render(self, slide: Slide) -> Image.Image:
        """Render one slide.

        Background and text are drawn synchronously; the image decode is
        the only await. A slide image that fails to decode is skipped and
        the slide keeps its background there.

        Args:
            slide: Slide to render. It is not modified.

        Returns:
            RGB image of exactly output.width x output.height pixels.
        """
        surface = Image.new("RGB", self.output.size)

        # Background
        paint_background(surface, self.output_rect, self.style.background)

        # Caption
        layout = self.layout(slide)
        self._draw_text(ImageDraw.Draw(surface), layout)

        # Image below the caption
        area = self.image_rect(layout.bottom)
        if slide.image is None:
            return surface
        if area.is_empty:
            _logger.debug(f"Slide {slide.id}: caption fills the output, image skipped")
            return surface

        try:
            image = await decode_image(slide.image)
        except ImageDecodeError as e:
            _logger.warning(f"Slide {slide.id}: {e}; rendering without image")
            return surface

        with image:
            draw_cover(surface, image, area)
        return surface

    async def render_png(self, slide: Slide) -> bytes:
        """Render one slide and encode it as a lossless RGB PNG."""
        surface = await self.render(slide)
        output = BytesIO()
        surface.save(output, format="PNG")
        return output.getvalue()


async def compose_slide(
    slide: Slide,
    style: Style,
    output: OutputSpec,
    fonts: FontResolver | None = None,
) -> Image.Image:
    """Render a single slide with a throwaway compositor."""
    return await SlideCompositor(style, output, fonts).render(slide)
