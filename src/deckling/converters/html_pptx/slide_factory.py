"""
Slide rendering module

Renders an immutable SlideSpec onto a blank python-pptx slide using a simple
top-to-bottom flow layout inside the configured margins.
"""
import logging
import math
from io import BytesIO
from typing import Any

from pptx import Presentation
from pptx.enum.text import MSO_ANCHOR
from pptx.util import Inches, Pt

from ...core.deck import ImageBlock, ListBlock, SlideSpec, TableBlock, TextBlock, TextStyle
from .config import (
    SlideConfig,
    TextConfig,
    TableConfig,
    ColorPalette,
    DEFAULT_SLIDE_CONFIG,
    DEFAULT_TEXT_CONFIG,
    DEFAULT_COLORS,
)
from .style_utils import PptxStyle
from .table_builder import TableBuilder

logger = logging.getLogger(__name__)

BLANK_LAYOUT_INDEX = 6


class SlideFactory:
    """Base class for builders that add slides to a presentation"""

    def __init__(
        self,
        presentation: Presentation,
        slide_config: SlideConfig = None,
        colors: ColorPalette = None
    ):
        self.prs = presentation
        self.config = slide_config or DEFAULT_SLIDE_CONFIG
        self.colors = colors or DEFAULT_COLORS

    def _get_blank_slide(self):
        """Create blank layout slide"""
        return self.prs.slides.add_slide(self.prs.slide_layouts[BLANK_LAYOUT_INDEX])

    def _set_background(self, slide, hex_color: str) -> None:
        fill = slide.background.fill
        fill.solid()
        fill.fore_color.rgb = PptxStyle.rgb(hex_color)


class SlideRenderer(SlideFactory):
    """Renders SlideSpec values as slides"""

    def __init__(
        self,
        presentation: Presentation,
        slide_config: SlideConfig = None,
        colors: ColorPalette = None,
        text_config: TextConfig = None,
        table_config: TableConfig = None
    ):
        super().__init__(presentation, slide_config, colors)
        self.text_config = text_config or DEFAULT_TEXT_CONFIG
        self.table_builder = TableBuilder(table_config=table_config, colors=self.colors)

    def render(self, spec: SlideSpec) -> Any:
        """
        Render one SlideSpec as a new slide appended to the presentation

        Args:
            spec: slide description

        Returns:
            the created python-pptx slide
        """
        slide = self._get_blank_slide()

        if spec.background:
            self._set_background(slide, spec.background)

        top = self.config.margin_top
        for element in spec.elements:
            if isinstance(element, TextBlock):
                top = self._add_text_block(slide, element, top)
            elif isinstance(element, ListBlock):
                top = self._add_list_block(slide, element, top)
            elif isinstance(element, TableBlock):
                top = self._add_table_block(slide, element, top)
            elif isinstance(element, ImageBlock):
                top = self._add_image_block(slide, element, top)
            else:
                raise TypeError(f"Unsupported slide element: {type(element).__name__}")
            top += self.config.element_gap

        if top - self.config.element_gap > self.config.content_bottom:
            logger.warning(
                f"Content overflows the slide bottom by "
                f"{(top - self.config.element_gap - self.config.content_bottom) / 914400:.2f} in: "
                f"{spec.source}"
            )

        if spec.notes:
            slide.notes_slide.notes_text_frame.text = spec.notes

        return slide

    def _estimate_text_height(self, text: str, font_size: int, width: int) -> int:
        """Rough text height estimate (average glyph width ~0.5em)"""
        font_pt = font_size / 12700
        chars_per_line = max(int(width / 12700 / (font_pt * 0.5)), 1)
        lines = sum(
            max(math.ceil(len(line) / chars_per_line), 1)
            for line in text.split('\n')
        )
        return Pt(font_pt * self.text_config.line_spacing * 1.2 * lines) + Inches(0.1)

    def _apply_font(self, paragraph, style: TextStyle, font_size: int, bold: bool, color) -> None:
        font = paragraph.font
        font.name = self.text_config.font_name
        font.size = font_size
        font.bold = bold or style.bold
        font.italic = style.italic
        font.color.rgb = PptxStyle.rgb(style.color) or color
        alignment = PptxStyle.alignment(style.align)
        if alignment is not None:
            paragraph.alignment = alignment
        paragraph.line_spacing = self.text_config.line_spacing

    def _new_textbox(self, slide, top: int, height: int, style: TextStyle):
        box = slide.shapes.add_textbox(
            self.config.margin_left, top,
            self.config.content_width, height
        )
        if style.background:
            box.fill.solid()
            box.fill.fore_color.rgb = PptxStyle.rgb(style.background)
        frame = box.text_frame
        frame.word_wrap = True
        frame.vertical_anchor = MSO_ANCHOR.TOP
        return frame

    def _add_text_block(self, slide, block: TextBlock, top: int) -> int:
        if block.is_heading:
            default_size = self.text_config.heading_font_size(block.level)
            color = self.colors['heading']
        else:
            default_size = self.text_config.body_font_size
            color = self.colors['text']
        font_size = PptxStyle.font_size(block.style, default_size)

        height = self._estimate_text_height(block.text, font_size, self.config.content_width)
        frame = self._new_textbox(slide, top, height, block.style)

        lines = block.text.split('\n')
        frame.text = lines[0]
        for line in lines[1:]:
            frame.add_paragraph().text = line
        for paragraph in frame.paragraphs:
            self._apply_font(paragraph, block.style, font_size, block.is_heading, color)

        return top + height

    def _add_list_block(self, slide, block: ListBlock, top: int) -> int:
        font_size = PptxStyle.font_size(block.style, self.text_config.list_font_size)
        labels = [
            f"{idx}. {item}" if block.ordered else f"• {item}"
            for idx, item in enumerate(block.items, 1)
        ]

        height = self._estimate_text_height('\n'.join(labels), font_size, self.config.content_width)
        frame = self._new_textbox(slide, top, height, block.style)

        frame.text = labels[0]
        for label in labels[1:]:
            frame.add_paragraph().text = label
        for paragraph in frame.paragraphs:
            self._apply_font(paragraph, block.style, font_size, False, self.colors['text'])
            paragraph.space_after = Pt(4)

        return top + height

    def _add_table_block(self, slide, block: TableBlock, top: int) -> int:
        available = max(self.config.content_bottom - top, self.config.element_gap)
        height = min(self.table_builder.estimate_height(block), available)
        self.table_builder.create_table(
            slide, block,
            self.config.margin_left, top,
            self.config.content_width, height
        )
        return top + height

    def _add_image_block(self, slide, block: ImageBlock, top: int) -> int:
        available_width = self.config.content_width
        available_height = max(self.config.content_bottom - top, Inches(1))

        # Never upscale beyond 96 dpi natural size
        natural_width = Inches(block.width / 96)
        natural_height = Inches(block.height / 96)
        scale = min(
            available_width / natural_width,
            available_height / natural_height,
            1.0
        )
        final_width = int(natural_width * scale)
        final_height = int(natural_height * scale)

        img_left = self.config.margin_left + (available_width - final_width) // 2

        slide.shapes.add_picture(
            BytesIO(block.data),
            img_left, top,
            final_width, final_height
        )
        logger.debug(f"Image placed ({block.width}x{block.height}px, scale {scale:.2f})")
        return top + final_height
