"""
HTML to PPTX 렌더링 설정 및 상수

슬라이드 크기, 색상, 여백, 글꼴 크기 등 공통 설정을 관리합니다.
"""
from pptx.util import Inches, Pt
from pptx.dml.color import RGBColor
from dataclasses import dataclass
from typing import Dict

from ...core.deck import LayoutPreset


@dataclass
class SlideConfig:
    """슬라이드 레이아웃 설정"""
    width: int = Inches(10)
    height: int = Inches(5.625)
    margin_left: int = Inches(0.5)
    margin_right: int = Inches(0.5)
    margin_top: int = Inches(0.4)
    margin_bottom: int = Inches(0.4)
    element_gap: int = Inches(0.12)

    @property
    def content_width(self) -> int:
        return self.width - self.margin_left - self.margin_right

    @property
    def content_bottom(self) -> int:
        return self.height - self.margin_bottom

    @classmethod
    def for_layout(cls, layout: LayoutPreset) -> "SlideConfig":
        """레이아웃 프리셋 크기로 설정 생성"""
        width, height = layout.size_inches
        return cls(width=Inches(width), height=Inches(height))


@dataclass
class TextConfig:
    """텍스트 글꼴 설정"""
    font_name: str = "Arial"
    body_font_size: int = Pt(14)
    list_font_size: int = Pt(14)
    line_spacing: float = 1.15

    def heading_font_size(self, level: int) -> int:
        return HEADING_FONT_SIZES.get(level, Pt(14))


HEADING_FONT_SIZES: Dict[int, int] = {
    1: Pt(32),
    2: Pt(24),
    3: Pt(20),
    4: Pt(18),
    5: Pt(16),
    6: Pt(14),
}


@dataclass
class TableConfig:
    """테이블 설정"""
    min_row_height: int = Inches(0.22)
    row_height_estimate: int = Inches(0.3)
    header_font_size: int = Pt(11)
    body_font_size: int = Pt(10)
    small_font_size: int = Pt(8)
    cell_margin: int = Pt(4)
    cell_margin_vertical: int = Pt(2)


@dataclass
class BorderConfig:
    """테두리 설정"""
    thick_line: int = Pt(1.5)
    thin_line: int = Pt(0.5)
    no_line: int = Pt(0)


class ColorPalette:
    """색상 팔레트"""

    def __init__(self):
        self._colors: Dict[str, RGBColor] = {
            'heading': RGBColor(31, 41, 55),         # #1f2937
            'text': RGBColor(55, 65, 81),            # #374151
            'black': RGBColor(0, 0, 0),
            'link_blue': RGBColor(0, 102, 204),
            'gray_line': RGBColor(200, 200, 200),
        }

    def __getitem__(self, key: str) -> RGBColor:
        return self._colors.get(key, self._colors['black'])

    def __contains__(self, key: str) -> bool:
        return key in self._colors


# 기본 설정 인스턴스
DEFAULT_SLIDE_CONFIG = SlideConfig()
DEFAULT_TEXT_CONFIG = TextConfig()
DEFAULT_TABLE_CONFIG = TableConfig()
DEFAULT_BORDER_CONFIG = BorderConfig()
DEFAULT_COLORS = ColorPalette()
