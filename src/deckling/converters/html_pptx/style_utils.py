"""
스타일 추출 및 변환 유틸리티

HTML 요소의 인라인 스타일을 TextStyle로 추출하고, PowerPoint 값으로 변환하는
기능을 제공합니다.
"""
import re
from typing import Dict, List, Optional

from bs4 import Comment, NavigableString, Tag
from pptx.dml.color import RGBColor
from pptx.enum.text import PP_ALIGN
from pptx.util import Pt

from ...core.deck import TextStyle

NAMED_COLORS: Dict[str, str] = {
    'black': '000000',
    'white': 'FFFFFF',
    'red': 'FF0000',
    'green': '008000',
    'blue': '0000FF',
    'yellow': 'FFFF00',
    'orange': 'FFA500',
    'purple': '800080',
    'gray': '808080',
    'grey': '808080',
    'navy': '000080',
    'teal': '008080',
}

_COLOR_VALUE = r'(#[a-fA-F0-9]{6}|#[a-fA-F0-9]{3}|rgba?\([^)]+\)|[a-zA-Z]+)'

ALIGNMENTS = {
    'left': PP_ALIGN.LEFT,
    'center': PP_ALIGN.CENTER,
    'right': PP_ALIGN.RIGHT,
    'justify': PP_ALIGN.JUSTIFY,
}


class StyleExtractor:
    """HTML 요소에서 스타일 정보를 추출하는 클래스"""

    @staticmethod
    def parse_declarations(style_attr: str) -> Dict[str, str]:
        """'a: b; c: d' 형식의 style 속성을 딕셔너리로 분해"""
        declarations = {}
        for part in (style_attr or '').split(';'):
            if ':' not in part:
                continue
            name, value = part.split(':', 1)
            declarations[name.strip().lower()] = value.strip()
        return declarations

    @staticmethod
    def parse_color(color_str: str) -> Optional[str]:
        """
        색상 문자열을 'RRGGBB' 16진수 문자열로 변환

        Args:
            color_str: '#rrggbb', '#rgb', 'rgb(r, g, b)', 색상 이름

        Returns:
            'RRGGBB' 문자열 또는 None
        """
        if not color_str:
            return None

        color_str = color_str.strip()

        if color_str.startswith('#'):
            hex_color = color_str[1:]
            if len(hex_color) == 3:
                hex_color = ''.join([c * 2 for c in hex_color])
            if re.fullmatch(r'[a-fA-F0-9]{6}', hex_color):
                return hex_color.upper()
            return None

        if color_str.startswith('rgb'):
            match = re.search(
                r'rgba?\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)',
                color_str
            )
            if match:
                r, g, b = (min(int(match.group(i)), 255) for i in (1, 2, 3))
                return '%02X%02X%02X' % (r, g, b)
            return None

        return NAMED_COLORS.get(color_str.lower())

    @staticmethod
    def parse_font_size(size_str: str) -> Optional[float]:
        """'24px', '18pt', '1.5em' 형식의 글꼴 크기를 pt로 변환"""
        if not size_str:
            return None
        match = re.fullmatch(r'\s*(\d+(?:\.\d+)?)\s*(px|pt|em|rem)?\s*', size_str)
        if not match:
            return None
        value = float(match.group(1))
        unit = match.group(2) or 'px'
        if unit == 'px':
            return round(value * 0.75, 1)
        if unit in ('em', 'rem'):
            return round(value * 12, 1)
        return value

    @staticmethod
    def extract_text_style(elem: Tag, inherited: TextStyle = None) -> TextStyle:
        """
        요소의 인라인 스타일과 태그로 TextStyle 생성

        Args:
            elem: BeautifulSoup Tag 객체
            inherited: 상위 컨테이너에서 물려받은 스타일

        Returns:
            TextStyle
        """
        base = inherited or TextStyle()
        decl = StyleExtractor.parse_declarations(elem.get('style', ''))

        color = StyleExtractor.parse_color(decl.get('color', '')) or base.color

        background = None
        bg_value = decl.get('background-color') or decl.get('background')
        if bg_value:
            match = re.search(_COLOR_VALUE, bg_value)
            if match:
                background = StyleExtractor.parse_color(match.group(1))

        bold = base.bold
        weight = decl.get('font-weight')
        if weight:
            bold = weight in ('bold', 'bolder', '600', '700', '800', '900')
        elif elem.name in ('b', 'strong'):
            bold = True
        else:
            children = [c for c in elem.children if not (isinstance(c, NavigableString) and not c.strip())]
            if len(children) == 1 and getattr(children[0], 'name', None) in ('b', 'strong'):
                bold = True

        italic = base.italic
        font_style = decl.get('font-style')
        if font_style:
            italic = font_style in ('italic', 'oblique')
        elif elem.name in ('i', 'em'):
            italic = True

        font_size = StyleExtractor.parse_font_size(decl.get('font-size', '')) or base.font_size

        align = decl.get('text-align', '').lower() or base.align
        if align not in ALIGNMENTS:
            align = None

        return TextStyle(
            color=color,
            background=background,
            bold=bold,
            italic=italic,
            font_size=font_size,
            align=align,
        )

    @staticmethod
    def extract_background(elem: Tag) -> Optional[str]:
        """요소의 배경색 추출"""
        if elem is None:
            return None
        decl = StyleExtractor.parse_declarations(elem.get('style', ''))
        bg_value = decl.get('background-color') or decl.get('background')
        if not bg_value:
            return None
        match = re.search(_COLOR_VALUE, bg_value)
        return StyleExtractor.parse_color(match.group(1)) if match else None

    @staticmethod
    def extract_column_widths(cells: List[Tag]) -> List[Optional[int]]:
        """
        HTML 테이블 셀에서 width 속성 추출

        Args:
            cells: BeautifulSoup Tag 리스트

        Returns:
            각 셀의 너비 리스트 (픽셀 단위, None이면 지정되지 않음)
        """
        widths = []
        for cell in cells:
            width = None

            style = cell.get('style', '')
            if 'width:' in style:
                match = re.search(r'(?<![-\w])width:\s*(\d+)(?:px|%)?', style)
                if match:
                    width = int(match.group(1))

            elif cell.get('width'):
                try:
                    width = int(cell.get('width').replace('px', '').replace('%', ''))
                except ValueError:
                    pass

            widths.append(width)

        return widths


class PptxStyle:
    """TextStyle 값을 python-pptx 값으로 변환"""

    @staticmethod
    def rgb(hex_color: Optional[str]) -> Optional[RGBColor]:
        return RGBColor.from_string(hex_color) if hex_color else None

    @staticmethod
    def alignment(align: Optional[str]):
        return ALIGNMENTS.get(align) if align else None

    @staticmethod
    def font_size(style: TextStyle, default: int) -> int:
        return Pt(style.font_size) if style.font_size else default


class TextUtils:
    """텍스트 처리 유틸리티"""

    @staticmethod
    def clean_text(text: str) -> str:
        """
        텍스트 정리 (불필요한 공백 제거)

        Args:
            text: 원본 텍스트

        Returns:
            정리된 텍스트
        """
        if not text:
            return ""
        text = re.sub(r'\s+', ' ', text)
        return text.strip()

    @staticmethod
    def extract_text_with_breaks(elem: Tag) -> str:
        """<br>은 줄바꿈으로 유지하고 나머지 공백은 정리해 텍스트 추출"""
        parts = []
        for node in elem.descendants:
            if isinstance(node, NavigableString):
                if isinstance(node, Comment) or (node.parent is not None and node.parent.name in ('script', 'style')):
                    continue
                parts.append(str(node))
            elif node.name == 'br':
                parts.append('\n')
        lines = ''.join(parts).split('\n')
        return '\n'.join(TextUtils.clean_text(line) for line in lines).strip()

    @staticmethod
    def extract_cell_text_with_formatting(cell_elem) -> str:
        """
        HTML 셀에서 bullet, linebreak를 유지하며 텍스트 추출

        Args:
            cell_elem: BeautifulSoup Tag 객체 (td 또는 th)

        Returns:
            포맷팅이 유지된 텍스트
        """
        if not cell_elem:
            return ""

        result_parts = []

        def process_element(elem):
            if isinstance(elem, NavigableString):
                text = str(elem).strip()
                if text:
                    result_parts.append(text)
                return

            tag_name = getattr(elem, 'name', None)

            if tag_name == 'br':
                result_parts.append('\n')
            elif tag_name == 'ul':
                for li in elem.find_all('li', recursive=False):
                    result_parts.append('\n• ')
                    for child in li.children:
                        process_element(child)
            elif tag_name == 'ol':
                for idx, li in enumerate(elem.find_all('li', recursive=False), 1):
                    result_parts.append(f'\n{idx}. ')
                    for child in li.children:
                        process_element(child)
            elif tag_name in ('p', 'div'):
                for child in elem.children:
                    process_element(child)
                if result_parts and not result_parts[-1].endswith('\n'):
                    result_parts.append('\n')
            elif hasattr(elem, 'children'):
                for child in elem.children:
                    process_element(child)

        for child in cell_elem.children:
            process_element(child)

        text = ' '.join(result_parts)
        text = re.sub(r' *\n *', '\n', text)
        text = re.sub(r'\n\s*\n', '\n', text)
        text = re.sub(r'[ \t]+', ' ', text)
        return text.strip()
