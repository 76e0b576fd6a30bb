"""
슬라이드 변환기 모듈

HTML 슬라이드를 PowerPoint 덱으로 변환하는 기능을 제공합니다.
"""

from .html_pptx import HtmlSlideConverter, HtmlToPptxConverter, PptxDeckWriter
from .html_pptx.converter import convert_html_to_pptx

__all__ = [
    "HtmlSlideConverter",
    "HtmlToPptxConverter",
    "PptxDeckWriter",
    "convert_html_to_pptx",
]
