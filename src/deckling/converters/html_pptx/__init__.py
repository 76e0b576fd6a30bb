"""
HTML to PPTX 변환 모듈

HTML 슬라이드를 SlideSpec으로 파싱하고 PowerPoint 슬라이드로 렌더링하는 기능을 제공합니다.
"""
from .parser import HtmlSlideConverter
from .writer import PptxDeckWriter
from .converter import HtmlToPptxConverter

__all__ = ['HtmlSlideConverter', 'PptxDeckWriter', 'HtmlToPptxConverter']
