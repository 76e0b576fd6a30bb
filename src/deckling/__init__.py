"""
deckling - HTML 슬라이드 덱 조립 도구

순서가 있는 HTML 슬라이드 파일들을 PowerPoint(.pptx) 덱 하나로 조립합니다.
"""

__version__ = "0.1.0"

from .core.deck import AssemblyResult, Deck, DeckMetadata, LayoutPreset, SlideSpec
from .core.assembler import DeckAssembler
from .core.errors import (
    DeckError,
    ConfigError,
    SourceNotFound,
    NoSlideSources,
    ConversionFailed,
    WriteFailed,
)
from .config import DeckConfig
from .converters import HtmlToPptxConverter, convert_html_to_pptx

__all__ = [
    "AssemblyResult",
    "Deck",
    "DeckMetadata",
    "LayoutPreset",
    "SlideSpec",
    "DeckAssembler",
    "DeckError",
    "ConfigError",
    "SourceNotFound",
    "NoSlideSources",
    "ConversionFailed",
    "WriteFailed",
    "DeckConfig",
    "HtmlToPptxConverter",
    "convert_html_to_pptx",
]
