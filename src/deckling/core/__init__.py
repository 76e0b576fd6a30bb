"""Core module"""
from .deck import (
    AssemblyResult,
    Deck,
    DeckMetadata,
    ImageBlock,
    LayoutPreset,
    ListBlock,
    SlideSpec,
    TableBlock,
    TextBlock,
    TextStyle,
)
from .converter import BaseSlideConverter
from .writer import BaseDeckWriter
from .assembler import DeckAssembler
from .errors import (
    DeckError,
    ConfigError,
    SourceNotFound,
    NoSlideSources,
    ConversionFailed,
    WriteFailed,
    SlideRenderError,
)

__all__ = [
    "AssemblyResult",
    "Deck",
    "DeckMetadata",
    "ImageBlock",
    "LayoutPreset",
    "ListBlock",
    "SlideSpec",
    "TableBlock",
    "TextBlock",
    "TextStyle",
    "BaseSlideConverter",
    "BaseDeckWriter",
    "DeckAssembler",
    "DeckError",
    "ConfigError",
    "SourceNotFound",
    "NoSlideSources",
    "ConversionFailed",
    "WriteFailed",
    "SlideRenderError",
]
