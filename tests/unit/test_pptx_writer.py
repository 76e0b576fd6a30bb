"""
PptxDeckWriter 테스트
"""
import os
import stat
import sys
from pathlib import Path

import pytest
from pptx import Presentation
from pptx.enum.shapes import MSO_SHAPE_TYPE
from pptx.util import Inches

from deckling.core.deck import (
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
from deckling.core.errors import SlideRenderError
from deckling.converters.html_pptx.writer import PptxDeckWriter


def _texts(slide) -> list:
    return [shape.text_frame.text for shape in slide.shapes if shape.has_text_frame]


class TestPptxDeckWriter:
    """PptxDeckWriter 테스트"""

    @pytest.fixture
    def deck(self):
        deck = Deck(DeckMetadata(
            layout=LayoutPreset.LAYOUT_16x9,
            author="Claude Code",
            title="AI Basics - Understanding AI",
            subject="Intro",
        ))
        deck.append(SlideSpec(
            source=Path("slide1.html"),
            elements=(
                TextBlock(text="AI Basics", level=1, style=TextStyle(align="center")),
                TextBlock(text="line one\nline two"),
            ),
            background="1E3A5F",
            notes="Welcome.",
        ))
        deck.append(SlideSpec(
            source=Path("slide2.html"),
            elements=(
                TextBlock(text="What is AI?", level=1),
                ListBlock(items=("Machine learning", "Deep learning")),
                ListBlock(items=("First", "Second"), ordered=True),
                TableBlock(
                    rows=(("Approach", "Example"), ("Supervised", "Spam filter")),
                    header_count=1,
                ),
            ),
        ))
        return deck

    def test_write_deck(self, deck, temp_dir):
        output_path = temp_dir / "ai-basics.pptx"

        written = PptxDeckWriter().write(deck, output_path)

        assert written == output_path
        prs = Presentation(str(output_path))
        assert len(prs.slides) == 2
        assert prs.slide_width == Inches(10)
        assert prs.slide_height == Inches(5.625)
        assert prs.core_properties.author == "Claude Code"
        assert prs.core_properties.title == "AI Basics - Understanding AI"
        assert prs.core_properties.subject == "Intro"

    def test_slide_content_and_order(self, deck, temp_dir):
        output_path = temp_dir / "deck.pptx"
        PptxDeckWriter().write(deck, output_path)

        first, second = Presentation(str(output_path)).slides

        assert _texts(first) == ["AI Basics", "line one\nline two"]
        assert first.notes_slide.notes_text_frame.text == "Welcome."
        assert str(first.background.fill.fore_color.rgb) == "1E3A5F"

        texts = _texts(second)
        assert texts[0] == "What is AI?"
        assert texts[1] == "• Machine learning\n• Deep learning"
        assert texts[2] == "1. First\n2. Second"
        tables = [shape for shape in second.shapes if shape.has_table]
        assert len(tables) == 1
        assert tables[0].table.cell(1, 1).text == "Spam filter"

    def test_layout_sizes(self, temp_dir):
        deck = Deck(DeckMetadata(layout=LayoutPreset.LAYOUT_4x3))
        deck.append(SlideSpec(source=Path("s.html"), elements=(TextBlock(text="x"),)))
        output_path = temp_dir / "deck.pptx"

        PptxDeckWriter().write(deck, output_path)

        prs = Presentation(str(output_path))
        assert prs.slide_width == Inches(10)
        assert prs.slide_height == Inches(7.5)

    def test_image_is_scaled_into_content_area(self, temp_dir, png_file):
        deck = Deck(DeckMetadata())
        deck.append(SlideSpec(
            source=Path("s.html"),
            elements=(ImageBlock(data=png_file.read_bytes(), format="png", width=40, height=20),),
        ))
        output_path = temp_dir / "deck.pptx"

        PptxDeckWriter().write(deck, output_path)

        slide = Presentation(str(output_path)).slides[0]
        pictures = [shape for shape in slide.shapes if shape.shape_type == MSO_SHAPE_TYPE.PICTURE]
        assert len(pictures) == 1
        assert pictures[0].width == Inches(40 / 96)
        assert pictures[0].height == Inches(20 / 96)

    def test_overwrites_existing_file(self, deck, temp_dir):
        output_path = temp_dir / "deck.pptx"
        output_path.write_bytes(b"old content")

        PptxDeckWriter().write(deck, output_path)
        PptxDeckWriter().write(deck, output_path)

        assert len(Presentation(str(output_path)).slides) == 2
        assert sorted(p.name for p in temp_dir.iterdir()) == ["deck.pptx"]

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX 권한")
    def test_new_file_mode_follows_umask(self, deck, temp_dir):
        output_path = temp_dir / "deck.pptx"
        old_umask = os.umask(0o027)
        try:
            PptxDeckWriter().write(deck, output_path)
        finally:
            os.umask(old_umask)

        assert stat.S_IMODE(output_path.stat().st_mode) == 0o640

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX 권한")
    def test_overwrite_keeps_existing_mode(self, deck, temp_dir):
        output_path = temp_dir / "deck.pptx"
        output_path.write_bytes(b"old content")
        os.chmod(output_path, 0o600)

        PptxDeckWriter().write(deck, output_path)

        assert stat.S_IMODE(output_path.stat().st_mode) == 0o600

    def test_render_error_reports_slide(self, temp_dir):
        deck = Deck(DeckMetadata())
        deck.append(SlideSpec(source=Path("ok.html"), elements=(TextBlock(text="ok"),)))
        deck.append(SlideSpec(source=Path("bad.html"), elements=("not an element",)))

        with pytest.raises(SlideRenderError) as exc_info:
            PptxDeckWriter().write(deck, temp_dir / "deck.pptx")

        assert exc_info.value.index == 1
        assert exc_info.value.source == Path("bad.html")
        assert isinstance(exc_info.value.cause, TypeError)
        assert list(temp_dir.iterdir()) == []

    def test_failed_save_leaves_no_partial_file(self, deck, temp_dir, monkeypatch):
        output_path = temp_dir / "deck.pptx"
        output_path.write_bytes(b"previous deck")

        def failing_save(self, file):
            Path(file).write_bytes(b"partial")
            raise OSError("No space left on device")

        monkeypatch.setattr("pptx.presentation.Presentation.save", failing_save)

        with pytest.raises(OSError, match="No space left"):
            PptxDeckWriter().write(deck, output_path)

        assert output_path.read_bytes() == b"previous deck"
        assert sorted(p.name for p in temp_dir.iterdir()) == ["deck.pptx"]

    def test_missing_parent_directory(self, deck, temp_dir):
        with pytest.raises(OSError):
            PptxDeckWriter().write(deck, temp_dir / "nope" / "deck.pptx")
