"""덱 모델 및 오류 테스트"""
from pathlib import Path

import pytest

from deckling.core.deck import (
    Deck,
    DeckMetadata,
    LayoutPreset,
    SlideSpec,
    TableBlock,
    TextBlock,
)
from deckling.core.errors import (
    ConversionFailed,
    NoSlideSources,
    SourceNotFound,
    WriteFailed,
)


class TestLayoutPreset:
    """LayoutPreset 테스트"""

    @pytest.mark.parametrize("value, expected", [
        ("LAYOUT_16x9", LayoutPreset.LAYOUT_16x9),
        ("layout_16x9", LayoutPreset.LAYOUT_16x9),
        ("16:9", LayoutPreset.LAYOUT_16x9),
        ("16x10", LayoutPreset.LAYOUT_16x10),
        ("4:3", LayoutPreset.LAYOUT_4x3),
        ("wide", LayoutPreset.LAYOUT_WIDE),
        (LayoutPreset.LAYOUT_WIDE, LayoutPreset.LAYOUT_WIDE),
    ])
    def test_parse(self, value, expected):
        assert LayoutPreset.parse(value) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown layout preset"):
            LayoutPreset.parse("3:2")

    def test_sizes(self):
        assert LayoutPreset.LAYOUT_16x9.size_inches == (10.0, 5.625)
        assert LayoutPreset.LAYOUT_4x3.height_inches == 7.5
        assert LayoutPreset.LAYOUT_WIDE.width_inches == pytest.approx(13.333)


class TestDeck:
    """Deck 누산기 테스트"""

    def _spec(self, name: str) -> SlideSpec:
        return SlideSpec(source=Path(name), elements=(TextBlock(text=name),))

    def test_append_keeps_order(self):
        deck = Deck(DeckMetadata(author="a", title="t"))
        for name in ("one.html", "two.html", "three.html"):
            deck.append(self._spec(name))

        assert len(deck) == 3
        assert [s.source.name for s in deck.slides] == ["one.html", "two.html", "three.html"]

    def test_slides_is_a_snapshot(self):
        deck = Deck(DeckMetadata())
        deck.append(self._spec("one.html"))
        snapshot = deck.slides
        deck.append(self._spec("two.html"))

        assert isinstance(snapshot, tuple)
        assert len(snapshot) == 1
        assert len(deck.slides) == 2

    def test_slide_spec_is_immutable(self):
        spec = self._spec("one.html")
        with pytest.raises(AttributeError):
            spec.title = "changed"

    def test_default_metadata(self):
        metadata = DeckMetadata()
        assert metadata.layout is LayoutPreset.LAYOUT_16x9
        assert metadata.subject is None

    def test_table_col_count(self):
        table = TableBlock(rows=(("a", "b"), ("c", "d", "e")))
        assert table.col_count == 3
        assert TableBlock(rows=()).col_count == 0


class TestErrors:
    """오류 메시지 및 속성 테스트"""

    def test_source_not_found_message(self):
        error = SourceNotFound(Path("missing.html"), 1)
        assert error.index == 1
        assert "slide 2" in str(error)
        assert "missing.html" in str(error)
        assert error.exit_code == 3

    def test_no_slide_sources_is_source_not_found(self):
        error = NoSlideSources()
        assert isinstance(error, SourceNotFound)
        assert error.path is None
        assert error.kind == "NoSlideSources"

    def test_conversion_failed_keeps_cause(self):
        cause = ValueError("bad markup")
        error = ConversionFailed(Path("s.html"), 0, cause)
        assert error.cause is cause
        assert "bad markup" in str(error)
        assert error.exit_code == 4

    def test_write_failed(self):
        error = WriteFailed(Path("out.pptx"), OSError("disk full"))
        assert error.kind == "WriteFailed"
        assert "disk full" in str(error)
        assert error.exit_code == 5
