"""
HTML to PPTX converter 테스트 (HTML 파일 -> .pptx 전체 흐름)
"""
import shutil
from pathlib import Path

import pytest
from pptx import Presentation
from pptx.util import Inches

from deckling.converters import HtmlToPptxConverter, convert_html_to_pptx
from deckling.core.deck import LayoutPreset
from deckling.core.errors import ConversionFailed, SourceNotFound

SAMPLE_DIR = Path(__file__).parent.parent.parent / "scripts" / "ai_basics"


class TestHtmlToPptxConverter:
    """HtmlToPptxConverter 테스트"""

    @pytest.fixture
    def sample_slides(self, temp_dir):
        """샘플 HTML 슬라이드 복사"""
        paths = []
        for name in ("slide1.html", "slide2.html"):
            target = temp_dir / name
            shutil.copy(SAMPLE_DIR / name, target)
            paths.append(target)
        return paths

    def test_converter_initialization(self):
        """컨버터 초기화 테스트"""
        converter = HtmlToPptxConverter(layout="16:9", author="a", title="t")
        assert converter.metadata.layout is LayoutPreset.LAYOUT_16x9
        assert converter.colors is not None
        assert 'heading' in converter.colors

    def test_ai_basics_deck(self, sample_slides, temp_dir):
        """두 장짜리 샘플 덱 생성 테스트"""
        output_path = temp_dir / "ai-basics.pptx"

        converter = HtmlToPptxConverter(
            layout="LAYOUT_16x9",
            author="Claude Code",
            title="AI Basics - Understanding AI",
        )
        result = converter.convert(sample_slides, output_path)

        assert result.slide_count == 2
        assert result.output_path == output_path.absolute()
        assert [p.name for p in temp_dir.iterdir() if p.suffix == ".pptx"] == ["ai-basics.pptx"]

        prs = Presentation(str(output_path))
        assert len(prs.slides) == 2
        assert prs.core_properties.author == "Claude Code"
        assert prs.core_properties.title == "AI Basics - Understanding AI"
        assert prs.slide_width == Inches(10)
        assert prs.slide_height == Inches(5.625)

        first_texts = [s.text_frame.text for s in prs.slides[0].shapes if s.has_text_frame]
        second_texts = [s.text_frame.text for s in prs.slides[1].shapes if s.has_text_frame]
        assert first_texts[0] == "AI Basics"
        assert second_texts[0] == "What is AI?"
        assert any(s.has_table for s in prs.slides[1].shapes)

    def test_rerun_is_idempotent(self, sample_slides, temp_dir):
        """같은 입력으로 재실행하면 동일한 덱으로 덮어씀"""
        output_path = temp_dir / "ai-basics.pptx"

        first = convert_html_to_pptx(sample_slides, output_path)
        second = convert_html_to_pptx(sample_slides, output_path)

        assert first == second
        prs = Presentation(str(output_path))
        assert [s.shapes[0].text_frame.text for s in prs.slides] == ["AI Basics", "What is AI?"]

    def test_reversed_order(self, sample_slides, temp_dir):
        """슬라이드 순서는 입력 순서를 따름"""
        output_path = temp_dir / "reversed.pptx"

        convert_html_to_pptx(list(reversed(sample_slides)), output_path)

        prs = Presentation(str(output_path))
        assert [s.shapes[0].text_frame.text for s in prs.slides] == ["What is AI?", "AI Basics"]

    def test_missing_slide(self, sample_slides, temp_dir):
        """존재하지 않는 슬라이드는 SourceNotFound, 출력 파일 없음"""
        output_path = temp_dir / "ai-basics.pptx"

        with pytest.raises(SourceNotFound):
            convert_html_to_pptx(sample_slides + [temp_dir / "slide3.html"], output_path)

        assert not output_path.exists()

    def test_broken_slide(self, sample_slides, write_slide, temp_dir):
        """변환 실패 시 해당 슬라이드를 가리키는 ConversionFailed"""
        broken = write_slide("broken.html", '<h1>Chart</h1><img src="missing.png">')
        output_path = temp_dir / "ai-basics.pptx"

        with pytest.raises(ConversionFailed) as exc_info:
            convert_html_to_pptx([sample_slides[0], broken, sample_slides[1]], output_path)

        assert exc_info.value.index == 1
        assert isinstance(exc_info.value.cause, FileNotFoundError)
        assert not output_path.exists()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
