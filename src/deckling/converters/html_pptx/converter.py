"""
HTML 슬라이드 파일들을 PowerPoint(.pptx) 덱 하나로 변환하는 컨버터

HtmlSlideConverter(HTML -> SlideSpec)와 PptxDeckWriter(Deck -> .pptx)를
DeckAssembler로 묶은 편의 API입니다.
"""
import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from ...core.assembler import DeckAssembler
from ...core.deck import AssemblyResult, DeckMetadata, LayoutPreset
from .config import ColorPalette, TableConfig, TextConfig
from .parser import HtmlSlideConverter
from .writer import PptxDeckWriter

logger = logging.getLogger(__name__)


class HtmlToPptxConverter:
    """HTML 슬라이드들을 PowerPoint 덱으로 변환하는 컨버터"""

    def __init__(
        self,
        layout: Union[str, LayoutPreset] = LayoutPreset.LAYOUT_16x9,
        author: str = "",
        title: str = "",
        subject: Optional[str] = None,
        colors: ColorPalette = None,
        text_config: TextConfig = None,
        table_config: TableConfig = None
    ):
        """
        컨버터 초기화

        Args:
            layout: 슬라이드 레이아웃 프리셋
            author: 작성자
            title: 프레젠테이션 제목
            subject: 주제
            colors: 색상 팔레트
            text_config: 텍스트 설정
            table_config: 테이블 설정
        """
        self.metadata = DeckMetadata(
            layout=LayoutPreset.parse(layout),
            author=author,
            title=title,
            subject=subject,
        )
        self.assembler = DeckAssembler(
            converter=HtmlSlideConverter(),
            writer=PptxDeckWriter(
                colors=colors,
                text_config=text_config,
                table_config=table_config
            ),
        )

    @property
    def colors(self) -> ColorPalette:
        return self.assembler.writer.colors

    def convert(
        self,
        html_paths: Sequence[Union[str, Path]],
        output_path: Union[str, Path]
    ) -> AssemblyResult:
        """
        HTML 슬라이드 파일들을 PPTX로 변환

        Args:
            html_paths: 입력 HTML 파일 경로 목록 (슬라이드 순서)
            output_path: 출력 PPTX 파일 경로

        Returns:
            AssemblyResult: 저장 경로와 슬라이드 수
        """
        return self.assembler.run(html_paths, output_path, self.metadata)


def convert_html_to_pptx(
    html_paths: Sequence[Union[str, Path]],
    output_path: Union[str, Path],
    layout: Union[str, LayoutPreset] = LayoutPreset.LAYOUT_16x9,
    author: str = "",
    title: str = ""
) -> AssemblyResult:
    """
    HTML 슬라이드 파일들을 PPTX로 변환하는 편의 함수

    Args:
        html_paths: 입력 HTML 파일 경로 목록
        output_path: 출력 PPTX 파일 경로
        layout: 슬라이드 레이아웃 프리셋
        author: 작성자
        title: 프레젠테이션 제목
    """
    converter = HtmlToPptxConverter(layout=layout, author=author, title=title)
    return converter.convert(html_paths, output_path)
