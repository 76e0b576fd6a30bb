"""
덱 조립기

HTML 슬라이드 소스 목록을 순서대로 변환해 Deck에 쌓고, 모든 변환이
성공한 뒤에만 한 번 저장합니다.
"""
import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from .converter import BaseSlideConverter
from .deck import AssemblyResult, Deck, DeckMetadata
from .errors import (
    ConversionFailed,
    NoSlideSources,
    SlideRenderError,
    WriteFailed,
)
from .writer import BaseDeckWriter

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class DeckAssembler:
    """슬라이드 소스 목록으로 덱 파일 하나를 만드는 조립기"""

    def __init__(
        self,
        converter: BaseSlideConverter = None,
        writer: BaseDeckWriter = None
    ):
        """
        조립기 초기화

        Args:
            converter: 슬라이드 변환기 (기본값: HtmlSlideConverter)
            writer: 덱 저장기 (기본값: PptxDeckWriter)
        """
        if converter is None or writer is None:
            from ..converters.html_pptx import HtmlSlideConverter, PptxDeckWriter
            converter = converter or HtmlSlideConverter()
            writer = writer or PptxDeckWriter()

        self.converter = converter
        self.writer = writer

    def run(
        self,
        slide_sources: Sequence[PathLike],
        output_path: PathLike,
        metadata: Optional[DeckMetadata] = None
    ) -> AssemblyResult:
        """
        덱 조립 실행

        Args:
            slide_sources: 순서가 있는 슬라이드 소스 경로 목록
            output_path: 출력 파일 경로
            metadata: 덱 메타데이터 (레이아웃, 작성자, 제목)

        Returns:
            AssemblyResult: 저장된 파일 경로와 슬라이드 수

        Raises:
            SourceNotFound: 소스가 없거나 읽을 수 없는 경우 (빈 목록은 NoSlideSources)
            ConversionFailed: 슬라이드 변환 실패
            WriteFailed: 저장 실패
        """
        sources = [Path(p) for p in slide_sources]
        output_path = Path(output_path)
        metadata = metadata or DeckMetadata()

        if not sources:
            raise NoSlideSources()

        for index, source in enumerate(sources):
            self.converter.validate_source(source, index)

        logger.info(
            f"덱 조립 시작: {len(sources)}개 슬라이드 -> {output_path} "
            f"({metadata.layout.value})"
        )

        deck = Deck(metadata)
        for index, source in enumerate(sources):
            try:
                slide = self.converter.convert(source)
            except Exception as e:
                raise ConversionFailed(source, index, e) from e
            deck.append(slide)
            logger.info(f"슬라이드 {index + 1}/{len(sources)} 변환 완료: {source}")

        try:
            written = self.writer.write(deck, output_path)
        except SlideRenderError as e:
            raise ConversionFailed(e.source, e.index, e.cause) from e
        except Exception as e:
            raise WriteFailed(output_path, e) from e

        result = AssemblyResult(output_path=Path(written).absolute(), slide_count=len(deck))
        logger.info(f"덱 저장 완료: {result.output_path} (총 {result.slide_count}개 슬라이드)")
        return result

    def run_config(self, config) -> AssemblyResult:
        """DeckConfig로 조립 실행"""
        return self.run(config.slide_sources, config.output_path, config.metadata)
