"""
PPTX 덱 저장기

완성된 Deck을 python-pptx Presentation으로 렌더링하고 파일로 저장합니다.
저장은 같은 디렉토리의 임시 파일에 쓴 뒤 원자적으로 교체하므로, 실패 시
출력 경로에 불완전한 파일이 남지 않습니다.
"""
import logging
import os
import stat
import tempfile
from pathlib import Path

from pptx import Presentation

from ...core.deck import Deck
from ...core.errors import SlideRenderError
from ...core.writer import BaseDeckWriter
from .config import SlideConfig, TextConfig, TableConfig, ColorPalette, DEFAULT_COLORS
from .slide_factory import SlideRenderer

logger = logging.getLogger(__name__)


class PptxDeckWriter(BaseDeckWriter):
    """Deck을 .pptx 파일로 저장하는 저장기"""

    def __init__(
        self,
        colors: ColorPalette = None,
        text_config: TextConfig = None,
        table_config: TableConfig = None
    ):
        self.colors = colors or DEFAULT_COLORS
        self.text_config = text_config
        self.table_config = table_config

    def build(self, deck: Deck) -> Presentation:
        """
        Deck을 Presentation 객체로 렌더링

        Args:
            deck: 렌더링할 덱

        Returns:
            Presentation

        Raises:
            SlideRenderError: 슬라이드 렌더링 실패
        """
        metadata = deck.metadata
        slide_config = SlideConfig.for_layout(metadata.layout)

        prs = Presentation()
        prs.slide_width = slide_config.width
        prs.slide_height = slide_config.height

        props = prs.core_properties
        props.author = metadata.author
        props.title = metadata.title
        props.last_modified_by = metadata.author
        if metadata.subject:
            props.subject = metadata.subject

        renderer = SlideRenderer(
            prs, slide_config, self.colors,
            text_config=self.text_config,
            table_config=self.table_config
        )
        for index, spec in enumerate(deck.slides):
            try:
                renderer.render(spec)
            except Exception as e:
                raise SlideRenderError(index, spec.source, e) from e

        return prs

    def write(self, deck: Deck, output_path: Path) -> Path:
        """
        덱을 .pptx 파일로 저장

        Args:
            deck: 저장할 덱
            output_path: 출력 파일 경로 (상위 디렉토리는 존재해야 함)

        Returns:
            Path: 저장된 파일 경로
        """
        output_path = Path(output_path)
        prs = self.build(deck)

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{output_path.name}.",
            suffix=".tmp",
            dir=str(output_path.parent)
        )
        os.close(fd)
        try:
            prs.save(tmp_name)
            os.chmod(tmp_name, _file_mode(output_path))
            os.replace(tmp_name, output_path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

        logger.debug(f"PPTX 저장: {output_path} ({len(prs.slides)}개 슬라이드)")
        return output_path


def _file_mode(output_path: Path) -> int:
    """기존 파일의 권한을 유지, 새 파일은 umask 적용"""
    try:
        return stat.S_IMODE(os.stat(output_path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
