"""
HTML 슬라이드 변환기

HTML 파일 하나를 읽어 불변 SlideSpec 하나로 변환합니다. 렌더링은 하지 않으며,
결과는 PptxDeckWriter가 슬라이드로 그립니다.
"""
import base64
import binascii
import logging
from io import BytesIO
from pathlib import Path
from typing import List, Optional
from urllib.parse import unquote, urlparse

from bs4 import BeautifulSoup, NavigableString, Tag
from PIL import Image, UnidentifiedImageError

from ...core.converter import BaseSlideConverter
from ...core.deck import ImageBlock, ListBlock, SlideSpec, TextBlock, TextStyle
from .style_utils import StyleExtractor, TextUtils
from .table_builder import TableDataExtractor

logger = logging.getLogger(__name__)

HEADING_TAGS = {'h1': 1, 'h2': 2, 'h3': 3, 'h4': 4, 'h5': 5, 'h6': 6}
PARAGRAPH_TAGS = {'p', 'blockquote', 'pre', 'figcaption'}
CONTAINER_TAGS = {
    'div', 'section', 'article', 'main', 'header', 'footer', 'figure', 'nav', 'body',
}
IGNORED_TAGS = {'script', 'style', 'noscript', 'template', 'head', 'meta', 'link'}


class HtmlSlideConverter(BaseSlideConverter):
    """HTML 파일을 SlideSpec으로 변환하는 변환기"""

    def __init__(self, encoding: str = 'utf-8'):
        self.encoding = encoding

    @property
    def supported_extensions(self) -> List[str]:
        return ['.html', '.htm']

    def convert(self, source_path: Path) -> SlideSpec:
        """
        HTML 파일을 SlideSpec으로 변환

        Args:
            source_path: 입력 HTML 파일 경로

        Returns:
            SlideSpec: 변환된 슬라이드 기술

        Raises:
            OSError: 파일을 읽을 수 없는 경우
            ValueError: 렌더링할 내용이 없는 경우
            FileNotFoundError: 참조한 로컬 이미지가 없는 경우
        """
        source_path = Path(source_path)
        logger.debug(f"HTML 슬라이드 파싱: {source_path}")

        with open(source_path, 'r', encoding=self.encoding) as f:
            html_content = f.read()

        return self.convert_string(html_content, source_path)

    def convert_string(self, html_content: str, source_path: Path) -> SlideSpec:
        """HTML 문자열을 SlideSpec으로 변환 (상대 경로 이미지는 source_path 기준)"""
        soup = BeautifulSoup(html_content, 'lxml')
        return _SlideBuilder(soup, Path(source_path)).build()


class _SlideBuilder:
    """HTML 문서 하나를 순회하며 슬라이드 요소를 모음"""

    def __init__(self, soup: BeautifulSoup, source_path: Path):
        self.soup = soup
        self.source_path = source_path
        self.base_dir = source_path.parent
        self.elements = []
        self.notes: List[str] = []

    def build(self) -> SlideSpec:
        body = self.soup.body or self.soup
        root = body.find(class_='slide') or body

        for aside in body.find_all('aside', class_='notes'):
            self.notes.append(TextUtils.extract_text_with_breaks(aside))
            aside.decompose()
        if body.get('data-notes'):
            self.notes.insert(0, body.get('data-notes').strip())

        background = (
            StyleExtractor.extract_background(root)
            or StyleExtractor.extract_background(body)
        )
        inherited = StyleExtractor.extract_text_style(root)
        self._walk(root, TextStyle(
            color=inherited.color,
            font_size=inherited.font_size,
            align=inherited.align,
        ))

        if not self.elements:
            raise ValueError(f"No renderable content in {self.source_path}")

        return SlideSpec(
            source=self.source_path,
            elements=tuple(self.elements),
            title=self._title(),
            background=background,
            notes="\n\n".join(n for n in self.notes if n) or None,
        )

    def _title(self) -> Optional[str]:
        for element in self.elements:
            if isinstance(element, TextBlock) and element.is_heading:
                return element.text
        if self.soup.title and self.soup.title.string:
            return TextUtils.clean_text(self.soup.title.string)
        return None

    def _walk(self, container: Tag, inherited: TextStyle) -> None:
        """컨테이너의 자식들을 문서 순서대로 처리"""
        loose_text: List[str] = []

        def flush():
            text = TextUtils.clean_text(' '.join(loose_text))
            loose_text.clear()
            if text:
                self.elements.append(TextBlock(text=text, level=0, style=inherited))

        for child in container.children:
            if isinstance(child, NavigableString):
                if type(child) is NavigableString:
                    loose_text.append(str(child))
                continue
            if not isinstance(child, Tag) or child.name in IGNORED_TAGS:
                continue

            name = child.name
            if name in HEADING_TAGS or name in PARAGRAPH_TAGS or name in ('ul', 'ol', 'table', 'img') \
                    or name in CONTAINER_TAGS:
                flush()
            else:
                # 인라인 요소 (span, b, a 등)
                if name == 'br':
                    loose_text.append('\n')
                else:
                    images = child.find_all('img')
                    if images:
                        flush()
                        for img in images:
                            self._add_image(img)
                    loose_text.append(child.get_text())
                continue

            style = StyleExtractor.extract_text_style(child, inherited)

            if name in HEADING_TAGS:
                self._add_text(child, HEADING_TAGS[name], style)
            elif name in PARAGRAPH_TAGS:
                self._add_text(child, 0, style)
            elif name in ('ul', 'ol'):
                self._add_list(child, style)
            elif name == 'table':
                self._add_table(child)
            elif name == 'img':
                self._add_image(child)
            else:
                self._walk(child, TextStyle(
                    color=style.color,
                    bold=style.bold,
                    italic=style.italic,
                    font_size=style.font_size,
                    align=style.align,
                ))

        flush()

    def _add_text(self, elem: Tag, level: int, style: TextStyle) -> None:
        # 문단 안에 이미지만 있는 경우
        for img in elem.find_all('img'):
            self._add_image(img)
        text = TextUtils.extract_text_with_breaks(elem)
        if text:
            self.elements.append(TextBlock(text=text, level=level, style=style))

    def _add_list(self, elem: Tag, style: TextStyle) -> None:
        items = tuple(
            TextUtils.clean_text(li.get_text())
            for li in elem.find_all('li', recursive=False)
        )
        items = tuple(item for item in items if item)
        if items:
            self.elements.append(ListBlock(items=items, ordered=elem.name == 'ol', style=style))

    def _add_table(self, elem: Tag) -> None:
        table = TableDataExtractor(elem).extract().to_block()
        if table.rows:
            self.elements.append(table)

    def _add_image(self, img: Tag) -> None:
        src = (img.get('src') or '').strip()
        if not src:
            logger.warning(f"src 없는 이미지를 건너뜁니다: {self.source_path}")
            return

        if src.startswith('data:'):
            data = self._decode_data_uri(src)
        else:
            parsed = urlparse(src)
            if parsed.scheme not in ('', 'file'):
                logger.warning(f"원격 이미지는 지원하지 않습니다: {src}")
                return
            image_path = Path(unquote(parsed.path))
            if not image_path.is_absolute():
                image_path = self.base_dir / image_path
            if not image_path.exists():
                raise FileNotFoundError(f"Image not found: {image_path}")
            data = image_path.read_bytes()

        try:
            with Image.open(BytesIO(data)) as pil_img:
                width, height = pil_img.size
                image_format = (pil_img.format or 'PNG').lower()
        except UnidentifiedImageError:
            logger.warning(f"지원하지 않는 이미지 형식을 건너뜁니다: {src[:80]}")
            return

        self.elements.append(ImageBlock(
            data=data,
            format=image_format,
            width=width,
            height=height,
            alt=img.get('alt', ''),
        ))

    @staticmethod
    def _decode_data_uri(src: str) -> bytes:
        header, _, payload = src.partition(',')
        if ';base64' in header:
            try:
                return base64.b64decode(payload)
            except binascii.Error as e:
                raise ValueError(f"Invalid base64 image data: {e}") from e
        return unquote(payload).encode('latin-1')
