"""
덱(Deck) 데이터 모델

슬라이드 레이아웃 프리셋, 덱 메타데이터, 불변 슬라이드 기술(SlideSpec)과
추가 전용(append-only) Deck 누산기를 정의합니다.
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union


class LayoutPreset(Enum):
    """슬라이드 크기 프리셋 (인치 단위 너비, 높이)"""
    LAYOUT_16x9 = "LAYOUT_16x9"
    LAYOUT_16x10 = "LAYOUT_16x10"
    LAYOUT_4x3 = "LAYOUT_4x3"
    LAYOUT_WIDE = "LAYOUT_WIDE"

    @property
    def size_inches(self) -> Tuple[float, float]:
        return _LAYOUT_SIZES[self]

    @property
    def width_inches(self) -> float:
        return self.size_inches[0]

    @property
    def height_inches(self) -> float:
        return self.size_inches[1]

    @classmethod
    def parse(cls, value: Union[str, "LayoutPreset"]) -> "LayoutPreset":
        """
        문자열을 LayoutPreset으로 변환

        Args:
            value: 'LAYOUT_16x9', '16:9', '16x9', 'wide' 등

        Returns:
            LayoutPreset

        Raises:
            ValueError: 알 수 없는 레이아웃인 경우
        """
        if isinstance(value, cls):
            return value

        key = str(value).strip().lower()
        for preset in cls:
            if key == preset.value.lower():
                return preset

        alias = _LAYOUT_ALIASES.get(key)
        if alias is None:
            known = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown layout preset: {value!r} (expected one of {known})")
        return alias


_LAYOUT_SIZES: Dict[LayoutPreset, Tuple[float, float]] = {
    LayoutPreset.LAYOUT_16x9: (10.0, 5.625),
    LayoutPreset.LAYOUT_16x10: (10.0, 6.25),
    LayoutPreset.LAYOUT_4x3: (10.0, 7.5),
    LayoutPreset.LAYOUT_WIDE: (13.333, 7.5),
}

_LAYOUT_ALIASES: Dict[str, LayoutPreset] = {
    "16:9": LayoutPreset.LAYOUT_16x9,
    "16x9": LayoutPreset.LAYOUT_16x9,
    "16:10": LayoutPreset.LAYOUT_16x10,
    "16x10": LayoutPreset.LAYOUT_16x10,
    "4:3": LayoutPreset.LAYOUT_4x3,
    "4x3": LayoutPreset.LAYOUT_4x3,
    "wide": LayoutPreset.LAYOUT_WIDE,
    "widescreen": LayoutPreset.LAYOUT_WIDE,
}


@dataclass(frozen=True)
class DeckMetadata:
    """덱 전역 메타데이터"""
    layout: LayoutPreset = LayoutPreset.LAYOUT_16x9
    author: str = ""
    title: str = ""
    subject: Optional[str] = None


@dataclass(frozen=True)
class TextStyle:
    """HTML 인라인 스타일에서 추출한 텍스트 스타일 (색상은 'RRGGBB' 문자열)"""
    color: Optional[str] = None
    background: Optional[str] = None
    bold: bool = False
    italic: bool = False
    font_size: Optional[float] = None  # pt
    align: Optional[str] = None  # left / center / right / justify


@dataclass(frozen=True)
class TextBlock:
    """제목(level 1~6) 또는 본문 문단(level 0)"""
    text: str
    level: int = 0
    style: TextStyle = field(default_factory=TextStyle)

    @property
    def is_heading(self) -> bool:
        return self.level > 0


@dataclass(frozen=True)
class ListBlock:
    """글머리 기호 / 번호 목록"""
    items: Tuple[str, ...]
    ordered: bool = False
    style: TextStyle = field(default_factory=TextStyle)


@dataclass(frozen=True)
class TableBlock:
    """표 데이터"""
    rows: Tuple[Tuple[str, ...], ...]
    header_count: int = 0
    merges: Tuple[Tuple[int, int, int, int], ...] = ()  # (row, col, colspan, rowspan)
    col_widths: Tuple[Optional[int], ...] = ()
    cell_styles: Tuple[Tuple[Tuple[int, int], TextStyle], ...] = ()
    link_cells: Tuple[Tuple[int, int], ...] = ()

    @property
    def col_count(self) -> int:
        return max((len(row) for row in self.rows), default=0)


@dataclass(frozen=True)
class ImageBlock:
    """이미지 데이터"""
    data: bytes
    format: str
    width: int  # px
    height: int  # px
    alt: str = ""


SlideElement = Union[TextBlock, ListBlock, TableBlock, ImageBlock]


@dataclass(frozen=True)
class SlideSpec:
    """HTML 한 장에서 변환된 불변 슬라이드 기술"""
    source: Path
    elements: Tuple[SlideElement, ...]
    title: Optional[str] = None
    background: Optional[str] = None
    notes: Optional[str] = None


class Deck:
    """
    렌더링 전 덱

    메타데이터와 슬라이드 목록을 보관합니다. 슬라이드는 추가만 가능하며
    재정렬이나 삭제는 지원하지 않습니다.
    """

    def __init__(self, metadata: DeckMetadata):
        self.metadata = metadata
        self._slides: List[SlideSpec] = []

    def append(self, slide: SlideSpec) -> None:
        self._slides.append(slide)

    @property
    def slides(self) -> Tuple[SlideSpec, ...]:
        return tuple(self._slides)

    def __len__(self) -> int:
        return len(self._slides)


@dataclass(frozen=True)
class AssemblyResult:
    """덱 조립 결과"""
    output_path: Path
    slide_count: int
