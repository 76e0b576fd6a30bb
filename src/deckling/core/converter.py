"""
슬라이드 변환기 인터페이스 정의
"""
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from .deck import SlideSpec
from .errors import SourceNotFound


class BaseSlideConverter(ABC):
    """슬라이드 소스 하나를 SlideSpec으로 바꾸는 변환기의 기본 인터페이스"""

    @property
    @abstractmethod
    def supported_extensions(self) -> List[str]:
        """이 변환기가 지원하는 파일 확장자 목록"""
        pass

    @abstractmethod
    def convert(self, source_path: Path) -> SlideSpec:
        """
        슬라이드 소스를 변환

        Args:
            source_path: 슬라이드 소스 파일 경로

        Returns:
            SlideSpec: 변환된 슬라이드 기술

        Raises:
            Exception: 변환 중 오류 발생 (호출자가 ConversionFailed로 감쌈)
        """
        pass

    def can_convert(self, source_path: Path) -> bool:
        """확장자 기준으로 변환 가능 여부 확인"""
        return Path(source_path).suffix.lower() in self.supported_extensions

    def validate_source(self, source_path: Path, index: int = None) -> None:
        """
        소스 파일 유효성 검사

        Args:
            source_path: 검사할 파일 경로
            index: 덱 내 슬라이드 위치 (0부터)

        Raises:
            SourceNotFound: 파일이 없거나 변환할 수 없는 경우
        """
        path = Path(source_path)
        if not path.exists():
            raise SourceNotFound(path, index)
        if not path.is_file():
            raise SourceNotFound(path, index, "not a regular file")
        if not self.can_convert(path):
            raise SourceNotFound(path, index, "unsupported file type")
        if not os.access(path, os.R_OK):
            raise SourceNotFound(path, index, "not readable")
