"""
덱 저장기 인터페이스 정의
"""
from abc import ABC, abstractmethod
from pathlib import Path

from .deck import Deck


class BaseDeckWriter(ABC):
    """완성된 Deck을 파일로 직렬화하는 저장기의 기본 인터페이스"""

    @abstractmethod
    def write(self, deck: Deck, output_path: Path) -> Path:
        """
        덱을 파일로 저장

        Args:
            deck: 저장할 덱
            output_path: 출력 파일 경로

        Returns:
            Path: 실제로 저장된 파일 경로

        Raises:
            SlideRenderError: 특정 슬라이드 렌더링 실패
            OSError: 파일 저장 실패
        """
        pass
