"""
덱 조립 오류 정의
"""
from pathlib import Path
from typing import Optional


class DeckError(Exception):
    """모든 deckling 오류의 기본 클래스"""

    kind = "DeckError"
    exit_code = 1


class ConfigError(DeckError, ValueError):
    """잘못된 실행 설정"""

    kind = "ConfigError"
    exit_code = 2


class SourceNotFound(DeckError):
    """슬라이드 소스를 읽을 수 없음"""

    kind = "SourceNotFound"
    exit_code = 3

    def __init__(self, path: Optional[Path], index: Optional[int] = None, reason: str = ""):
        self.path = Path(path) if path is not None else None
        self.index = index
        self.reason = reason
        message = f"slide {index + 1}: " if index is not None else ""
        message += f"source not found: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class NoSlideSources(SourceNotFound):
    """슬라이드 소스 목록이 비어 있음"""

    kind = "NoSlideSources"

    def __init__(self):
        self.path = None
        self.index = None
        self.reason = "no slide sources given"
        DeckError.__init__(self, "at least one slide source is required")


class ConversionFailed(DeckError):
    """슬라이드 변환 실패"""

    kind = "ConversionFailed"
    exit_code = 4

    def __init__(self, path: Path, index: int, cause: BaseException):
        self.path = Path(path)
        self.index = index
        self.cause = cause
        super().__init__(f"slide {index + 1} ({path}) failed to convert: {cause}")


class WriteFailed(DeckError):
    """덱 파일 저장 실패"""

    kind = "WriteFailed"
    exit_code = 5

    def __init__(self, path: Path, cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"could not write {path}: {cause}")


class SlideRenderError(Exception):
    """렌더러가 특정 슬라이드를 그리지 못함 (writer 내부에서 발생)"""

    def __init__(self, index: int, source: Path, cause: BaseException):
        self.index = index
        self.source = source
        self.cause = cause
        super().__init__(f"slide {index + 1} ({source}): {cause}")
