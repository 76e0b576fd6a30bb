"""
덱 조립 실행 설정

한 번의 실행에 필요한 값(슬라이드 소스, 출력 경로, 레이아웃, 작성자, 제목)을
DeckConfig 하나로 묶고, JSON 설정 파일 로딩을 제공합니다.
"""
import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional

from .core.deck import DeckMetadata, LayoutPreset
from .core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_KEYS = ('slide_sources', 'output_path', 'layout', 'author', 'title', 'subject')


@dataclass(frozen=True)
class DeckConfig:
    """덱 조립 실행 설정"""
    slide_sources: List[Path] = field(default_factory=list)
    output_path: Optional[Path] = None
    layout: LayoutPreset = LayoutPreset.LAYOUT_16x9
    author: str = ""
    title: str = ""
    subject: Optional[str] = None

    @property
    def metadata(self) -> DeckMetadata:
        return DeckMetadata(
            layout=self.layout,
            author=self.author,
            title=self.title,
            subject=self.subject,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_dir: Path = None) -> "DeckConfig":
        """
        딕셔너리에서 설정 생성

        Args:
            data: 설정 값 (알 수 없는 키는 ConfigError)
            base_dir: 상대 경로의 기준 디렉토리

        Returns:
            DeckConfig

        Raises:
            ConfigError: 알 수 없는 키, 잘못된 값
        """
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a JSON object")

        unknown = sorted(set(data) - set(CONFIG_KEYS))
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        def resolve(value) -> Path:
            path = Path(value)
            if base_dir is not None and not path.is_absolute():
                path = Path(base_dir) / path
            return path

        sources = data.get('slide_sources', [])
        if not isinstance(sources, list) or not all(isinstance(s, str) for s in sources):
            raise ConfigError("'slide_sources' must be a list of paths")

        output = data.get('output_path')
        if output is not None and not isinstance(output, str):
            raise ConfigError("'output_path' must be a path string")

        for key in ('author', 'title'):
            if not isinstance(data.get(key, ''), str):
                raise ConfigError(f"'{key}' must be a string")
        subject = data.get('subject')
        if subject is not None and not isinstance(subject, str):
            raise ConfigError("'subject' must be a string or null")

        try:
            layout = LayoutPreset.parse(data.get('layout', LayoutPreset.LAYOUT_16x9))
        except ValueError as e:
            raise ConfigError(str(e)) from e

        return cls(
            slide_sources=[resolve(s) for s in sources],
            output_path=resolve(output) if output else None,
            layout=layout,
            author=data.get('author', ''),
            title=data.get('title', ''),
            subject=subject,
        )

    @classmethod
    def from_file(cls, config_path: Path) -> "DeckConfig":
        """JSON 설정 파일 로딩 (상대 경로는 설정 파일 위치 기준)"""
        config_path = Path(config_path)
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file {config_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {config_path}: {e}") from e

        logger.debug(f"설정 파일 로딩: {config_path}")
        return cls.from_dict(data, base_dir=config_path.parent)

    def merged(self, **overrides) -> "DeckConfig":
        """None이 아닌 값만 덮어쓴 새 설정 반환"""
        values = {k: v for k, v in overrides.items() if v is not None}
        if 'layout' in values:
            try:
                values['layout'] = LayoutPreset.parse(values['layout'])
            except ValueError as e:
                raise ConfigError(str(e)) from e
        if 'slide_sources' in values:
            if not values['slide_sources']:
                del values['slide_sources']
            else:
                values['slide_sources'] = [Path(p) for p in values['slide_sources']]
        if 'output_path' in values:
            values['output_path'] = Path(values['output_path'])
        return replace(self, **values)

    def validate(self) -> None:
        """실행 전 필수 값 확인"""
        if self.output_path is None:
            raise ConfigError("An output path is required")
