"""DeckConfig 테스트"""
import json
from pathlib import Path

import pytest

from deckling.config import DeckConfig
from deckling.core.deck import LayoutPreset
from deckling.core.errors import ConfigError


class TestDeckConfig:
    """설정 로딩 및 병합 테스트"""

    def test_from_dict_resolves_relative_paths(self, temp_dir):
        config = DeckConfig.from_dict(
            {
                "slide_sources": ["slides/one.html", "/abs/two.html"],
                "output_path": "out/deck.pptx",
                "layout": "4:3",
                "author": "Claude Code",
                "title": "AI Basics - Understanding AI",
            },
            base_dir=temp_dir,
        )

        assert config.slide_sources == [temp_dir / "slides/one.html", Path("/abs/two.html")]
        assert config.output_path == temp_dir / "out/deck.pptx"
        assert config.layout is LayoutPreset.LAYOUT_4x3
        assert config.metadata.author == "Claude Code"
        assert config.metadata.title == "AI Basics - Understanding AI"
        assert config.metadata.subject is None

    def test_defaults(self):
        config = DeckConfig.from_dict({})
        assert config.slide_sources == []
        assert config.output_path is None
        assert config.layout is LayoutPreset.LAYOUT_16x9

    @pytest.mark.parametrize("data, message", [
        ({"slides": []}, "Unknown configuration keys: slides"),
        ({"slide_sources": "one.html"}, "must be a list"),
        ({"layout": "3:2"}, "Unknown layout preset"),
        (["not", "an", "object"], "must be a JSON object"),
        ({"slide_sources": [None], "output_path": "x.pptx"}, "must be a list of paths"),
        ({"slide_sources": [1]}, "must be a list of paths"),
        ({"output_path": 5}, "'output_path' must be a path string"),
        ({"author": 7}, "'author' must be a string"),
        ({"subject": ["s"]}, "'subject' must be a string or null"),
    ])
    def test_from_dict_errors(self, data, message):
        with pytest.raises(ConfigError, match=message):
            DeckConfig.from_dict(data)

    def test_from_file(self, temp_dir):
        config_path = temp_dir / "deck.json"
        config_path.write_text(json.dumps({
            "slide_sources": ["slide1.html"],
            "output_path": "ai-basics.pptx",
        }), encoding="utf-8")

        config = DeckConfig.from_file(config_path)

        assert config.slide_sources == [temp_dir / "slide1.html"]
        assert config.output_path == temp_dir / "ai-basics.pptx"

    def test_from_file_errors(self, temp_dir):
        with pytest.raises(ConfigError, match="Cannot read"):
            DeckConfig.from_file(temp_dir / "missing.json")

        broken = temp_dir / "broken.json"
        broken.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            DeckConfig.from_file(broken)

    def test_merged_overrides_only_given_values(self, temp_dir):
        base = DeckConfig(
            slide_sources=[temp_dir / "a.html"],
            output_path=temp_dir / "a.pptx",
            author="file author",
            title="file title",
        )

        merged = base.merged(
            slide_sources=[],
            output_path="b.pptx",
            layout="wide",
            author=None,
            title="cli title",
        )

        assert merged.slide_sources == [temp_dir / "a.html"]
        assert merged.output_path == Path("b.pptx")
        assert merged.layout is LayoutPreset.LAYOUT_WIDE
        assert merged.author == "file author"
        assert merged.title == "cli title"
        assert base.title == "file title"

    def test_merged_bad_layout(self):
        with pytest.raises(ConfigError):
            DeckConfig().merged(layout="nope")

    def test_validate_requires_output(self):
        with pytest.raises(ConfigError, match="output path"):
            DeckConfig(slide_sources=[Path("a.html")]).validate()
