#!/usr/bin/env python3
"""
샘플 덱(ai-basics.pptx) 생성 스크립트

Usage:
    python scripts/build_ai_basics.py [output.pptx]
"""
import logging
import sys
from pathlib import Path

from deckling import DeckAssembler, DeckError, DeckMetadata, LayoutPreset

SAMPLE_DIR = Path(__file__).parent / "ai_basics"

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def main():
    """메인 실행 함수"""
    output_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("ai-basics.pptx")

    metadata = DeckMetadata(
        layout=LayoutPreset.LAYOUT_16x9,
        author="Claude Code",
        title="AI Basics - Understanding AI",
    )
    sources = [SAMPLE_DIR / "slide1.html", SAMPLE_DIR / "slide2.html"]

    try:
        result = DeckAssembler().run(sources, output_path, metadata)
    except DeckError as e:
        logger.error(f"{e.kind}: {e}")
        sys.exit(e.exit_code)

    print(f"Presentation created: {result.output_path.name}")


if __name__ == "__main__":
    main()
