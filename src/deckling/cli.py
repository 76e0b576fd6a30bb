"""
deckling 명령행 인터페이스

Usage:
    deckling slide1.html slide2.html -o ai-basics.pptx --author "Claude Code" \\
        --title "AI Basics - Understanding AI" --layout 16:9
    deckling --config deck.json
"""
import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import DeckConfig
from .core.assembler import DeckAssembler
from .core.errors import ConfigError, DeckError

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deckling",
        description="Assemble ordered HTML slide files into a single .pptx deck.",
    )
    parser.add_argument(
        "sources", nargs="*", metavar="SOURCE",
        help="HTML slide files, in slide order",
    )
    parser.add_argument("-o", "--output", help="output .pptx path")
    parser.add_argument("-c", "--config", help="JSON configuration file")
    parser.add_argument(
        "--layout",
        help="layout preset: 16:9 (default), 16:10, 4:3, wide, or LAYOUT_* name",
    )
    parser.add_argument("--author", help="deck author")
    parser.add_argument("--title", help="deck title")
    parser.add_argument("--subject", help="deck subject")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_config(args: argparse.Namespace) -> DeckConfig:
    """설정 파일과 명령행 인자를 합쳐 DeckConfig 생성 (명령행 우선)"""
    config = DeckConfig.from_file(args.config) if args.config else DeckConfig()
    config = config.merged(
        slide_sources=args.sources,
        output_path=args.output,
        layout=args.layout,
        author=args.author,
        title=args.title,
        subject=args.subject,
    )
    config.validate()
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """메인 실행 함수"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    try:
        config = load_config(args)
        result = DeckAssembler().run_config(config)
    except ConfigError as e:
        logger.error(f"{e.kind}: {e}")
        parser.print_usage(sys.stderr)
        sys.exit(e.exit_code)
    except DeckError as e:
        logger.error(f"{e.kind}: {e}")
        sys.exit(e.exit_code)

    print(f"Presentation created: {result.output_path} ({result.slide_count} slides)")
    return 0


if __name__ == "__main__":
    main()
