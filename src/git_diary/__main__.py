"""git-diary entry point.

Usage:
    python -m git_diary [OPTIONS]

Options:
    -d, --days N     Number of days to include (default from config)
    --help           Show this help message
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from . import __version__
from .config.loader import load_config
from .errors import DiaryError
from .generator import DiaryGenerator


def setup_logging(level: str) -> None:
    """Configure logging based on config."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def positive_int(value: str) -> int:
    """Argparse type for a strictly positive integer."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from e
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-diary",
        description="Summarize recent git activity into a Markdown diary",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m git_diary               # Last 7 days (or config default)
  python -m git_diary --days 1      # Today only

Environment:
  ANTHROPIC_API_KEY    API key for the summarizer (required)
  ANTHROPIC_BASE_URL   Override the API endpoint
  GIT_DIARY_CONFIG     Path to a YAML config file
""",
    )

    parser.add_argument(
        "-d",
        "--days",
        type=positive_int,
        default=None,
        help="Number of days of history to include",
        metavar="N",
    )

    return parser.parse_args(argv)


def load_environment() -> None:
    """Load .env from the project root, falling back to the current directory."""
    env_file = Path(__file__).parent.parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        load_dotenv()


def main(argv: list[str] | None = None) -> int:
    """Main entry point for git-diary.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    args = parse_args(argv)
    load_environment()

    try:
        config = load_config()
    except FileNotFoundError as e:
        print(f"Error: Config file not found: {e}", file=sys.stderr)
        return 1
    except (ValueError, TypeError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging.level)
    logger = logging.getLogger("git_diary")
    logger.debug(f"git-diary v{__version__}")

    try:
        generator = DiaryGenerator.from_config(config, days_to_include=args.days)
        logger.info(
            f"Generating diary for the last {generator.days_to_include} days "
            f"of {config.history.repo_path}"
        )
        path = generator.generate()
    except (DiaryError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
