"""PR Toolbox entry point.

Generate a pull request description from a GitHub PR URL.
Usage: prtoolbox https://github.com/owner/repo/pull/123
"""

import argparse
import logging
import sys
from pathlib import Path

from prtoolbox.config import AppConfig, load_config
from prtoolbox.deadline import Deadline
from prtoolbox.generator import GenerationError
from prtoolbox.logging import PRToolboxLogging
from prtoolbox.service import PRDescriptionService, build_service
from prtoolbox.sources import build_pr_source
from prtoolbox.url_parser import ParseError, parse_pr_url

EXIT_OK = 0
EXIT_GENERATION_FAILED = 1
EXIT_INVALID_URL = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="prtoolbox",
        description="Generate a pull request description from a GitHub PR URL",
    )
    parser.add_argument("url", nargs="?", help="Pull request URL, e.g. https://github.com/owner/repo/pull/1")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    parser.add_argument(
        "--prompt-only",
        action="store_true",
        help="Print the prompt that would be sent to the model and exit",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Overall deadline in seconds for fetching and generation",
    )
    return parser.parse_args(argv)


def _resolve_config(config_path: Path) -> AppConfig:
    if not config_path.is_file() and config_path == Path("config.yaml"):
        if Path("config.example.yaml").is_file():
            config_path = Path("config.example.yaml")
            logging.getLogger("prtoolbox").warning("config.yaml not found, using config.example.yaml")
    return load_config(config_path)


def main(argv: list[str] | None = None) -> int:
    """Entry point: parse URL, fetch PR, print generated description."""
    args = parse_args(argv)
    config = _resolve_config(args.config)
    PRToolboxLogging(config.logging).setup()
    log = logging.getLogger("prtoolbox.main")

    if args.check:
        print(
            "Config OK:",
            "github token" if config.github_token_resolved else "no github token (synthetic data)",
            "|",
            config.openai.model,
        )
        return EXIT_OK

    if not args.url:
        print("error: a pull request URL is required", file=sys.stderr)
        return EXIT_INVALID_URL

    deadline = Deadline(args.timeout) if args.timeout is not None else None

    try:
        # URL errors take precedence over missing credentials
        parse_pr_url(args.url)
        if args.prompt_only:
            _, prompt = PRDescriptionService(build_pr_source(config)).prepare(args.url, deadline)
            print(prompt)
            return EXIT_OK
        service = build_service(config)
        print(service.generate_description(args.url, deadline))
    except ParseError as e:
        print(f"Invalid GitHub PR URL: {e}", file=sys.stderr)
        return EXIT_INVALID_URL
    except GenerationError as e:
        log.error("Failed to generate description: %s", e)
        return EXIT_GENERATION_FAILED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
