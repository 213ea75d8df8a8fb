"""leetsync command line interface."""

import argparse
import signal
import sys
from pathlib import Path

from loguru import logger

from domain.exceptions import ConfigurationError
from infrastructure.logging_setup import configure_logging, parse_log_level

BANNER = """\
=== leetsync ===
Starting LeetCode submission monitor...
Keep this program running while solving LeetCode problems
Press Ctrl+C to stop the program
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="leetsync",
        description="Mirror accepted LeetCode solutions into a GitHub repository",
    )
    parser.add_argument("--env-file", default=None, help="Path to a .env file")
    parser.add_argument(
        "--log-level", type=parse_log_level, default=None, help="Override LOG_LEVEL"
    )

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("run", help="Watch the browser and sync accepted solutions (default)")
    subparsers.add_parser("check", help="Validate configuration and GitHub access")

    inspect = subparsers.add_parser("inspect", help="Analyse a saved problem page")
    inspect.add_argument("html_file", type=Path)
    inspect.add_argument(
        "--url",
        default="https://leetcode.com/problems/unknown/",
        help="URL the page was saved from",
    )

    init = subparsers.add_parser("init", help="Write a configuration template")
    init.add_argument("--path", type=Path, default=Path(".env.example"))
    init.add_argument("--force", action="store_true", help="Overwrite an existing file")

    return parser


def cmd_run(args: argparse.Namespace) -> int:
    from application.scheduler import PollScheduler
    from infrastructure.settings import load_settings
    from services import create_engine, create_sync_client

    print(BANNER)
    settings = load_settings(args.env_file)
    configure_logging(args.log_level or settings.log_level)

    logger.info(f"GitHub Repository: {settings.github_repo}")
    sync_client = create_sync_client(settings)
    if not sync_client.test_connection():
        logger.warning("GitHub connection check failed; uploads will likely fail")

    engine = create_engine(settings, sync_client=sync_client)
    scheduler = PollScheduler(engine.tick, settings.poll_interval_seconds)

    def _shutdown(signum, frame):
        logger.info("Shutting down leetsync...")
        scheduler.stop()

    signal.signal(signal.SIGINT, _shutdown)
    signal.signal(signal.SIGTERM, _shutdown)

    logger.info("Monitoring LeetCode submissions...")
    try:
        scheduler.run()
    finally:
        engine.close()
        sync_client.close()
        logger.info("leetsync stopped.")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    from infrastructure.settings import load_settings
    from services import create_sync_client

    settings = load_settings(args.env_file)
    client = create_sync_client(settings)
    try:
        ok = client.test_connection()
    finally:
        client.close()

    if ok:
        logger.info(f"Ready to sync into {settings.repo_owner}/{settings.repo_name}")
    return 0 if ok else 1


def cmd_inspect(args: argparse.Namespace) -> int:
    from infrastructure.browser import HtmlSnapshotObserver
    from infrastructure.parsers import CodeExtractor, LanguageDetector, URLParser
    from services.tracker import accepted_indicator_present

    if not args.html_file.is_file():
        logger.error(f"No such file: {args.html_file}")
        return 1

    page = HtmlSnapshotObserver.from_file(str(args.html_file), args.url)
    slug = URLParser.problem_slug(args.url) or URLParser.slug_from_title(page.page_title())
    code = CodeExtractor().extract(page)
    language = LanguageDetector().detect(page)
    accepted = accepted_indicator_present(
        page, on_submission_page=URLParser.is_submission_page(args.url)
    )

    print(f"problem:  {slug or 'unresolved'}")
    print(f"language: {language}")
    print(f"code:     {len(code.strip())} characters")
    print(f"accepted: {'yes' if accepted else 'no'}")
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    from infrastructure.settings import write_env_template

    path = write_env_template(args.path, overwrite=args.force)
    print(f"Please edit {path} with your GitHub settings and save it as .env")
    return 0


COMMANDS = {
    "run": cmd_run,
    "check": cmd_check,
    "inspect": cmd_inspect,
    "init": cmd_init,
}


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or "INFO")

    command = COMMANDS[args.command or "run"]
    try:
        return command(args)
    except ConfigurationError as e:
        logger.error(f"{e}. Please check your .env file.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
