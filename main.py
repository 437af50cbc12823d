"""
CLI entrypoint for the vocabulary browser.

This script performs the following steps:
- loads .env and configs/browser.yaml (environment variables override the YAML)
- derives the navigation state from --location, or from --list/--voc/--term/--format
- resolves the list and vocabulary it needs (base vocabulary merged in)
- renders the resulting view to HTML on stdout, or into --output
"""

import argparse
import asyncio
import html
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from application import RenderedView, VocabBrowser
from application.constants import HTML_DOCUMENT_TEMPLATE
from domain.navigation import NavigationState, state_to_location
from infrastructure.config import load_browser_config
from infrastructure.config.models import BrowserConfig
from infrastructure.constants import BROWSER_CONFIG_FILE
from infrastructure.http import HttpFetcher
from infrastructure.io import ensure_exists, write_text
from infrastructure.location import InMemoryHistory
from infrastructure.observability import configure_logging

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render a vocabulary, list or term view as HTML")
    p.add_argument(
        "--config",
        type=str,
        default=None,
        help=f"Path to browser.yaml (default: {BROWSER_CONFIG_FILE} if present, else built-in defaults)",
    )
    p.add_argument(
        "--env",
        type=str,
        default=".env",
        help="Path to .env file (default: .env, skipped if missing)",
    )
    p.add_argument(
        "--location",
        type=str,
        default=None,
        help="Browser location to open, e.g. '/list/L1?voc=T1&term=ex:Widget'",
    )
    p.add_argument("--list", dest="list_id", type=str, default=None, help="List id")
    p.add_argument("--voc", dest="taxonomy_id", type=str, default=None, help="Vocabulary (taxonomy) id")
    p.add_argument("--term", dest="term_id", type=str, default=None, help="Term id, e.g. 'schema:Thing'")
    p.add_argument("--format", dest="format", type=str, default=None, help="'jsonld' for the raw document")
    p.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write a standalone HTML page here instead of printing the view to stdout",
    )
    p.add_argument(
        "--console-level",
        type=str,
        default=None,
        choices=LOG_LEVELS,
        help="Console log level (default: logging.console_level from the config)",
    )
    p.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also log to this rotating file",
    )
    args = p.parse_args(argv)

    if args.location and any([args.list_id, args.taxonomy_id, args.term_id, args.format]):
        p.error("--location cannot be combined with --list/--voc/--term/--format")
    return args


def _load_config(args: argparse.Namespace) -> BrowserConfig:
    if args.config is not None:
        config_path = Path(args.config)
        ensure_exists(config_path, "browser.yaml")
        return load_browser_config(config_path)
    if BROWSER_CONFIG_FILE.exists():
        return load_browser_config(BROWSER_CONFIG_FILE)
    return load_browser_config(None)


def _initial_location(args: argparse.Namespace, cfg: BrowserConfig) -> str:
    if args.location:
        return args.location
    state = NavigationState.from_fields(
        list_id=args.list_id,
        taxonomy_id=args.taxonomy_id,
        term_id=args.term_id,
        format=args.format,
    )
    return state_to_location(state, cfg.base_path).to_url()


async def _browse(cfg: BrowserConfig, location: str) -> RenderedView | None:
    history = InMemoryHistory(location)
    async with HttpFetcher.from_cfg(cfg) as fetcher:
        browser = VocabBrowser.from_cfg(
            cfg,
            host=history,
            fetcher=fetcher,
            on_loading=lambda _html: logger.info("Loading %s...", location),
        )
        return await browser.start()


def _title(view: RenderedView) -> str:
    state = view.state
    parts = [p for p in (state.term_id, state.taxonomy_id, state.list_id) if p]
    return " - ".join(parts) if parts else "Vocabulary Browser"


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    env_file = Path(args.env)
    if env_file.exists():
        load_dotenv(env_file, override=True)

    cfg = _load_config(args)

    log_file = Path(args.log_file) if args.log_file else cfg.logging.log_file
    configure_logging(
        log_file=log_file,
        console_level=getattr(logging, args.console_level or cfg.logging.console_level.upper()),
        file_level=getattr(logging, cfg.logging.file_level.upper()),
    )

    location = _initial_location(args, cfg)
    logger.info("Opening %s", location)

    view = asyncio.run(_browse(cfg, location))
    if view is None:
        logger.error("Nothing was rendered for %s", location)
        return 1

    if args.output:
        page = HTML_DOCUMENT_TEMPLATE.format(title=html.escape(_title(view)), body=view.html)
        out_path = write_text(Path(args.output), page)
        logger.info("Saved view to %s", out_path)
    else:
        sys.stdout.write(view.html + "\n")

    if not view.ok:
        logger.error("View rendered with error: %s", view.error)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
