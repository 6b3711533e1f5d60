"""CLI entry point for wpp-browser."""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

from wpp_browser.core.config import Settings
from wpp_browser.core.logging import setup_logging
from wpp_browser.session import open_session

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Open a WhatsApp Web session with WAPI injected"
    )
    parser.add_argument(
        "--config", "-c",
        default="config/settings.yaml",
        help="Path to settings YAML file"
    )
    parser.add_argument(
        "--session", "-s",
        help="Session name (overrides settings)"
    )
    parser.add_argument(
        "--ws",
        help="Attach to a running browser at this websocket URL"
    )
    parser.add_argument(
        "--headed",
        action="store_true",
        help="Show the browser window"
    )
    parser.add_argument(
        "--no-wait",
        action="store_true",
        help="Exit as soon as the session is ready"
    )
    parser.add_argument(
        "--log-file",
        help="Also write logs to this file (overrides settings)"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Read settings from YAML (if present) and apply CLI overrides."""
    config_path = Path(args.config)
    settings = Settings.from_yaml(config_path) if config_path.exists() else Settings()

    overrides = {}
    if args.ws:
        overrides["browser_ws"] = args.ws
    if args.headed:
        overrides["headless"] = False
    if overrides:
        settings.browser = settings.browser.model_copy(update=overrides)
    if args.session:
        settings.session = args.session
    if args.log_file:
        settings.log_file = args.log_file
    return settings


async def run(settings: Settings, wait: bool = True) -> None:
    async with open_session(settings.session, settings.browser) as session:
        logger.info(f"Session '{session.name}' running at {session.page.url}")
        if wait:
            logger.info("Press Ctrl+C to stop")
            await asyncio.Event().wait()


def main() -> int:
    """Run a WhatsApp Web session until interrupted."""
    args = build_parser().parse_args()
    settings = load_settings(args)

    log_file = Path(settings.log_file) if settings.log_file else None
    setup_logging("DEBUG" if args.debug else settings.log_level, log_file)
    logger.info("=== wpp-browser ===")

    try:
        asyncio.run(run(settings, wait=not args.no_wait))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception as e:
        logger.error(f"Session failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
