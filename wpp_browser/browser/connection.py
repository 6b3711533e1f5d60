"""Browser acquisition: launch a local browser or attach over CDP."""
import logging
import re
from typing import Any, Optional

import httpx
from playwright.async_api import Browser, BrowserContext, Playwright
from playwright_stealth import Stealth

from ..core.config import BrowserConfig
from .chrome import get_chrome
from .constants import (
    CDP_CONNECT_TIMEOUT_MS,
    CHROMIUM_ARGS,
    DEVTOOLS_ARG,
    DISCOVERY_PATH,
    DISCOVERY_TIMEOUT_SECONDS,
)

logger = logging.getLogger(__name__)

_stealth = Stealth()


def discovery_url(browser_ws: str) -> str:
    """Map a ``ws(s)://`` debugger address to its ``/json/version`` URL."""
    return re.sub(r"^ws(s)?:", r"http\1:", browser_ws) + DISCOVERY_PATH


async def fetch_debugger_url(endpoint_url: str) -> str:
    """Ask a browser's discovery endpoint for its websocket debugger URL.

    Raises:
        httpx.HTTPError: On network failure or a non-2xx response.
        ValueError: If the body carries no ``webSocketDebuggerUrl``.
    """
    async with httpx.AsyncClient(timeout=DISCOVERY_TIMEOUT_SECONDS) as client:
        response = await client.get(endpoint_url)
        response.raise_for_status()
        data = response.json()

    ws_url = data.get("webSocketDebuggerUrl") if isinstance(data, dict) else None
    if not isinstance(ws_url, str) or not ws_url:
        raise ValueError(f"No webSocketDebuggerUrl in response from {endpoint_url}")
    return ws_url


async def _connect(playwright: Playwright, ws_url: str) -> Browser:
    return await playwright.chromium.connect_over_cdp(
        ws_url, timeout=CDP_CONNECT_TIMEOUT_MS
    )


async def get_transport(playwright: Playwright, browser_ws: str) -> Browser:
    """Connect to a running browser, discovering its endpoint if needed.

    A direct connection to *browser_ws* is tried first. If that fails, the
    websocket URL is looked up through the ``/json/version`` discovery
    endpoint and tried once more. When the second attempt fails too, the
    error from the direct attempt is raised.
    """
    try:
        return await _connect(playwright, browser_ws)
    except Exception as e:
        error = e
        logger.warning(f"Direct CDP connection to {browser_ws} failed: {e}")

    try:
        endpoint_url = discovery_url(browser_ws)
        logger.info(f"Resolving debugger URL via {endpoint_url}")
        ws_url = await fetch_debugger_url(endpoint_url)
        browser = await _connect(playwright, ws_url)
        logger.info(f"Connected via discovered endpoint {ws_url}")
        return browser
    except Exception as e:
        logger.debug(f"Endpoint discovery failed: {e}")

    raise error


def build_launch_options(config: BrowserConfig, extras: dict[str, Any]) -> dict[str, Any]:
    """Merge launch flags, raw options and extras; later keys win."""
    args = list(config.browser_args) if config.browser_args is not None else list(CHROMIUM_ARGS)
    headless = config.headless
    if config.devtools:
        args.append(DEVTOOLS_ARG)
        headless = False

    options: dict[str, Any] = {
        "user_data_dir": config.user_data_dir,
        "headless": headless,
        "args": args,
    }
    options.update(config.launch_options)
    options.update(extras)
    return options


async def init_browser(
    playwright: Playwright,
    config: BrowserConfig,
    extras: Optional[dict[str, Any]] = None,
) -> BrowserContext:
    """Launch or attach to a browser and return its usable context.

    Args:
        playwright: Started async Playwright instance.
        config: Browser configuration.
        extras: Extra launch options, merged last.

    Returns:
        The persistent context of a launched browser, or the default
        context of an attached one. The caller owns and closes it.
    """
    extras = dict(extras or {})
    if config.use_chrome:
        chrome_path = get_chrome()
        if chrome_path:
            extras["executable_path"] = chrome_path
        else:
            logger.info("Chrome not found, using chromium")
            extras = {}

    if config.browser_ws:
        browser = await get_transport(playwright, config.browser_ws)
        if browser.contexts:
            context = browser.contexts[0]
        else:
            context = await browser.new_context()
        logger.info(f"Attached to browser {browser.version}")
    else:
        options = build_launch_options(config, extras)
        logger.info(
            f"Launching {'chrome' if 'executable_path' in options else 'chromium'} "
            f"(headless={options.get('headless')})"
        )
        context = await playwright.chromium.launch_persistent_context(**options)

    await _stealth.apply_stealth_async(context)
    return context
