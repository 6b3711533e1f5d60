"""End-to-end session: browser, WhatsApp page and injected WAPI."""
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Optional

from playwright.async_api import BrowserContext, Page, async_playwright

from .auth import SessionToken
from .browser.connection import init_browser
from .browser.inject import inject_api
from .browser.page import init_whatsapp
from .core.config import BrowserConfig

logger = logging.getLogger(__name__)


class PageNotFoundError(RuntimeError):
    """Raised when the acquired browser has no page to drive."""


@dataclass
class WhatsAppSession:
    """Live browser context and the page WAPI was injected into."""

    name: str
    context: BrowserContext
    page: Page


@asynccontextmanager
async def open_session(
    session: str,
    config: BrowserConfig,
    token: Optional[SessionToken] = None,
    extras: Optional[dict[str, Any]] = None,
) -> AsyncIterator[WhatsAppSession]:
    """Acquire a browser, prepare the WhatsApp page and inject WAPI.

    The browser context and the Playwright driver are closed on exit.

    Raises:
        PageNotFoundError: If the browser came up without any page.
    """
    async with async_playwright() as playwright:
        context = await init_browser(playwright, config, extras)
        try:
            page = await init_whatsapp(context, session, config, token)
            if page is False:
                raise PageNotFoundError(f"No page available for session '{session}'")
            await inject_api(page)
            logger.info(f"Session '{session}' ready")
            yield WhatsAppSession(name=session, context=context, page=page)
        finally:
            try:
                # Attached browsers are disconnected, launched ones shut down
                if context.browser is not None:
                    await context.browser.close()
                else:
                    await context.close()
            except Exception as e:
                logger.warning(f"Failed to close browser context cleanly: {e}")
