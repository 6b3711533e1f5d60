"""WhatsApp Web page bootstrap: first tab, token login, readiness race."""
import asyncio
import logging
from typing import Awaitable, Literal, Optional, Union

from playwright.async_api import BrowserContext, Page

from ..auth import SessionToken, inject_token
from ..core.config import BrowserConfig
from .constants import READY_TIMEOUT_MS, USER_AGENT_OVERRIDE, WHATSAPP_URL

logger = logging.getLogger(__name__)


def get_whatsapp_page(context: BrowserContext) -> Optional[Page]:
    """Return the first open page, or None if there is none."""
    try:
        pages = context.pages
    except Exception as e:
        logger.warning(f"Could not list browser pages: {e}")
        return None
    if not pages:
        logger.warning("Browser has no open pages")
        return None
    return pages[0]


async def wait_first_settled(*aws: Awaitable) -> None:
    """Run *aws* together and return once any of them settles.

    Success and failure both count as settling; errors are logged and
    dropped. Branches still running at that point are cancelled.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()

    for task in done:
        if not task.cancelled() and task.exception() is not None:
            logger.debug(f"Readiness branch failed: {task.exception()}")
    await asyncio.gather(*pending, return_exceptions=True)


async def init_whatsapp(
    context: BrowserContext,
    session: str,
    config: BrowserConfig,
    token: Optional[SessionToken] = None,
) -> Union[Page, Literal[False]]:
    """Prepare the first browser tab for WhatsApp Web.

    Readiness is best effort: the page is returned once navigation or the
    ``body`` wait settles, even if both timed out. Callers that need a
    loaded page must check for it themselves.

    Returns:
        The page, or False when the browser has no page to use.
    """
    page = get_whatsapp_page(context)
    if page is None:
        return False

    await inject_token(page, session, config, token)
    await page.set_extra_http_headers({"User-Agent": USER_AGENT_OVERRIDE})

    await wait_first_settled(
        page.goto(WHATSAPP_URL, timeout=READY_TIMEOUT_MS),
        page.wait_for_selector("body", timeout=READY_TIMEOUT_MS),
    )
    logger.info(f"Page ready enough at {page.url}")
    return page
