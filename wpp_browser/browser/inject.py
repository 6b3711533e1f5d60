"""WAPI script injection."""
import logging
from pathlib import Path
from typing import Optional

from playwright.async_api import Page

from .constants import WAPI_READY_PROBE

logger = logging.getLogger(__name__)

LIB_DIR = Path(__file__).resolve().parent.parent / "lib"

# Load order matters: middleware.js builds on the WAPI runtime.
SCRIPT_PATHS: list[Path] = [
    LIB_DIR / "wapi" / "wapi.js",
    LIB_DIR / "middleware" / "middleware.js",
]


async def is_injected(page: Page) -> bool:
    """Check whether WAPI and Store are defined on the page.

    Evaluation errors count as not injected.
    """
    try:
        return bool(await page.evaluate(WAPI_READY_PROBE))
    except Exception as e:
        logger.debug(f"WAPI probe failed, assuming not injected: {e}")
        return False


async def inject_api(page: Page) -> Optional[Page]:
    """Inject WAPI and its middleware unless the page already has them.

    Blocks until both globals are defined, without a timeout.

    Returns:
        The page after a fresh injection, None if it was already injected.
    """
    if await is_injected(page):
        return None

    for path in SCRIPT_PATHS:
        logger.debug(f"Adding script {path.name}")
        await page.add_script_tag(path=path)

    await page.wait_for_function(WAPI_READY_PROBE, timeout=0)
    logger.info("WAPI injected")
    return page
