"""Session token storage and injection into WhatsApp Web's local storage."""
import json
import logging
from pathlib import Path
from typing import Optional, Union

from playwright.async_api import Page
from pydantic import BaseModel, ValidationError

from .core.config import BrowserConfig

logger = logging.getLogger(__name__)

TOKEN_SUFFIX = ".data.json"


class SessionToken(BaseModel):
    """Local-storage values that keep a WhatsApp Web session logged in."""

    WABrowserId: str = ""
    WASecretBundle: str = ""
    WAToken1: str = ""
    WAToken2: str = ""


def is_valid_token(token: Optional[SessionToken]) -> bool:
    """True if every token field is present and non-empty."""
    if token is None:
        return False
    return all(token.model_dump().values())


def token_path(token_dir: Union[str, Path], session: str) -> Path:
    return Path(token_dir) / f"{session}{TOKEN_SUFFIX}"


def load_token(token_dir: Union[str, Path], session: str) -> Optional[SessionToken]:
    """Load a stored token for *session*.

    Returns:
        The token, or None if the file is missing or unreadable.
    """
    path = token_path(token_dir, session)
    if not path.is_file():
        return None
    try:
        return SessionToken.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as e:
        logger.warning(f"Ignoring unreadable token file {path}: {e}")
        return None


def save_token(token_dir: Union[str, Path], session: str, token: SessionToken) -> Path:
    """Persist *token* for *session* and return the file path."""
    path = token_path(token_dir, session)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(token.model_dump_json(indent=2), encoding="utf-8")
    logger.info(f"Saved token for session '{session}' to {path}")
    return path


def _local_storage_script(token: SessionToken) -> str:
    values = json.dumps(token.model_dump())
    return f"""
    (() => {{
        if (window.location.host !== 'web.whatsapp.com') return;
        const values = {values};
        for (const [key, value] of Object.entries(values)) {{
            window.localStorage.setItem(key, value);
        }}
    }})();
    """


async def inject_token(
    page: Page,
    session: str,
    config: BrowserConfig,
    token: Optional[SessionToken] = None,
) -> bool:
    """Seed WhatsApp Web's local storage with a session token.

    Falls back to the token stored under ``config.token_dir`` when none is
    passed. The values are written by an init script, so they are in place
    before WhatsApp's own scripts run on the next navigation.

    Returns:
        True if a valid token was registered, False otherwise.
    """
    if token is None:
        token = load_token(config.token_dir, session)

    if not is_valid_token(token):
        logger.info(f"No valid token for session '{session}', QR login required")
        return False

    await page.add_init_script(_local_storage_script(token))
    logger.info(f"Token injected for session '{session}'")
    return True
