"""Browser automation: acquisition, page bootstrap and script injection."""
from .chrome import get_chrome, get_chrome_installations
from .connection import get_transport, init_browser
from .inject import inject_api, is_injected
from .page import get_whatsapp_page, init_whatsapp

__all__ = [
    "get_chrome",
    "get_chrome_installations",
    "get_transport",
    "init_browser",
    "inject_api",
    "is_injected",
    "get_whatsapp_page",
    "init_whatsapp",
]
