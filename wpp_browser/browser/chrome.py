"""Local Chrome installation lookup."""
import logging
import os
import platform
import shutil
from typing import Optional

logger = logging.getLogger(__name__)

CHROME_PATH_ENV = "CHROME_PATH"

_DARWIN_CANDIDATES: list[str] = [
    "/Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
    "/Applications/Google Chrome Canary.app/Contents/MacOS/Google Chrome Canary",
]

_LINUX_CANDIDATES: list[str] = [
    "google-chrome-stable",
    "google-chrome",
    "chromium-browser",
    "chromium",
]

_WINDOWS_SUFFIXES: list[str] = [
    os.path.join("Google", "Chrome", "Application", "chrome.exe"),
    os.path.join("Google", "Chrome SxS", "Application", "chrome.exe"),
]


def _windows_installations() -> list[str]:
    found = []
    for env_var in ("LOCALAPPDATA", "PROGRAMFILES", "PROGRAMFILES(X86)"):
        prefix = os.environ.get(env_var)
        if not prefix:
            continue
        for suffix in _WINDOWS_SUFFIXES:
            path = os.path.join(prefix, suffix)
            if os.path.isfile(path):
                found.append(path)
    return found


def _platform_installations(system: str) -> list[str]:
    if system == "Darwin":
        return [path for path in _DARWIN_CANDIDATES if os.path.isfile(path)]
    if system == "Linux":
        found = []
        for name in _LINUX_CANDIDATES:
            path = shutil.which(name)
            if path and path not in found:
                found.append(path)
        return found
    if system == "Windows":
        return _windows_installations()
    raise RuntimeError(f"Unsupported platform for Chrome lookup: {system}")


def get_chrome_installations() -> list[str]:
    """List Chrome executables installed on this machine.

    An executable named by ``CHROME_PATH`` comes first, followed by the
    platform's install locations in lookup order. No attempt is made to
    rank versions or channels.

    Raises:
        RuntimeError: On a platform with no known install locations and
            no usable ``CHROME_PATH``.
    """
    found = []
    env_path = os.environ.get(CHROME_PATH_ENV)
    if env_path and os.path.isfile(env_path):
        found.append(env_path)

    try:
        platform_paths = _platform_installations(platform.system())
    except RuntimeError:
        if found:
            return found
        raise
    return found + [path for path in platform_paths if path not in found]


def get_chrome() -> Optional[str]:
    """Return the first Chrome installation found, or None."""
    try:
        installations = get_chrome_installations()
    except Exception as e:
        logger.debug(f"Chrome lookup failed: {e}")
        return None
    return installations[0] if installations else None
