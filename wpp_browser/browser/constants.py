"""Browser launch constants, target URL and timeouts."""

WHATSAPP_URL: str = "https://web.whatsapp.com"

USER_AGENT_OVERRIDE: str = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

# Timeouts
READY_TIMEOUT_MS: int = 2000
CDP_CONNECT_TIMEOUT_MS: int = 10000
DISCOVERY_TIMEOUT_SECONDS: float = 10.0

DISCOVERY_PATH: str = "/json/version"

# Globals defined by the injected scripts
WAPI_READY_PROBE: str = (
    "() => typeof window.WAPI !== 'undefined' && typeof window.Store !== 'undefined'"
)

CHROMIUM_ARGS: list[str] = [
    "--disable-web-security",
    "--no-sandbox",
    "--aggressive-cache-discard",
    "--disable-cache",
    "--disable-application-cache",
    "--disable-offline-load-stylesheets",
    "--disk-cache-size=0",
    "--disable-background-networking",
    "--disable-default-apps",
    "--disable-extensions",
    "--disable-sync",
    "--disable-translate",
    "--hide-scrollbars",
    "--metrics-recording-only",
    "--mute-audio",
    "--no-first-run",
    "--safebrowsing-disable-auto-update",
    "--ignore-certificate-errors",
    "--ignore-ssl-errors",
    "--ignore-certificate-errors-spki-list",
]

DEVTOOLS_ARG: str = "--auto-open-devtools-for-tabs"
