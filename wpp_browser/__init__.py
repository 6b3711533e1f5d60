"""wpp-browser: Playwright launcher and page bootstrap for WhatsApp Web automation."""
