"""Tests for settings loading."""
from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from wpp_browser.core.config import BrowserConfig, Settings


def test_defaults() -> None:
    """Settings have usable defaults."""
    settings = Settings()
    assert settings.session == "default"
    assert settings.browser.use_chrome is True
    assert settings.browser.browser_ws == ""
    assert settings.browser.browser_args is None
    assert settings.browser.launch_options == {}


def test_from_yaml(tmp_path: Path) -> None:
    """YAML values populate settings and browser config."""
    path = tmp_path / "settings.yaml"
    path.write_text(
        "session: work\n"
        "browser:\n"
        "  headless: false\n"
        "  browser_ws: ws://localhost:9222/devtools/browser/abc\n"
        "  browser_args: ['--lang=en']\n"
        "  launch_options:\n"
        "    slow_mo: 25\n"
    )
    settings = Settings.from_yaml(path)

    assert settings.session == "work"
    assert settings.browser.headless is False
    assert settings.browser.browser_ws == "ws://localhost:9222/devtools/browser/abc"
    assert settings.browser.browser_args == ["--lang=en"]
    assert settings.browser.launch_options == {"slow_mo": 25}


def test_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    """An empty YAML file gives the defaults."""
    path = tmp_path / "settings.yaml"
    path.write_text("")
    assert Settings.from_yaml(path).browser == BrowserConfig()


def test_environment_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """WPP_ environment variables override defaults, including nested ones."""
    monkeypatch.setenv("WPP_SESSION", "from-env")
    monkeypatch.setenv("WPP_BROWSER__HEADLESS", "false")
    settings = Settings()
    assert settings.session == "from-env"
    assert settings.browser.headless is False


def test_browser_config_is_immutable() -> None:
    """BrowserConfig rejects assignment."""
    config = BrowserConfig()
    with pytest.raises(ValidationError):
        config.headless = False


def test_shipped_example_loads() -> None:
    """The example config in config/ is valid."""
    path = Path(__file__).resolve().parent.parent / "config" / "settings.yaml"
    settings = Settings.from_yaml(path)
    assert settings.browser.token_dir == "tokens"
