"""Tests for mud_chat.config loading and environment overrides."""

import configparser
import logging

import pytest

from mud_chat import config as config_module
from mud_chat.config import (
    PROJECT_ROOT,
    ChatConfig,
    _load_from_ini,
    apply_logging_settings,
    get_config_status,
    load_config,
    reload_config,
)


def _parser(text: str) -> configparser.ConfigParser:
    parser = configparser.ConfigParser()
    parser.read_string(text)
    return parser


@pytest.mark.unit
def test_defaults():
    cfg = ChatConfig()
    assert cfg.locale.name == "en_US"
    assert cfg.locale.path is None
    assert cfg.locale.absolute_path is None
    assert cfg.components.check_cycles is True
    assert cfg.logging.level == "INFO"


@pytest.mark.unit
def test_load_from_ini():
    cfg = ChatConfig()
    _load_from_ini(
        _parser(
            "[locale]\nname = de_DE\npath = locales/de_DE.yaml\n"
            "[components]\ncheck_cycles = off\n"
            "[logging]\nlevel = debug\n"
        ),
        cfg,
    )
    assert cfg.locale.name == "de_DE"
    assert cfg.locale.path == "locales/de_DE.yaml"
    assert cfg.components.check_cycles is False
    assert cfg.logging.level == "DEBUG"


@pytest.mark.unit
def test_empty_ini_path_means_bundled_locale():
    cfg = ChatConfig()
    _load_from_ini(_parser("[locale]\npath =\n"), cfg)
    assert cfg.locale.path is None


@pytest.mark.unit
def test_relative_locale_path_resolves_against_project_root():
    cfg = ChatConfig()
    cfg.locale.path = "locales/en_US.lang"
    assert cfg.locale.absolute_path == PROJECT_ROOT / "locales/en_US.lang"


@pytest.mark.unit
def test_absolute_locale_path_is_kept(tmp_path):
    cfg = ChatConfig()
    cfg.locale.path = str(tmp_path / "en_US.json")
    assert cfg.locale.absolute_path == tmp_path / "en_US.json"


@pytest.mark.unit
def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MUD_CHAT_LOCALE", "fr_FR")
    monkeypatch.setenv("MUD_CHAT_LOCALE_PATH", "/srv/locales/fr_FR.json")
    monkeypatch.setenv("MUD_CHAT_CHECK_CYCLES", "false")
    monkeypatch.setenv("MUD_CHAT_LOG_LEVEL", "warning")

    cfg = load_config()

    assert cfg.locale.name == "fr_FR"
    assert cfg.locale.path == "/srv/locales/fr_FR.json"
    assert cfg.components.check_cycles is False
    assert cfg.logging.level == "WARNING"


@pytest.mark.unit
def test_reload_updates_singleton_in_place(monkeypatch):
    singleton = config_module.config
    original = (singleton.locale, singleton.components, singleton.logging)
    monkeypatch.setenv("MUD_CHAT_LOCALE", "es_ES")
    try:
        reloaded = reload_config()
        assert reloaded is singleton
        assert singleton.locale.name == "es_ES"
    finally:
        singleton.locale, singleton.components, singleton.logging = original


@pytest.mark.unit
def test_apply_logging_settings():
    logger = logging.getLogger("mud_chat")
    previous = logger.level
    cfg = ChatConfig()
    cfg.logging.level = "DEBUG"
    try:
        apply_logging_settings(cfg)
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(previous)


@pytest.mark.unit
def test_config_status_reports_settings(monkeypatch):
    monkeypatch.setattr(config_module.config.locale, "name", "en_US")
    monkeypatch.setattr(config_module.config.locale, "path", None)
    status = get_config_status()
    assert status["locale"] == "en_US"
    assert status["locale_path"] is None
    assert status["check_cycles"] is config_module.config.components.check_cycles
    assert set(status) >= {"config_file_exists", "config_file_path", "using_example"}
