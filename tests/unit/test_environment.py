"""Tests for environment configuration."""

from __future__ import annotations

import logging

import pytest

from roleatlas.core import environment
from roleatlas.core.environment import (
    CATALOG_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
    CatalogName,
    configure_logging,
    get_default_catalog,
    get_log_level,
    parse_catalog_name,
)


class TestParseCatalogName:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("content-production", CatalogName.CONTENT_PRODUCTION),
            ("content", CatalogName.CONTENT_PRODUCTION),
            ("Front-Office", CatalogName.FRONT_OFFICE),
            (" front_office ", CatalogName.FRONT_OFFICE),
            ("frontoffice", CatalogName.FRONT_OFFICE),
        ],
    )
    def test_known_names(self, value, expected):
        assert parse_catalog_name(value) == expected

    def test_unknown_name(self):
        assert parse_catalog_name("back-office") is None


class TestGetDefaultCatalog:
    def test_unset(self, monkeypatch):
        monkeypatch.delenv(CATALOG_ENV_VAR, raising=False)
        assert get_default_catalog() == CatalogName.CONTENT_PRODUCTION

    def test_blank(self, monkeypatch):
        monkeypatch.setenv(CATALOG_ENV_VAR, "  ")
        assert get_default_catalog() == CatalogName.CONTENT_PRODUCTION

    def test_front_office(self, monkeypatch):
        monkeypatch.setenv(CATALOG_ENV_VAR, "front-office")
        assert get_default_catalog() == CatalogName.FRONT_OFFICE

    def test_unknown_warns_and_defaults(self, monkeypatch, caplog):
        monkeypatch.setenv(CATALOG_ENV_VAR, "back-office")
        with caplog.at_level(logging.WARNING, logger="roleatlas.core.environment"):
            assert get_default_catalog() == CatalogName.CONTENT_PRODUCTION
        assert "back-office" in caplog.text


class TestLogging:
    def test_default_level(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
        assert get_log_level() == "WARNING"

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")
        assert get_log_level() == "DEBUG"

    def test_unknown_level_falls_back(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")
        assert get_log_level() == "WARNING"

    def test_configure_logging(self, monkeypatch):
        calls: list[dict] = []
        monkeypatch.setattr(environment.logging, "basicConfig", lambda **kw: calls.append(kw))
        configure_logging("info")
        assert calls == [{"level": logging.INFO, "format": environment.LOG_FORMAT}]

    def test_configure_logging_from_env(self, monkeypatch):
        calls: list[dict] = []
        monkeypatch.setattr(environment.logging, "basicConfig", lambda **kw: calls.append(kw))
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "ERROR")
        configure_logging()
        assert calls[0]["level"] == logging.ERROR

    def test_configure_logging_ignores_non_level_names(self, monkeypatch):
        calls: list[dict] = []
        monkeypatch.setattr(environment.logging, "basicConfig", lambda **kw: calls.append(kw))
        configure_logging("BASIC_FORMAT")
        assert calls[0]["level"] == logging.WARNING
