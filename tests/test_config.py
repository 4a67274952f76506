"""Tests for environment configuration."""

import logging

import pytest

from accessibility_checker import ScanTier
from accessibility_checker.log import setup_logging
from app import config


class TestConfig:

    def test_defaults(self, monkeypatch):
        for name in ("HOST", "PORT", "LOG_LEVEL", "DEFAULT_SCAN_TIER", "MAX_MARKUP_BYTES"):
            monkeypatch.delenv(name, raising=False)
        assert config.get_host() == "0.0.0.0"
        assert config.get_port() == 8000
        assert config.get_log_level() == "INFO"
        assert config.get_default_scan_tier() is ScanTier.STANDARD
        assert config.get_max_markup_bytes() == config.DEFAULT_MAX_MARKUP_BYTES == 5 * 1024 * 1024

    @pytest.mark.parametrize("raw,expected", [("full", ScanTier.FULL), (" FULL ", ScanTier.FULL), ("premium", ScanTier.STANDARD)])
    def test_default_scan_tier(self, monkeypatch, raw, expected):
        monkeypatch.setenv("DEFAULT_SCAN_TIER", raw)
        assert config.get_default_scan_tier() is expected

    @pytest.mark.parametrize("raw,expected", [("2048", 2048), ("-1", 5 * 1024 * 1024), ("lots", 5 * 1024 * 1024)])
    def test_max_markup_bytes(self, monkeypatch, raw, expected):
        monkeypatch.setenv("MAX_MARKUP_BYTES", raw)
        assert config.get_max_markup_bytes() == expected

    def test_invalid_port_and_log_level_fall_back(self, monkeypatch):
        monkeypatch.setenv("PORT", "http")
        monkeypatch.setenv("LOG_LEVEL", "loud")
        assert config.get_port() == 8000
        assert config.get_log_level() == "INFO"

    def test_log_level_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert config.get_log_level() == "DEBUG"


class TestSetupLogging:

    def test_accepts_level_names(self):
        logger = setup_logging("warning")
        assert logger.name == "accessibility_checker"
        assert logger.level == logging.WARNING

    def test_unknown_level_name_means_info(self):
        assert setup_logging("chatty").level == logging.INFO
