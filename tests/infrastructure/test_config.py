"""Settings and logging setup."""

import json
import logging

import pytest

from storefront.infrastructure.config import Settings
from storefront.infrastructure.observability import JSONFormatter, setup_logging


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("STOREFRONT_DATABASE_URL", raising=False)
        settings = Settings(_env_file=None)
        assert settings.database_url == "sqlite:///storefront.db"
        assert settings.strict_status_transitions is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_STRICT_STATUS_TRANSITIONS", "true")
        monkeypatch.setenv("STOREFRONT_DATABASE_URL", "postgresql://u:p@db/shop")
        settings = Settings(_env_file=None)
        assert settings.strict_status_transitions is True
        assert settings.database_url == "postgresql+psycopg2://u:p@db/shop"

    def test_bad_log_format(self):
        with pytest.raises(ValueError):
            Settings(_env_file=None, log_format="xml")


class TestLogging:

    def test_json_formatter_surfaces_extras(self):
        record = logging.LogRecord("storefront", logging.INFO, __file__, 1, "hello", None, None)
        record.order_id = 7
        payload = json.loads(JSONFormatter().format(record))
        assert payload["message"] == "hello"
        assert payload["order_id"] == 7
        assert "customer_id" not in payload

    def test_setup_is_idempotent(self):
        setup_logging("INFO", "json")
        setup_logging("INFO", "text")
        installed = [
            h for h in logging.getLogger().handlers
            if type(h).__name__ == "_StorefrontHandler"
        ]
        assert len(installed) == 1
        assert not isinstance(installed[0].formatter, JSONFormatter)
