"""Tests for store configuration parsing.

Run with: pytest tests/test_settings.py -v
"""

import pytest
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from config.settings import require_env, store_database


class TestRequireEnv:
    def test_missing_value_fails_fast(self, monkeypatch):
        monkeypatch.delenv("STOREFRONT_STORE_KEY", raising=False)
        with pytest.raises(ImproperlyConfigured):
            require_env("STOREFRONT_STORE_KEY")

    def test_blank_value_fails_fast(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_STORE_URL", "   ")
        with pytest.raises(ImproperlyConfigured):
            require_env("STOREFRONT_STORE_URL")

    def test_present_value_is_returned(self, monkeypatch):
        monkeypatch.setenv("STOREFRONT_STORE_URL", "sqlite:///db.sqlite3")
        assert require_env("STOREFRONT_STORE_URL") == "sqlite:///db.sqlite3"


class TestStoreDatabase:
    def test_postgres_url_uses_key_as_password(self):
        config = store_database("postgres://shop@db.internal:6543/tickets", "s3cret", 5)
        assert config["ENGINE"] == "django.db.backends.postgresql"
        assert (config["NAME"], config["USER"], config["PASSWORD"]) == ("tickets", "shop", "s3cret")
        assert (config["HOST"], config["PORT"]) == ("db.internal", "6543")
        assert config["OPTIONS"]["options"] == "-c statement_timeout=5000"

    def test_sqlite_file_url(self):
        assert store_database("sqlite:///db.sqlite3", "unused", 5)["NAME"] == "db.sqlite3"

    def test_sqlite_memory_url(self):
        assert store_database("sqlite://:memory:", "unused", 5)["NAME"] == ":memory:"

    def test_unknown_scheme_is_rejected(self):
        with pytest.raises(ImproperlyConfigured):
            store_database("mysql://db/tickets", "key", 5)


class TestStorefrontSettings:
    def test_overrides_keep_base_keys(self):
        storefront = settings.STOREFRONT
        assert storefront["ORDER_NUMBER_PREFIX"] == "BE"
        assert storefront["ORDER_NUMBER_ATTEMPTS"] == 3
        assert storefront["BANK_TRANSFER"]["bic"] == "TESTFRPPXXX"
