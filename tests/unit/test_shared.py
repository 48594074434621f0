"""
Unit tests for shared configuration, errors and logging.
"""

import pytest
import structlog

from shared.config import AdapterSettings, get_settings
from shared.errors import ConfigurationError, PolicyIntegrityError, PolicyStoreException
from shared.logging import add_service_context, configure_logging, get_logger


class TestSettings:
    """Test cases for adapter settings."""

    def test_defaults(self, monkeypatch):
        """Test default connection coordinates."""
        monkeypatch.delenv("POLICY_STORE_DB_NAME", raising=False)
        monkeypatch.delenv("POLICY_STORE_COLLECTION_NAME", raising=False)

        settings = AdapterSettings()

        assert settings.db_name == "casbin"
        assert settings.collection_name == "casbin_rule"
        assert settings.server_selection_timeout_ms == 5000

    def test_environment_overrides(self, monkeypatch):
        """Test prefixed environment variables are honoured."""
        monkeypatch.setenv("POLICY_STORE_MONGO_URI", "mongodb://mongo:27017")
        monkeypatch.setenv("POLICY_STORE_COLLECTION_NAME", "rules")

        settings = get_settings()

        assert settings.mongo_uri == "mongodb://mongo:27017"
        assert settings.collection_name == "rules"

    def test_invalid_timeout(self):
        """Test invalid settings raise a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            get_settings(server_selection_timeout_ms=0)

        assert exc_info.value.code == "CONFIGURATION_ERROR"


class TestErrors:
    """Test cases for error types."""

    def test_integrity_error_fields(self):
        """Test integrity errors carry their code and details."""
        error = PolicyIntegrityError(details={"ptype": "p9"})

        assert isinstance(error, PolicyStoreException)
        assert error.code == "POLICY_INTEGRITY_ERROR"
        assert error.message == "Stored policy is malformed"
        assert error.details == {"ptype": "p9"}


class TestLogging:
    """Test cases for logging helpers."""

    def teardown_method(self):
        structlog.reset_defaults()

    def test_service_context(self):
        """Test service name is taken from the logger name."""
        event = add_service_context(None, "info", {"logger": "policy_store.persistence.mongo"})

        assert event["service"] == "policy_store"

    def test_configure_logging(self):
        """Test configured loggers can emit events."""
        configure_logging("policy_store", "debug")

        get_logger("policy_store.tests").debug("Configured", test=True)
