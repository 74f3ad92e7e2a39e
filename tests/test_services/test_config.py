"""
Tests for configuration selection and production validation.
"""

import pytest

from app import create_app
from app.config import ProductionConfig


class TestCreateApp:
    """Tests for config selection in the application factory."""

    def test_unknown_config_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown config"):
            create_app("staging")

    def test_testing_config_disables_csrf(self, app):
        assert app.config["TESTING"] is True
        assert app.config["WTF_CSRF_ENABLED"] is False

    def test_page_size_is_ten(self, app):
        assert app.config["ORGANIZATIONS_PAGE_SIZE"] == 10


class TestValidateProductionSecrets:
    """Tests for ProductionConfig.validate_production_secrets()."""

    def test_default_secret_key_fails(self):
        with pytest.raises(RuntimeError, match="SECRET_KEY"):
            ProductionConfig.validate_production_secrets(
                {
                    "SECRET_KEY": "dev-secret-change-me",
                    "SQLALCHEMY_DATABASE_URI": "postgresql+psycopg://db/orgs",
                }
            )

    def test_missing_database_url_fails(self):
        with pytest.raises(RuntimeError, match="DATABASE_URL"):
            ProductionConfig.validate_production_secrets(
                {"SECRET_KEY": "a-real-secret", "SQLALCHEMY_DATABASE_URI": ""}
            )

    def test_debug_logging_only_warns(self, caplog):
        ProductionConfig.validate_production_secrets(
            {
                "SECRET_KEY": "a-real-secret",
                "SQLALCHEMY_DATABASE_URI": "postgresql+psycopg://db/orgs",
                "LOG_LEVEL": "DEBUG",
            }
        )

        assert "LOG_LEVEL=DEBUG" in caplog.text
