"""
Tests for Configuration Validation

Unit tests for config/validators.py covering:
- Accepting the default configuration
- Collecting every invalid setting into one ConfigurationError
- The configuration summary
"""

import pytest
import logging
import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import settings
from config.validators import get_config_summary, validate_settings
from data.models import ContentSourceMode
from utils.exceptions import ConfigurationError, ContentError


@pytest.fixture
def valid_settings(monkeypatch, tmp_path):
    """Patch settings to a known-good configuration."""
    monkeypatch.setattr(settings, 'CONTENT_SOURCE_MODE', ContentSourceMode.FILESYSTEM)
    monkeypatch.setattr(settings, 'API_BASE_URL', 'http://localhost:3000/api/v1')
    monkeypatch.setattr(settings, 'SITE_BASE_URL', 'https://clubmarevabeirut.com')
    monkeypatch.setattr(settings, 'CONTENT_DATA_DIR', tmp_path)
    monkeypatch.setattr(settings, 'API_TIMEOUT', 10)
    return monkeypatch


# =============================================================================
# Validation Tests
# =============================================================================

class TestValidateSettings:
    """Tests for validate_settings."""

    def test_valid_configuration(self, valid_settings):
        """A valid configuration passes."""
        assert validate_settings() is True

    def test_settings_module_delegates(self, valid_settings):
        """settings.validate_settings runs the same checks."""
        assert settings.validate_settings() is True

    def test_bad_api_url_only_matters_in_remote_mode(self, valid_settings):
        """The API URL is checked only when the API is used."""
        valid_settings.setattr(settings, 'API_BASE_URL', 'not-a-url')
        assert validate_settings() is True

        valid_settings.setattr(settings, 'CONTENT_SOURCE_MODE', ContentSourceMode.REMOTE)
        with pytest.raises(ConfigurationError) as exc_info:
            validate_settings()

        assert 'API_BASE_URL' in str(exc_info.value)

    def test_all_errors_reported_together(self, valid_settings):
        """Every problem is listed in one error."""
        valid_settings.setattr(settings, 'SITE_BASE_URL', 'clubmareva')
        valid_settings.setattr(settings, 'API_TIMEOUT', 0)
        valid_settings.setattr(settings, 'EXCERPT_LENGTH', 0)

        with pytest.raises(ConfigurationError) as exc_info:
            validate_settings()

        message = str(exc_info.value)
        assert message.startswith('Configuration validation failed:')
        assert 'SITE_BASE_URL' in message
        assert 'API_TIMEOUT must be positive' in message
        assert 'EXCERPT_LENGTH must be between' in message

    def test_missing_data_dir_is_a_warning(self, valid_settings, tmp_path, capture_logs):
        """A missing content directory does not fail validation."""
        valid_settings.setattr(settings, 'CONTENT_DATA_DIR', tmp_path / 'missing')

        assert validate_settings() is True
        assert any(r.levelno == logging.WARNING and 'Content data directory not found' in r.getMessage()
                   for r in capture_logs)

    def test_overridden_mode_is_validated(self, valid_settings):
        """An explicit REMOTE mode checks the API URL even when settings say filesystem."""
        valid_settings.setattr(settings, 'API_BASE_URL', 'not-a-url')

        with pytest.raises(ConfigurationError) as exc_info:
            validate_settings(mode=ContentSourceMode.REMOTE)

        assert 'API_BASE_URL' in str(exc_info.value)

    def test_overridden_data_dir_is_checked(self, valid_settings, tmp_path, capture_logs):
        """The data directory actually used is the one checked."""
        valid_settings.setattr(settings, 'CONTENT_DATA_DIR', tmp_path / 'missing')

        assert validate_settings(data_dir=str(tmp_path)) is True
        assert not any('Content data directory not found' in r.getMessage() for r in capture_logs)

        validate_settings(data_dir=str(tmp_path / 'elsewhere'))
        assert any('elsewhere' in r.getMessage() for r in capture_logs if r.levelno == logging.WARNING)

    def test_configuration_error_is_a_content_error(self):
        """ConfigurationError belongs to the content error hierarchy."""
        assert issubclass(ConfigurationError, ContentError)


class TestConfigSummary:
    """Tests for get_config_summary."""

    def test_summary(self, valid_settings):
        """The summary reports mode, API and data directory."""
        summary = get_config_summary()

        assert summary['source']['mode'] == 'filesystem'
        assert summary['source']['api_base_url'] == 'http://localhost:3000/api/v1'
        assert summary['revalidate']['brands'] == settings.BRANDS_REVALIDATE_SECONDS
