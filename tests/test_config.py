"""Integration tests for configuration module."""

from pathlib import Path

import pytest

from jobboard.config import (
    BoardConfig,
    ConfigurationError,
    EnvironmentConfig,
    FeedFormat,
    SortOrder,
    apply_environment_overrides,
    load_config,
    load_environment_config,
    parse_config,
    validate_config_file,
)
from jobboard.config.validators import check_for_warnings

# Test fixtures directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def store_env(monkeypatch):
    """Set store credentials in the environment."""
    monkeypatch.setenv("AIRTABLE_ACCESS_TOKEN", "patTestToken")
    monkeypatch.setenv("AIRTABLE_BASE_ID", "appTestBase")


class TestConfigurationLoading:
    """Test configuration loading from YAML files."""

    def test_load_valid_config(self, store_env):
        """Test loading a valid configuration file."""
        board_config, env_config = load_config(FIXTURES_DIR / "valid_config.yaml")

        # Site URL loses its trailing slash
        assert board_config.site.title == "Test Board"
        assert board_config.site.url == "https://jobs.test.example"

        assert board_config.job_listings.default_per_page == 2
        assert board_config.job_listings.default_sort_order == "salary"

        assert board_config.feed.formats.rss is True
        assert board_config.feed.formats.atom is False
        assert board_config.feed.formats.json_feed is True
        assert board_config.feed.description_length == 100

        assert board_config.store.table_name == "Postings"
        assert board_config.store.http_request_timeout == 10
        assert board_config.store.page_size == 50

        assert board_config.logging.level == "DEBUG"
        assert board_config.logging.format == "json"

        assert env_config.store_configured
        assert env_config.airtable_base_id == "appTestBase"

    def test_load_minimal_config(self):
        """Test loading a minimal configuration with defaults."""
        board_config, env_config = load_config(FIXTURES_DIR / "minimal_config.yaml")

        assert board_config.site.title == "Minimal Board"
        assert board_config.site.url == "http://localhost:3000"
        assert board_config.job_listings.default_per_page == 10
        assert board_config.job_listings.default_sort_order == SortOrder.NEWEST.value
        assert board_config.feed.enabled is True
        assert board_config.feed.title is None
        assert board_config.feed_title() == "Minimal Board | Job Feed"
        assert board_config.store.table_name == "Jobs"
        assert board_config.logging.level == "INFO"
        assert board_config.logging.format == "key-value"

        assert not env_config.store_configured
        assert env_config.environment == "local"

    def test_invalid_config_reports_every_error(self):
        """Test that all validation errors are collected into one exception."""
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(FIXTURES_DIR / "invalid_config.yaml")

        error = exc_info.value
        assert error.message == "Configuration validation failed"
        joined = "\n".join(error.errors)
        assert "site -> url" in joined
        assert "job_listings -> default_per_page" in joined
        assert "job_listings -> default_sort_order" in joined
        assert error.suggestions

    def test_every_format_disabled_rejected(self):
        with pytest.raises(ConfigurationError, match="validation failed") as exc_info:
            parse_config({"feed": {"formats": {"rss": False, "atom": False, "json": False}}})

        assert "every format is disabled" in "\n".join(exc_info.value.errors)

    def test_disabled_feed_may_disable_every_format(self):
        config = parse_config({"feed": {"enabled": False, "formats": {"rss": False, "atom": False, "json": False}}})
        assert config.feed.enabled is False

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Specified configuration file not found"):
            load_config(tmp_path / "nope.yaml")

    def test_fallback_to_config_directory(self, tmp_path, monkeypatch):
        """Test the config/config.yaml fallback location."""
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "config.yaml").write_text("site:\n  title: Fallback\n")
        monkeypatch.chdir(tmp_path)

        board_config, _ = load_config()

        assert board_config.site.title == "Fallback"

    def test_current_directory_preferred(self, tmp_path, monkeypatch):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "config.yaml").write_text("site:\n  title: Nested\n")
        (tmp_path / "config.yaml").write_text("site:\n  title: Top\n")
        monkeypatch.chdir(tmp_path)

        board_config, _ = load_config()

        assert board_config.site.title == "Top"

    def test_no_config_file_found(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        with pytest.raises(ConfigurationError, match="Configuration file not found") as exc_info:
            load_config()

        assert len(exc_info.value.errors) == 2

    def test_empty_file_means_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        board_config, _ = load_config(config_file)

        assert board_config == BoardConfig()

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("site: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Failed to parse YAML"):
            load_config(config_file)

    def test_top_level_list_rejected(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- one\n- two\n")

        with pytest.raises(ConfigurationError, match="mapping at the top level"):
            load_config(config_file)

    def test_warnings_emitted(self, tmp_path):
        """Test that suspicious but valid settings raise UserWarning."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("site:\n  url: http://localhost:8080\n")

        with pytest.warns(UserWarning, match="local address"):
            load_config(config_file)


class TestEnvironmentOverrides:
    """Test environment variable handling."""

    def test_table_name_and_app_url_override(self, monkeypatch):
        monkeypatch.setenv("AIRTABLE_TABLE_NAME", "Live Jobs")
        monkeypatch.setenv("APP_URL", "https://jobs.example.org/")

        board_config, env_config = load_config(FIXTURES_DIR / "valid_config.yaml")

        assert board_config.store.table_name == "Live Jobs"
        assert board_config.site.url == "https://jobs.example.org"
        # Other sections untouched
        assert board_config.site.title == "Test Board"
        assert board_config.store.page_size == 50

    def test_no_overrides_returns_same_object(self):
        board_config = BoardConfig()
        assert apply_environment_overrides(board_config, EnvironmentConfig()) is board_config

    def test_log_level_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("ENVIRONMENT", "staging")

        env_config = load_environment_config()

        assert env_config.log_level == "DEBUG"
        assert env_config.environment == "staging"

    def test_invalid_environment_values(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        monkeypatch.setenv("APP_URL", "jobs.example.org")

        with pytest.raises(ConfigurationError) as exc_info:
            load_environment_config()

        assert len(exc_info.value.errors) == 2

    def test_partial_credentials_not_configured(self, monkeypatch):
        monkeypatch.setenv("AIRTABLE_ACCESS_TOKEN", "patTestToken")

        assert not load_environment_config().store_configured


class TestConfigValidation:
    """Test configuration validation helpers."""

    def test_validate_valid_config(self, capsys):
        assert validate_config_file(FIXTURES_DIR / "valid_config.yaml") is True
        assert "✓" in capsys.readouterr().out

    def test_validate_invalid_config(self, capsys):
        assert validate_config_file(FIXTURES_DIR / "invalid_config.yaml") is False
        assert "✗" in capsys.readouterr().out

    def test_check_for_warnings(self):
        warnings = check_for_warnings(
            {
                "feed": {"enabled": False, "description_length": 5000},
                "store": {"page_size": 5},
                "job_listings": {"default_per_page": 80},
            }
        )

        assert len(warnings) == 4

    def test_no_warnings_for_defaults(self):
        assert check_for_warnings({}) == []

    def test_error_message_rendering(self):
        error = ConfigurationError("Broken", errors=["first", "second"], suggestions=["fix it"])

        text = str(error)
        assert text.startswith("Broken")
        assert "  1. first" in text
        assert "  2. second" in text
        assert "  - fix it" in text

    def test_feed_format_values(self):
        assert [fmt.value for fmt in FeedFormat] == ["rss", "atom", "json"]
