"""Tests for multi-source settings resolution."""

import logging

import pytest

from rql_client.config import SettingResolver
from rql_client.config.exceptions import SettingFileError, SettingNotFoundError


class TestSettingResolverInit:
    """Test SettingResolver initialization."""

    def test_init_default(self):
        """Test default initialization loads dotenv."""
        resolver = SettingResolver()
        assert resolver._dotenv_loaded

    def test_init_skip_dotenv(self):
        """Test initialization with dotenv loading disabled."""
        resolver = SettingResolver(load_dotenv=False)
        assert not resolver._dotenv_loaded

    def test_init_with_custom_dotenv_path(self, tmp_path, monkeypatch):
        """Test that values from a custom .env file become resolvable."""
        dotenv_file = tmp_path / ".env"
        dotenv_file.write_text("TEST_DOTENV_HOST=dev.example.io\n")
        monkeypatch.delenv("TEST_DOTENV_HOST", raising=False)

        resolver = SettingResolver(dotenv_path=str(dotenv_file))

        assert resolver._dotenv_loaded
        assert resolver.resolve(env_var_name="TEST_DOTENV_HOST") == "dev.example.io"

    def test_dotenv_loading_error_handled_gracefully(self, tmp_path):
        """Test that an unreadable .env path does not prevent resolution."""
        dotenv_path = tmp_path / "not_a_file"
        dotenv_path.mkdir()

        resolver = SettingResolver(dotenv_path=str(dotenv_path))

        assert resolver._dotenv_loaded is True
        assert resolver.resolve(value="works") == "works"


class TestSettingResolverResolve:
    """Test resolution priority."""

    def test_explicit_value_overrides_all(self, monkeypatch):
        monkeypatch.setenv("TEST_PRIORITY_KEY", "env-value")
        resolver = SettingResolver(load_dotenv=False)

        result = resolver.resolve(value="explicit-value", env_var_name="TEST_PRIORITY_KEY", default="default-value")

        assert result == "explicit-value"

    def test_environment_overrides_default(self, monkeypatch):
        monkeypatch.setenv("TEST_PRIORITY_KEY", "env-value")
        resolver = SettingResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="TEST_PRIORITY_KEY", default="default-value") == "env-value"

    def test_default_used_when_nothing_else_set(self):
        resolver = SettingResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="NONEXISTENT_VAR", default="default-value") == "default-value"

    def test_returns_none_when_not_found(self):
        resolver = SettingResolver(load_dotenv=False)

        assert resolver.resolve(env_var_name="NONEXISTENT_VAR") is None

    def test_raises_when_required_and_not_found(self):
        resolver = SettingResolver(load_dotenv=False)

        with pytest.raises(SettingNotFoundError) as exc_info:
            resolver.resolve(env_var_name="NONEXISTENT_VAR", required=True)

        assert "Required setting not found" in str(exc_info.value)
        assert exc_info.value.env_var_name == "NONEXISTENT_VAR"


class TestSettingResolverFromFile:
    """Test file-based resolution."""

    def test_explicit_path_is_stripped(self, tmp_path):
        token_file = tmp_path / "token"
        token_file.write_text("  file-token-abc123  \n")

        resolver = SettingResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path=str(token_file)) == "file-token-abc123"

    def test_path_from_env_var(self, tmp_path, monkeypatch):
        token_file = tmp_path / "token"
        token_file.write_text("token-from-env-path")
        monkeypatch.setenv("TEST_TOKEN_FILE", str(token_file))

        resolver = SettingResolver(load_dotenv=False)

        assert resolver.resolve_from_file(env_var_name="TEST_TOKEN_FILE") == "token-from-env-path"

    def test_path_with_env_var_expansion(self, tmp_path, monkeypatch):
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "token").write_text("expanded-token")
        monkeypatch.setenv("TEST_CONFIG_DIR", str(config_dir))

        resolver = SettingResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path="$TEST_CONFIG_DIR/token") == "expanded-token"

    def test_missing_file_returns_none(self):
        resolver = SettingResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path="/nonexistent/path/to/token") is None

    def test_missing_file_raises_when_required(self):
        resolver = SettingResolver(load_dotenv=False)

        with pytest.raises(SettingFileError) as exc_info:
            resolver.resolve_from_file(file_path="/nonexistent/path/to/token", required=True)

        assert "not found" in str(exc_info.value)

    def test_directory_instead_of_file(self, tmp_path):
        not_a_file = tmp_path / "dir_not_file"
        not_a_file.mkdir()
        resolver = SettingResolver(load_dotenv=False)

        assert resolver.resolve_from_file(file_path=str(not_a_file)) is None
        with pytest.raises(SettingFileError):
            resolver.resolve_from_file(file_path=str(not_a_file), required=True)

    def test_no_path_provided(self):
        resolver = SettingResolver(load_dotenv=False)

        assert resolver.resolve_from_file() is None
        with pytest.raises(SettingFileError) as exc_info:
            resolver.resolve_from_file(env_var_name="TEST_UNSET_FILE", required=True)

        assert "TEST_UNSET_FILE" in str(exc_info.value)


class TestMasking:
    """Secret values never reach the logs."""

    def test_value_is_masked_in_debug_logs(self, caplog):
        caplog.set_level(logging.DEBUG)

        SettingResolver(load_dotenv=False).resolve(value="super-secret-token")

        assert "super-secret-token" not in caplog.text
        assert "***" in caplog.text

    def test_masking_can_be_disabled(self, caplog):
        caplog.set_level(logging.DEBUG)

        SettingResolver(load_dotenv=False).resolve(value="dev.example.io", mask_in_logs=False)

        assert "dev.example.io" in caplog.text

    def test_file_values_are_masked(self, tmp_path, caplog):
        caplog.set_level(logging.DEBUG)
        token_file = tmp_path / "token"
        token_file.write_text("file-secret-xyz")

        SettingResolver(load_dotenv=False).resolve_from_file(file_path=str(token_file))

        assert "file-secret-xyz" not in caplog.text
        assert "***" in caplog.text
