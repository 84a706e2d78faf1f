"""Tests for configuration loading."""

from pathlib import Path
from unittest.mock import patch

import pytest
from justnotes.config import Config, ContentConfig, ServerConfig


class TestConfigLoad:
    """Tests for Config.load()."""

    def test__explicit_path__loads_config(self, tmp_path: Path) -> None:
        """Load config from explicit path."""
        config_file = tmp_path / "justnotes.toml"
        config_file.write_text("""
[server]
host = "0.0.0.0"
port = 3000

[content]
index_path = "content/vtu.json"
""")

        config = Config.load(config_file)

        assert config.server.host == "0.0.0.0"
        assert config.server.port == 3000
        assert config.content.index_path == tmp_path / "content/vtu.json"
        assert config.config_path == config_file

    def test__minimal_config__uses_defaults(self, tmp_path: Path) -> None:
        """Load minimal config with defaults relative to config file."""
        config_file = tmp_path / "justnotes.toml"
        config_file.write_text("")

        config = Config.load(config_file)

        assert config.server.host == "127.0.0.1"
        assert config.server.port == 8080
        assert config.content.index_path == tmp_path / "data" / "curriculum.json"

    def test__missing_explicit_path__raises_error(self, tmp_path: Path) -> None:
        """Raise FileNotFoundError for missing explicit config file."""
        config_file = tmp_path / "nonexistent.toml"

        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            Config.load(config_file)

    def test__no_path_no_discovery__returns_defaults(self) -> None:
        """Return defaults when no config file found."""
        with patch.object(Config, "_discover_config", return_value=None):
            config = Config.load()

        assert config.server.port == 8080
        assert config.content.index_path == Path("data/curriculum.json")
        assert config.config_path is None

    def test__invalid_toml__raises_error(self, tmp_path: Path) -> None:
        """Raise ValueError for unparsable TOML."""
        config_file = tmp_path / "justnotes.toml"
        config_file.write_text("[server\nport = ")

        with pytest.raises(ValueError, match="Invalid TOML"):
            Config.load(config_file)


class TestConfigDiscovery:
    """Tests for config file discovery."""

    def test__config_in_current_dir__found(self, tmp_path: Path) -> None:
        """Find config in current directory."""
        config_file = tmp_path / "justnotes.toml"
        config_file.write_text("[server]\nport = 9000")

        with patch("pathlib.Path.cwd", return_value=tmp_path):
            discovered = Config._discover_config()

        assert discovered == config_file

    def test__config_in_parent_dir__found(self, tmp_path: Path) -> None:
        """Find config in parent directory."""
        config_file = tmp_path / "justnotes.toml"
        config_file.write_text("[server]\nport = 9000")
        subdir = tmp_path / "site" / "data"
        subdir.mkdir(parents=True)

        with patch("pathlib.Path.cwd", return_value=subdir):
            discovered = Config._discover_config()

        assert discovered == config_file

    def test__no_config__returns_none(self, tmp_path: Path) -> None:
        """Return None when no config found."""
        with patch("pathlib.Path.cwd", return_value=tmp_path):
            discovered = Config._discover_config()

        assert discovered is None


class TestServerConfigParsing:
    """Tests for server config section parsing."""

    def test__invalid_host_type__raises_error(self, tmp_path: Path) -> None:
        """Raise ValueError when host is not a string."""
        config_file = tmp_path / "justnotes.toml"
        config_file.write_text("[server]\nhost = 12345\n")

        with pytest.raises(ValueError, match="server.host must be a string"):
            Config.load(config_file)

    def test__invalid_port_type__raises_error(self, tmp_path: Path) -> None:
        """Raise ValueError when port is not an integer."""
        config_file = tmp_path / "justnotes.toml"
        config_file.write_text('[server]\nport = "3000"\n')

        with pytest.raises(ValueError, match="server.port must be an integer"):
            Config.load(config_file)

    def test__non_table_section__raises_error(self, tmp_path: Path) -> None:
        """Raise ValueError when server is not a table."""
        config_file = tmp_path / "justnotes.toml"
        config_file.write_text('server = "localhost"\n')

        with pytest.raises(ValueError, match="server section must be a dictionary"):
            Config.load(config_file)


class TestContentConfigParsing:
    """Tests for content config section parsing."""

    def test__invalid_index_path_type__raises_error(self, tmp_path: Path) -> None:
        """Raise ValueError when index_path is not a string."""
        config_file = tmp_path / "justnotes.toml"
        config_file.write_text("[content]\nindex_path = 1\n")

        with pytest.raises(ValueError, match="content.index_path must be a string"):
            Config.load(config_file)


class TestWithOverrides:
    """Tests for Config.with_overrides()."""

    @pytest.fixture
    def config(self) -> Config:
        return Config(
            server=ServerConfig(host="127.0.0.1", port=8080),
            content=ContentConfig(index_path=Path("data/curriculum.json")),
        )

    def test__no_overrides__returns_equal_config(self, config: Config) -> None:
        """Return equal config when nothing is overridden."""
        assert config.with_overrides() == config

    def test__port_override__keeps_host(self, config: Config) -> None:
        """Override port only."""
        result = config.with_overrides(port=9000)

        assert result.server.port == 9000
        assert result.server.host == "127.0.0.1"

    def test__index_override__original_unchanged(self, config: Config) -> None:
        """Override index path without touching the original."""
        result = config.with_overrides(index_path=Path("other.json"))

        assert result.content.index_path == Path("other.json")
        assert config.content.index_path == Path("data/curriculum.json")
