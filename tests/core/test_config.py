"""
Tests for environment-driven configuration.
"""
import pytest

from core.config import WorkspaceConfig, load_config

CONFIG_VARS = ("GOOGLE_CLOUD_QUOTA_PROJECT_ID", "MCP_TRANSPORT", "MCP_HOST", "MCP_PORT", "LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch):
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self, clean_env):
        assert load_config(env_file=None) == WorkspaceConfig()

    def test_reads_environment(self, clean_env):
        clean_env.setenv("GOOGLE_CLOUD_QUOTA_PROJECT_ID", "billing-project")
        clean_env.setenv("MCP_TRANSPORT", "streamable-http")
        clean_env.setenv("MCP_HOST", "127.0.0.1")
        clean_env.setenv("MCP_PORT", "9090")
        clean_env.setenv("LOG_LEVEL", "debug")

        config = load_config(env_file=None)

        assert config.quota_project_id == "billing-project"
        assert config.transport == "streamable-http"
        assert config.host == "127.0.0.1"
        assert config.port == 9090
        assert config.log_level == "DEBUG"

    def test_empty_quota_project_is_none(self, clean_env):
        clean_env.setenv("GOOGLE_CLOUD_QUOTA_PROJECT_ID", "")
        assert load_config(env_file=None).quota_project_id is None

    def test_invalid_transport(self, clean_env):
        clean_env.setenv("MCP_TRANSPORT", "sse")
        with pytest.raises(ValueError, match="MCP_TRANSPORT"):
            load_config(env_file=None)

    def test_invalid_port(self, clean_env):
        clean_env.setenv("MCP_PORT", "eighty")
        with pytest.raises(ValueError, match="MCP_PORT"):
            load_config(env_file=None)

    def test_env_file_does_not_override_environment(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("MCP_HOST=10.0.0.1\nMCP_PORT=7000\n")
        clean_env.setenv("MCP_PORT", "7100")
        # Registers MCP_HOST for removal on teardown once load_dotenv sets it
        clean_env.setenv("MCP_HOST", "")
        clean_env.delenv("MCP_HOST")

        config = load_config(env_file=str(env_file))

        assert config.host == "10.0.0.1"
        assert config.port == 7100
