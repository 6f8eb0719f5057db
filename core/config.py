"""
Server configuration.

Values come from the process environment, optionally seeded from a `.env`
file next to the project root.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

VALID_TRANSPORTS = ("stdio", "streamable-http")

dotenv_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env")


@dataclass
class WorkspaceConfig:
    """Runtime settings for the server process."""

    quota_project_id: Optional[str] = None
    transport: str = "stdio"
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"


def load_config(env_file: Optional[str] = dotenv_path) -> WorkspaceConfig:
    """
    Build a WorkspaceConfig from environment variables.

    Args:
        env_file: Optional .env file loaded first. Existing environment
                  variables take precedence over values in the file.

    Raises:
        ValueError: If MCP_TRANSPORT or MCP_PORT hold invalid values.
    """
    if env_file:
        load_dotenv(dotenv_path=env_file)

    transport = os.getenv("MCP_TRANSPORT", "stdio")
    if transport not in VALID_TRANSPORTS:
        raise ValueError(
            f"Invalid MCP_TRANSPORT '{transport}'. Expected one of: {', '.join(VALID_TRANSPORTS)}"
        )

    port_value = os.getenv("MCP_PORT", "8000")
    try:
        port = int(port_value)
    except ValueError as e:
        raise ValueError(f"Invalid MCP_PORT '{port_value}': must be an integer") from e

    config = WorkspaceConfig(
        quota_project_id=os.getenv("GOOGLE_CLOUD_QUOTA_PROJECT_ID") or None,
        transport=transport,
        host=os.getenv("MCP_HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
    logger.debug(f"Loaded configuration: transport={config.transport}, quota_project={config.quota_project_id}")
    return config
