#!/usr/bin/env python3
"""
Google Drive MCP Server

Exposes Drive, Docs, Slides and Sheets operations as MCP tools.

Usage:
    python main.py                                   # stdio transport
    python main.py --transport streamable-http --port 8000
"""
import argparse
import logging
import sys

from core.config import VALID_TRANSPORTS, load_config
from core.server import create_server
from core.services import build_workspace_services

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    # stdout carries the stdio MCP stream, so logs go to stderr
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    # Suppress googleapiclient discovery cache warning
    logging.getLogger("googleapiclient.discovery_cache").setLevel(logging.ERROR)


def main() -> None:
    parser = argparse.ArgumentParser(description="Google Drive MCP Server")
    parser.add_argument("--transport", choices=VALID_TRANSPORTS, help="Transport mode (overrides MCP_TRANSPORT)")
    parser.add_argument("--host", type=str, help="Bind host for streamable-http (overrides MCP_HOST)")
    parser.add_argument("--port", type=int, help="Bind port for streamable-http (overrides MCP_PORT)")
    args = parser.parse_args()

    config = load_config()
    if args.transport:
        config.transport = args.transport
    if args.host:
        config.host = args.host
    if args.port:
        config.port = args.port

    configure_logging(config.log_level)

    try:
        services = build_workspace_services(config)
    except Exception as e:
        logger.error(f"Failed to initialize Google services: {e}", exc_info=True)
        sys.exit(1)

    server = create_server(services, config)

    logger.info(f"Starting server (transport: {config.transport})")
    if config.transport == "streamable-http":
        server.run(transport="streamable-http", host=config.host, port=config.port)
    else:
        server.run()


if __name__ == "__main__":
    main()
