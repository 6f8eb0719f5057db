import logging
from importlib import metadata
from typing import Dict, Any

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from core.config import WorkspaceConfig
from core.services import WorkspaceServices
from gdocs.docs_tools import create_docs_tools
from gdrive.drive_tools import create_drive_tools
from gsheets.sheets_tools import create_sheets_tools
from gslides.slides_tools import create_slides_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "google_drive"
DISTRIBUTION_NAME = "google-drive-mcp"


def get_version() -> str:
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return "dev"


def register_tools(server: FastMCP, services: WorkspaceServices) -> Dict[str, Any]:
    """
    Register every tool on the server, bound to the shared services context.

    Returns:
        Dict mapping tool name to the registered tool
    """
    tools: Dict[str, Any] = {}
    tools.update(create_drive_tools(server, services))
    tools.update(create_docs_tools(server, services))
    tools.update(create_slides_tools(server, services))
    tools.update(create_sheets_tools(server, services))

    logger.info(f"Registered {len(tools)} tools: {', '.join(sorted(tools))}")
    return tools


def create_server(services: WorkspaceServices, config: WorkspaceConfig) -> FastMCP:
    """
    Build the FastMCP server with all tools registered.

    The services context is created once by the caller and shared by every
    tool invocation for the lifetime of the process.
    """
    server = FastMCP(name=SERVER_NAME)
    register_tools(server, services)

    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request):
        return JSONResponse(
            {
                "status": "healthy",
                "service": DISTRIBUTION_NAME,
                "version": get_version(),
                "transport": config.transport,
            }
        )

    logger.info(f"Server '{SERVER_NAME}' v{get_version()} created (transport: {config.transport})")
    return server
