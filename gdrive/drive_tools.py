"""
Google Drive MCP Tools

This module provides MCP tools for searching and listing files in Google Drive.
"""

import json
import logging

from core.params import NUMBER, ParamSpec, STRING, validate_params
from core.services import WorkspaceServices
from core.utils import handle_tool_errors
from gdrive.drive_helpers import MAX_PAGE_SIZE

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 10

SEARCH_FILES_PARAMS = (
    ParamSpec("query", STRING, required=True),
    ParamSpec("maxResults", NUMBER, default=DEFAULT_MAX_RESULTS, minimum=1, maximum=MAX_PAGE_SIZE),
)

LIST_FILES_PARAMS = (
    ParamSpec("folderId", STRING, default=""),
    ParamSpec("maxResults", NUMBER, default=DEFAULT_MAX_RESULTS, minimum=1, maximum=MAX_PAGE_SIZE),
)


async def _search_files_impl(services: WorkspaceServices, query: str, max_results) -> str:
    params = validate_params(SEARCH_FILES_PARAMS, {"query": query, "maxResults": max_results})

    files = await services.search_files(params["query"], params["maxResults"])
    logger.info(f"[search_files] Found {len(files)} files matching '{params['query']}'")
    return json.dumps({"files": files, "count": len(files)})


async def _list_files_impl(services: WorkspaceServices, folder_id: str, max_results) -> str:
    params = validate_params(LIST_FILES_PARAMS, {"folderId": folder_id, "maxResults": max_results})

    files = await services.list_files(params["folderId"], params["maxResults"])
    logger.info(f"[list_files] Listed {len(files)} files in folder '{params['folderId'] or 'root'}'")
    return json.dumps({"files": files, "count": len(files)})


def create_drive_tools(server, services: WorkspaceServices):
    """
    Register the Drive tools on a FastMCP server.

    Returns:
        Dict mapping tool name to the registered tool
    """

    @server.tool()
    @handle_tool_errors("search_files", "Failed to search files")
    async def search_files(query: str, maxResults: int = DEFAULT_MAX_RESULTS) -> str:
        """
        Search files in Google Drive by name.

        Args:
            query (str): File name or keyword to search. Required.
            maxResults (int): Maximum number of files to retrieve. Defaults to 10.

        Returns:
            str: JSON object with "files" (id, name, mimeType) and "count".
        """
        logger.info(f"[search_files] Invoked. Query: '{query}', Max results: {maxResults}")
        return await _search_files_impl(services, query, maxResults)

    @server.tool()
    @handle_tool_errors("list_files", "Failed to list files")
    async def list_files(folderId: str = "", maxResults: int = DEFAULT_MAX_RESULTS) -> str:
        """
        List files in a Google Drive folder.

        Args:
            folderId (str): The ID of the folder to list files from. If empty, lists files in My Drive root.
            maxResults (int): Maximum number of files to retrieve. Defaults to 10.

        Returns:
            str: JSON object with "files" (id, name, mimeType) and "count".
        """
        logger.info(f"[list_files] Invoked. Folder: '{folderId}', Max results: {maxResults}")
        return await _list_files_impl(services, folderId, maxResults)

    return {
        "search_files": search_files,
        "list_files": list_files,
    }
