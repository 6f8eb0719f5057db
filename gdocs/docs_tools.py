"""
Google Docs MCP Tools

This module provides MCP tools for reading a Google Doc and replacing its
entire content.
"""

import logging

from core.params import ParamSpec, STRING, validate_params
from core.services import WorkspaceServices
from core.utils import handle_tool_errors
from gdocs.docs_helpers import (
    extract_document_text,
    plan_document_replacement,
    prune_noop_requests,
)

logger = logging.getLogger(__name__)

GET_DOCUMENT_PARAMS = (
    ParamSpec("documentId", STRING, required=True),
)

REPLACE_DOCUMENT_CONTENT_PARAMS = (
    ParamSpec("documentId", STRING, required=True),
    ParamSpec("content", STRING, required=True, allow_empty=True),
)


async def _get_document_impl(services: WorkspaceServices, document_id: str) -> str:
    params = validate_params(GET_DOCUMENT_PARAMS, {"documentId": document_id})
    document_id = params["documentId"]

    doc_data = await services.get_document_structure(document_id)
    content = extract_document_text(doc_data)

    logger.info(f"[get_document] Retrieved {len(content)} characters from document {document_id}")
    return content


async def _replace_document_content_impl(
    services: WorkspaceServices, document_id: str, content: str
) -> str:
    """
    Replace the whole body of a document with plain text.

    Reads the current structure, plans [delete, insert] against it, and submits
    the batch in a single batchUpdate. The document's required trailing newline
    survives. There is no version check: a concurrent writer's batch may land
    first and will be overwritten.
    """
    params = validate_params(
        REPLACE_DOCUMENT_CONTENT_PARAMS, {"documentId": document_id, "content": content}
    )
    document_id = params["documentId"]
    content = params["content"]

    doc_data = await services.get_document_structure(document_id)
    requests = prune_noop_requests(plan_document_replacement(doc_data, content))

    if not requests:
        logger.info(f"[replace_document_content] Document {document_id} already empty; nothing to submit")
        return "Document updated successfully"

    await services.submit_document_batch(document_id, requests)
    logger.info(
        f"[replace_document_content] Submitted {len(requests)} requests to document {document_id}"
    )
    return "Document updated successfully"


def create_docs_tools(server, services: WorkspaceServices):
    """
    Register the Docs tools on a FastMCP server.

    Args:
        server: FastMCP instance
        services: Shared WorkspaceServices context

    Returns:
        Dict mapping tool name to the registered coroutine function
    """

    @server.tool()
    @handle_tool_errors("get_document", "Failed to get document content")
    async def get_document(documentId: str) -> str:
        """
        Get the text content of a Google Document.

        Args:
            documentId (str): The ID of the Google Document. Required.

        Returns:
            str: The document's plain text.
        """
        logger.info(f"[get_document] Invoked. Document ID: '{documentId}'")
        return await _get_document_impl(services, documentId)

    @server.tool()
    @handle_tool_errors("replace_document_content", "Failed to update document")
    async def replace_document_content(documentId: str, content: str) -> str:
        """
        Replace the entire content of a Google Document with new plain text.

        Existing text is deleted and the new text inserted at the start in one
        atomic batch. An empty content string clears the document.

        Args:
            documentId (str): The ID of the Google Document. Required.
            content (str): The new content for the document. Required.

        Returns:
            str: Confirmation message.
        """
        logger.info(
            f"[replace_document_content] Invoked. Document ID: '{documentId}', Content length: {len(content or '')}"
        )
        return await _replace_document_content_impl(services, documentId, content)

    return {
        "get_document": get_document,
        "replace_document_content": replace_document_content,
    }
