"""
Workspace Services

WorkspaceServices is the single context object that owns the four Google API
clients (Drive, Docs, Slides, Sheets). It is built once at process start by
build_workspace_services() and handed to every tool factory; nothing in the
server reaches for an ambient client.

All methods are async. Each blocking googleapiclient `.execute` call runs in a
worker thread via asyncio.to_thread, so one slow request does not stall other
tool invocations. Failures are re-raised as UpstreamFailureError with the
original exception chained. No call is retried here; callers own retry policy.
"""
import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

import google.auth
from google.auth.exceptions import GoogleAuthError
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from core.config import WorkspaceConfig
from core.errors import UpstreamFailureError
from gdrive.drive_helpers import build_folder_list_query, build_name_search_query

logger = logging.getLogger(__name__)

SCOPES = [
    "https://www.googleapis.com/auth/drive",
    "https://www.googleapis.com/auth/documents",
    "https://www.googleapis.com/auth/presentations",
    "https://www.googleapis.com/auth/spreadsheets",
]

DRIVE_FILE_FIELDS = "nextPageToken, files(id, name, mimeType)"


async def _execute(request: Any, failure_message: str) -> Dict[str, Any]:
    """Run a prepared googleapiclient request off the event loop."""
    try:
        return await asyncio.to_thread(request.execute)
    except HttpError as e:
        raise UpstreamFailureError(failure_message, cause=e, status=e.resp.status) from e
    except (GoogleAuthError, OSError) as e:
        raise UpstreamFailureError(failure_message, cause=e) from e


def _to_drive_file(file: Dict[str, Any]) -> Dict[str, str]:
    return {
        "id": file.get("id", ""),
        "name": file.get("name", ""),
        "mimeType": file.get("mimeType", ""),
    }


class WorkspaceServices:
    """
    Authenticated read/write access to Drive, Docs, Slides and Sheets.

    The constructor takes already-built discovery clients, which keeps the
    class trivial to fake in tests (pass MagicMock instances).
    """

    def __init__(self, drive_service: Any, docs_service: Any, slides_service: Any, sheets_service: Any):
        self.drive_service = drive_service
        self.docs_service = docs_service
        self.slides_service = slides_service
        self.sheets_service = sheets_service

    # Drive

    async def search_files(self, query: str, max_results: int) -> List[Dict[str, str]]:
        """Search Drive for files whose name contains the given text."""
        request = self.drive_service.files().list(
            q=build_name_search_query(query),
            pageSize=max_results,
            fields=DRIVE_FILE_FIELDS,
        )
        response = await _execute(request, "failed to search files")
        return [_to_drive_file(f) for f in response.get("files", [])]

    async def list_files(self, folder_id: str, max_results: int) -> List[Dict[str, str]]:
        """List non-trashed files in a folder, or in My Drive root when folder_id is empty."""
        request = self.drive_service.files().list(
            q=build_folder_list_query(folder_id),
            pageSize=max_results,
            fields=DRIVE_FILE_FIELDS,
        )
        response = await _execute(request, "failed to list files")
        return [_to_drive_file(f) for f in response.get("files", [])]

    # Docs

    async def get_document_structure(self, document_id: str) -> Dict[str, Any]:
        request = self.docs_service.documents().get(documentId=document_id)
        document = await _execute(request, "failed to get document")
        if not isinstance(document, dict) or not isinstance(document.get("body", {}), dict):
            raise UpstreamFailureError(
                "failed to get document: response did not contain a document body",
                context={"document_id": document_id},
            )
        return document

    async def submit_document_batch(self, document_id: str, requests: List[Dict[str, Any]]) -> Dict[str, Any]:
        """Apply an ordered batch of edit requests to a document as one transaction."""
        request = self.docs_service.documents().batchUpdate(
            documentId=document_id, body={"requests": requests}
        )
        return await _execute(request, "failed to update document")

    # Slides

    async def get_slide_structure(self, presentation_id: str) -> Dict[str, Any]:
        request = self.slides_service.presentations().get(presentationId=presentation_id)
        presentation = await _execute(request, "failed to get presentation")
        if not isinstance(presentation, dict) or not isinstance(presentation.get("slides", []), list):
            raise UpstreamFailureError(
                "failed to get presentation: response did not contain a slide list",
                context={"presentation_id": presentation_id},
            )
        return presentation

    async def submit_presentation_batch(
        self, presentation_id: str, requests: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        """Apply an ordered batch of edit requests to a presentation as one transaction."""
        request = self.slides_service.presentations().batchUpdate(
            presentationId=presentation_id, body={"requests": requests}
        )
        return await _execute(request, "failed to update presentation")

    # Sheets

    async def get_spreadsheet_values(self, spreadsheet_id: str, range_name: str) -> List[List[Any]]:
        request = self.sheets_service.spreadsheets().values().get(
            spreadsheetId=spreadsheet_id, range=range_name
        )
        response = await _execute(request, "failed to get spreadsheet values")
        return response.get("values", [])

    async def update_spreadsheet_values(
        self, spreadsheet_id: str, range_name: str, values: List[List[Any]]
    ) -> Dict[str, Any]:
        request = self.sheets_service.spreadsheets().values().update(
            spreadsheetId=spreadsheet_id,
            range=range_name,
            valueInputOption="USER_ENTERED",
            body={"values": values},
        )
        return await _execute(request, "failed to update spreadsheet values")


def build_workspace_services(
    config: WorkspaceConfig,
    credentials_loader: Optional[Callable[..., Any]] = None,
) -> WorkspaceServices:
    """
    Create the Google API clients using Application Default Credentials.

    Args:
        config: Server configuration. quota_project_id, when set, is billed
                for API usage instead of the credentials' own project.
        credentials_loader: Override for google.auth.default (tests).

    Raises:
        GoogleAuthError: If no usable credentials are found. This happens at
                         startup, so the process fails fast.
    """
    loader = credentials_loader or google.auth.default
    credentials, project = loader(scopes=SCOPES, quota_project_id=config.quota_project_id)
    logger.info(
        f"Loaded application default credentials (project: {project or 'unknown'}, "
        f"quota project: {config.quota_project_id or 'none'})"
    )

    clients = {}
    for name, version in (("drive", "v3"), ("docs", "v1"), ("slides", "v1"), ("sheets", "v4")):
        try:
            clients[name] = build(name, version, credentials=credentials, cache_discovery=False)
        except Exception as e:
            logger.error(f"Failed to create {name} service: {e}", exc_info=True)
            raise
    logger.info("Created Drive, Docs, Slides and Sheets clients")

    return WorkspaceServices(
        drive_service=clients["drive"],
        docs_service=clients["docs"],
        slides_service=clients["slides"],
        sheets_service=clients["sheets"],
    )
