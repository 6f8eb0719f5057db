"""
Test doubles and builders for Google API payloads.

FakeWorkspaceServices stands in for core.services.WorkspaceServices. It serves
canned documents/presentations and records every call, so tests can assert
both what was submitted and that nothing was called at all.
"""
import os
import sys
from typing import Any, Dict, List, Optional

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from core.errors import UpstreamFailureError


class FakeWorkspaceServices:
    """In-memory double for WorkspaceServices."""

    def __init__(
        self,
        document: Optional[Dict[str, Any]] = None,
        presentation: Optional[Dict[str, Any]] = None,
        values: Optional[List[List[Any]]] = None,
        files: Optional[List[Dict[str, str]]] = None,
        fail_on: Optional[str] = None,
    ):
        self.document = document if document is not None else {"body": {"content": []}}
        self.presentation = presentation if presentation is not None else {"slides": []}
        self.values = values if values is not None else []
        self.files = files if files is not None else []
        self.fail_on = fail_on
        self.calls: List[tuple] = []

    def _record(self, name: str, *args):
        self.calls.append((name,) + args)
        if self.fail_on == name:
            raise UpstreamFailureError(f"{name} failed", cause=RuntimeError("backend unavailable"), status=500)

    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]

    async def search_files(self, query, max_results):
        self._record("search_files", query, max_results)
        return self.files

    async def list_files(self, folder_id, max_results):
        self._record("list_files", folder_id, max_results)
        return self.files

    async def get_document_structure(self, document_id):
        self._record("get_document_structure", document_id)
        return self.document

    async def submit_document_batch(self, document_id, requests):
        self._record("submit_document_batch", document_id, requests)
        return {"documentId": document_id, "replies": [{} for _ in requests]}

    async def get_slide_structure(self, presentation_id):
        self._record("get_slide_structure", presentation_id)
        return self.presentation

    async def submit_presentation_batch(self, presentation_id, requests):
        self._record("submit_presentation_batch", presentation_id, requests)
        return {"presentationId": presentation_id, "replies": [{} for _ in requests]}

    async def get_spreadsheet_values(self, spreadsheet_id, range_name):
        self._record("get_spreadsheet_values", spreadsheet_id, range_name)
        return self.values

    async def update_spreadsheet_values(self, spreadsheet_id, range_name, values):
        self._record("update_spreadsheet_values", spreadsheet_id, range_name, values)
        return {"updatedCells": sum(len(row) for row in values)}


class RecordingServer:
    """Minimal stand-in for FastMCP: tool() registers the function unchanged."""

    def __init__(self):
        self.tools: Dict[str, Any] = {}

    def tool(self):
        def decorator(func):
            self.tools[func.__name__] = func
            return func

        return decorator


def make_paragraph(text: str, start_index: int) -> Dict[str, Any]:
    """Create a paragraph element holding text plus its trailing newline."""
    end_index = start_index + len(text) + 1
    return {
        "startIndex": start_index,
        "endIndex": end_index,
        "paragraph": {
            "elements": [{
                "startIndex": start_index,
                "endIndex": end_index,
                "textRun": {"content": text + "\n"},
            }]
        },
    }


def make_document(*paragraphs: str) -> Dict[str, Any]:
    """Create a document with a leading section break and the given paragraphs."""
    content: List[Dict[str, Any]] = [{"endIndex": 1, "sectionBreak": {}}]
    index = 1
    for text in paragraphs:
        element = make_paragraph(text, index)
        content.append(element)
        index = element["endIndex"]
    return {"title": "Test Document", "body": {"content": content}}


def make_text_shape(object_id: str, text: Optional[str]) -> Dict[str, Any]:
    """
    Create a shape page element.

    text=None gives a shape with no text body; text="" gives an empty text body.
    """
    shape: Dict[str, Any] = {"shapeType": "TEXT_BOX"}
    if text is not None:
        text_elements: List[Dict[str, Any]] = []
        if text:
            text_elements = [
                {"paragraphMarker": {}, "endIndex": len(text) + 1},
                {"textRun": {"content": text + "\n"}, "endIndex": len(text) + 1},
            ]
        shape["text"] = {"textElements": text_elements}
    return {"objectId": object_id, "shape": shape}


def make_image(object_id: str) -> Dict[str, Any]:
    return {"objectId": object_id, "image": {"contentUrl": "https://example.com/img.png"}}

