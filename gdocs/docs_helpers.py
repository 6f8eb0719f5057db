"""
Google Docs Helper Functions

This module provides the request builders and the replacement planner used by
the Docs tools. Everything here is pure: functions take the document JSON
returned by documents().get and return request dictionaries for
documents().batchUpdate.

Index model: the body is one global character-index space starting at 1
(index 0 is never addressable). The last index unit of the body always holds
the document's required trailing newline and cannot be deleted.
"""
import logging
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

DOCUMENT_START_INDEX = 1
MAX_EXTRACTION_DEPTH = 5


def create_insert_text_request(index: int, text: str) -> Dict[str, Any]:
    """
    Create an insertText request for Google Docs API.

    Args:
        index: Position to insert text
        text: Text to insert

    Returns:
        Dictionary representing the insertText request
    """
    return {
        'insertText': {
            'location': {'index': index},
            'text': text
        }
    }


def create_delete_range_request(start_index: int, end_index: int) -> Dict[str, Any]:
    """
    Create a deleteContentRange request for Google Docs API.

    Args:
        start_index: Start position of content to delete
        end_index: End position of content to delete (exclusive)

    Returns:
        Dictionary representing the deleteContentRange request
    """
    return {
        'deleteContentRange': {
            'range': {
                'startIndex': start_index,
                'endIndex': end_index
            }
        }
    }


def find_document_end_index(doc_data: Dict[str, Any]) -> int:
    """
    Return the end index of the document body.

    This is the maximum endIndex over the body's structural elements, not the
    element count. Starts at DOCUMENT_START_INDEX so a body with no element
    reporting an end index still yields a valid position.
    """
    end_index = DOCUMENT_START_INDEX
    for element in doc_data.get('body', {}).get('content', []):
        element_end = element.get('endIndex')
        if isinstance(element_end, int) and element_end > end_index:
            end_index = element_end
    return end_index


def plan_document_replacement(doc_data: Dict[str, Any], new_content: str) -> List[Dict[str, Any]]:
    """
    Compute the batch that replaces all body text of a document.

    The batch is, in order:
        1. deleteContentRange [1, end_index - 1), clamped to an empty range
           [1, 1) when there is nothing deletable. The final index unit
           (the trailing newline) is never included.
        2. insertText of new_content at index 1.

    Order matters: the delete shifts every later index, and the insert is
    expressed against the post-delete document.

    Args:
        doc_data: Document JSON from documents().get
        new_content: Replacement plain text (may be empty)

    Returns:
        Ordered list of two request dictionaries
    """
    end_index = find_document_end_index(doc_data)
    delete_end = max(DOCUMENT_START_INDEX, end_index - 1)

    logger.debug(
        f"Planning replacement: end_index={end_index}, delete=[{DOCUMENT_START_INDEX}, {delete_end}), "
        f"insert_length={len(new_content)}"
    )

    return [
        create_delete_range_request(DOCUMENT_START_INDEX, delete_end),
        create_insert_text_request(DOCUMENT_START_INDEX, new_content),
    ]


def is_noop_request(request: Dict[str, Any]) -> bool:
    """True for an empty-range delete or an insert of no text."""
    if 'deleteContentRange' in request:
        rng = request['deleteContentRange'].get('range', {})
        return rng.get('endIndex', 0) <= rng.get('startIndex', 0)
    if 'insertText' in request:
        return not request['insertText'].get('text')
    return False


def prune_noop_requests(requests: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Drop requests the Docs API would reject as empty, preserving order.

    The API returns 400 for a deleteContentRange whose range is empty and for
    an insertText with empty text.
    """
    return [request for request in requests if not is_noop_request(request)]


def extract_document_text(doc_data: Dict[str, Any]) -> str:
    """
    Extract the plain text of a document body.

    Concatenates every paragraph text run in document order, descending into
    table cells. The trailing newline of the last paragraph is included, as
    the API reports it.
    """

    def extract_from_elements(elements: List[Dict[str, Any]], depth: int = 0) -> str:
        if depth > MAX_EXTRACTION_DEPTH:
            return ""
        parts = []
        for element in elements:
            if 'paragraph' in element:
                for pe in element['paragraph'].get('elements', []):
                    text_run = pe.get('textRun', {})
                    if 'content' in text_run:
                        parts.append(text_run['content'])
            elif 'table' in element:
                for row in element['table'].get('tableRows', []):
                    for cell in row.get('tableCells', []):
                        parts.append(extract_from_elements(cell.get('content', []), depth + 1))
        return "".join(parts)

    return extract_from_elements(doc_data.get('body', {}).get('content', []))
