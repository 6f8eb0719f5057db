"""
Google Slides Helper Functions

Request builders, the slide rewrite planner, and text extraction for
presentations. All functions are pure and operate on the JSON returned by
presentations().get.

Region inference is positional: the first page element on a slide that owns a
text body is treated as the title, the second as the body. Placeholder type is
not consulted, so a layout that puts body text before the title, or a slide
with more than two meaningful text boxes, will be filled in element order.
Callers rely on this ordering; do not switch to placeholder matching without
versioning the tool.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from core.errors import OutOfRangeError

logger = logging.getLogger(__name__)


def create_delete_all_text_request(object_id: str) -> Dict[str, Any]:
    """
    Create a deleteText request clearing the full text of a shape.

    Uses textRange type ALL rather than a computed FIXED_RANGE, since per-shape
    lengths shift once earlier requests in the same batch apply.
    """
    return {
        "deleteText": {
            "objectId": object_id,
            "textRange": {"type": "ALL"},
        }
    }


def create_slide_insert_text_request(object_id: str, text: str, insertion_index: int = 0) -> Dict[str, Any]:
    """Create an insertText request for a shape on a slide."""
    return {
        "insertText": {
            "objectId": object_id,
            "insertionIndex": insertion_index,
            "text": text,
        }
    }


def get_text_body(page_element: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Return the shape text body of a page element, or None if it has none."""
    shape = page_element.get("shape")
    if not shape:
        return None
    return shape.get("text")


def has_text_content(text_body: Optional[Dict[str, Any]]) -> bool:
    """True if the text body holds at least one non-empty text run."""
    if not text_body:
        return False
    for text_element in text_body.get("textElements", []):
        if text_element.get("textRun", {}).get("content"):
            return True
    return False


def find_text_regions(page_elements: List[Dict[str, Any]]) -> Tuple[Optional[str], Optional[str]]:
    """
    Infer the (title, content) object IDs of a slide by position.

    Returns:
        Tuple of (title_object_id, content_object_id); either may be None.
    """
    text_element_ids = [
        element.get("objectId")
        for element in page_elements
        if get_text_body(element) is not None
    ]
    title_id = text_element_ids[0] if len(text_element_ids) > 0 else None
    content_id = text_element_ids[1] if len(text_element_ids) > 1 else None
    return title_id, content_id


def validate_slide_index(slide_index: int, slide_count: int) -> None:
    """
    Check that slide_index addresses an existing slide.

    Raises:
        OutOfRangeError: If slide_index is outside [0, slide_count).
    """
    if 0 <= slide_index < slide_count:
        return
    if slide_count == 0:
        message = f"slide index {slide_index} is out of range: presentation has no slides"
    else:
        message = f"slide index {slide_index} is out of range (0-{slide_count - 1})"
    raise OutOfRangeError(
        message,
        context={"received": {"slide_index": slide_index}, "slide_count": slide_count},
    )


def plan_slide_rewrite(
    slide: Dict[str, Any],
    slide_index: int,
    slide_count: int,
    new_title: str,
    new_content: str,
) -> List[Dict[str, Any]]:
    """
    Compute the batch that rewrites a slide's title and body text.

    The batch is, in order:
        1. deleteText(ALL) for every page element with non-empty text, in
           element order.
        2. insertText of new_title into the title region, if both exist.
        3. insertText of new_content into the content region, if both exist.

    Clears come first so that an insert is never wiped by a later clear in the
    same batch. Elements past the second text region are cleared but receive
    no text.

    Args:
        slide: One entry of presentation["slides"]
        slide_index: 0-based index of that slide, validated against slide_count
        slide_count: Number of slides in the presentation
        new_title: Title text; empty means leave the title region blank
        new_content: Body text; empty means leave the content region blank

    Returns:
        Ordered list of request dictionaries, possibly empty (nothing to do)

    Raises:
        OutOfRangeError: If slide_index is not a valid slide position.
    """
    validate_slide_index(slide_index, slide_count)

    page_elements = slide.get("pageElements", [])
    requests: List[Dict[str, Any]] = []

    for element in page_elements:
        if has_text_content(get_text_body(element)):
            requests.append(create_delete_all_text_request(element["objectId"]))

    title_id, content_id = find_text_regions(page_elements)

    if title_id and new_title:
        requests.append(create_slide_insert_text_request(title_id, new_title))
    if content_id and new_content:
        requests.append(create_slide_insert_text_request(content_id, new_content))

    logger.debug(
        f"Planned rewrite of slide {slide_index}: {len(requests)} requests "
        f"(title region: {title_id}, content region: {content_id})"
    )
    return requests


def extract_presentation_text(presentation: Dict[str, Any]) -> str:
    """
    Render a presentation as plain text.

    Format:
        Title: <presentation title>

        --- Slide 1 ---
        <text of each text-bearing element, one per line>

    """
    lines = [f"Title: {presentation.get('title', '')}\n\n"]

    for i, slide in enumerate(presentation.get("slides", []), 1):
        lines.append(f"--- Slide {i} ---\n")
        for element in slide.get("pageElements", []):
            text_body = get_text_body(element)
            if text_body is None:
                continue
            for text_element in text_body.get("textElements", []):
                text_run = text_element.get("textRun")
                if text_run:
                    lines.append(text_run.get("content", ""))
            lines.append("\n")
        lines.append("\n")

    return "".join(lines)
