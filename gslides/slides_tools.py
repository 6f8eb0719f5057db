"""
Google Slides MCP Tools

This module provides MCP tools for reading a presentation and rewriting the
title and body text of a single slide.
"""

import logging

from core.params import NUMBER, ParamSpec, STRING, validate_params
from core.services import WorkspaceServices
from core.utils import handle_tool_errors
from gslides.slides_helpers import (
    extract_presentation_text,
    plan_slide_rewrite,
    validate_slide_index,
)

logger = logging.getLogger(__name__)

GET_PRESENTATION_PARAMS = (
    ParamSpec("presentationId", STRING, required=True),
)

REWRITE_SLIDE_PARAMS = (
    ParamSpec("presentationId", STRING, required=True),
    ParamSpec("slideIndex", NUMBER, default=0),
    ParamSpec("title", STRING, required=True, allow_empty=True),
    ParamSpec("content", STRING, required=True, allow_empty=True),
)


async def _get_presentation_impl(services: WorkspaceServices, presentation_id: str) -> str:
    params = validate_params(GET_PRESENTATION_PARAMS, {"presentationId": presentation_id})
    presentation_id = params["presentationId"]

    presentation = await services.get_slide_structure(presentation_id)
    logger.info(
        f"[get_presentation] Retrieved {len(presentation.get('slides', []))} slides from {presentation_id}"
    )
    return extract_presentation_text(presentation)


async def _rewrite_slide_impl(
    services: WorkspaceServices,
    presentation_id: str,
    slide_index,
    title: str,
    content: str,
) -> str:
    """
    Clear every text box on one slide and write new title and body text.

    The slide index is checked against a fresh read of the presentation. If the
    planned batch is empty (no text on the slide and nowhere to insert) no
    write is issued.
    """
    params = validate_params(
        REWRITE_SLIDE_PARAMS,
        {
            "presentationId": presentation_id,
            "slideIndex": slide_index,
            "title": title,
            "content": content,
        },
    )
    presentation_id = params["presentationId"]
    slide_index = params["slideIndex"]

    presentation = await services.get_slide_structure(presentation_id)
    slides = presentation.get("slides", [])

    # Checked before indexing so a negative index is not read from the end
    validate_slide_index(slide_index, len(slides))
    requests = plan_slide_rewrite(
        slides[slide_index], slide_index, len(slides), params["title"], params["content"]
    )

    if not requests:
        logger.info(f"[rewrite_slide] Slide {slide_index} of {presentation_id} has no text regions; nothing to submit")
        return "Presentation slide updated successfully"

    await services.submit_presentation_batch(presentation_id, requests)
    logger.info(
        f"[rewrite_slide] Submitted {len(requests)} requests to slide {slide_index} of {presentation_id}"
    )
    return "Presentation slide updated successfully"


def create_slides_tools(server, services: WorkspaceServices):
    """
    Register the Slides tools on a FastMCP server.

    Returns:
        Dict mapping tool name to the registered tool
    """

    @server.tool()
    @handle_tool_errors("get_presentation", "Failed to get presentation content")
    async def get_presentation(presentationId: str) -> str:
        """
        Get the text content of a Google Slides presentation.

        Args:
            presentationId (str): The ID of the Google Slides presentation. Required.

        Returns:
            str: The presentation title followed by the text of each slide.
        """
        logger.info(f"[get_presentation] Invoked. Presentation ID: '{presentationId}'")
        return await _get_presentation_impl(services, presentationId)

    @server.tool()
    @handle_tool_errors("rewrite_slide", "Failed to update presentation")
    async def rewrite_slide(
        presentationId: str,
        title: str,
        content: str,
        slideIndex: int = 0,
    ) -> str:
        """
        Update a specific slide in a Google Slides presentation.

        All text on the slide is cleared. The title is written into the first
        text box on the slide and the content into the second; an empty string
        leaves that box blank.

        Args:
            presentationId (str): The ID of the Google Slides presentation. Required.
            title (str): The title for the slide. Required.
            content (str): The content for the slide. Required.
            slideIndex (int): The index of the slide to update (0-based). Defaults to 0.

        Returns:
            str: Confirmation message.
        """
        logger.info(
            f"[rewrite_slide] Invoked. Presentation ID: '{presentationId}', Slide index: {slideIndex}"
        )
        return await _rewrite_slide_impl(services, presentationId, slideIndex, title, content)

    return {
        "get_presentation": get_presentation,
        "rewrite_slide": rewrite_slide,
    }
