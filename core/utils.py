import functools
import logging

from core.errors import (
    UpstreamFailureError,
    WorkspaceToolError,
    format_error,
)

logger = logging.getLogger(__name__)


def handle_tool_errors(tool_name: str, failure_message: str):
    """
    A decorator that turns every tool failure into caller-visible text.

    It wraps a tool coroutine, catches WorkspaceToolError (and any unexpected
    Exception), logs it, and returns a message of the form
    "{failure_message}: [CODE] details" instead of raising. MCP callers therefore
    always receive a result they can read.

    asyncio.CancelledError is a BaseException and propagates untouched.

    Args:
        tool_name (str): The name of the tool being decorated (e.g., 'rewrite_slide').
        failure_message (str): Prefix for error text (e.g., 'Failed to update presentation').
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except UpstreamFailureError as e:
                logger.error(f"Upstream error in {tool_name}: {e}", exc_info=True)
                return format_error(failure_message, e)
            except WorkspaceToolError as e:
                logger.warning(f"Rejected call to {tool_name}: {e}")
                return format_error(failure_message, e)
            except Exception as e:
                logger.exception(f"An unexpected error occurred in {tool_name}: {e}")
                return format_error(
                    failure_message,
                    UpstreamFailureError("unexpected error", cause=e),
                )

        return wrapper

    return decorator
