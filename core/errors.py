"""
Error Taxonomy

Every failure a tool can report is one of three kinds:

- INVALID_ARGUMENT: a required identifier or parameter is missing or malformed.
  Detected before any remote call is made.
- OUT_OF_RANGE: a positional argument (e.g. a slide index) falls outside the
  bounds of the remote resource.
- UPSTREAM_FAILURE: a Google API read or write was rejected, timed out, or
  returned a structure that could not be used.

Tools never raise these to the MCP dispatch layer. They are converted to
caller-visible text by core.utils.handle_tool_errors.
"""
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Machine-readable error kinds surfaced to callers."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    UPSTREAM_FAILURE = "UPSTREAM_FAILURE"


class WorkspaceToolError(Exception):
    """Base class for errors reported back to the tool caller."""

    code: ErrorCode = ErrorCode.UPSTREAM_FAILURE

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary, omitting empty context."""
        result: Dict[str, Any] = {
            "error": True,
            "code": self.code.value,
            "message": self.message,
        }
        if self.context:
            result["context"] = self.context
        return result

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"


class InvalidArgumentError(WorkspaceToolError):
    """A required parameter is missing, empty, or of the wrong shape."""

    code = ErrorCode.INVALID_ARGUMENT

    @classmethod
    def missing(cls, param_name: str) -> "InvalidArgumentError":
        return cls(
            f"Parameter '{param_name}' is required",
            context={"param": param_name},
        )


class OutOfRangeError(WorkspaceToolError):
    """A positional argument lies outside the remote resource's bounds."""

    code = ErrorCode.OUT_OF_RANGE


class UpstreamFailureError(WorkspaceToolError):
    """
    A remote Google API call failed.

    The original exception is kept as `cause` (and chained via `raise ... from`)
    so callers see what the API actually said.
    """

    code = ErrorCode.UPSTREAM_FAILURE

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        status: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message, context=context)
        self.cause = cause
        self.status = status

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        if self.status is not None:
            result["status"] = self.status
        return result


def format_error(failure_message: str, error: WorkspaceToolError) -> str:
    """
    Render an error as the text returned to the caller.

    Example:
        "Failed to update document: [UPSTREAM_FAILURE] failed to get document: <HttpError 404 ...>"
    """
    return f"{failure_message}: {error}"
