"""
Declarative tool parameter schemas.

Each tool declares its parameters once as a tuple of ParamSpec entries and
calls validate_params() at the top of the invocation. Validation happens
before any remote call so that a bad argument never costs a round trip.
"""
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

STRING = "string"
NUMBER = "number"
ARRAY = "array"


@dataclass(frozen=True)
class ParamSpec:
    """
    One named tool parameter.

    Attributes:
        name: Parameter name as exposed to MCP callers (e.g. "documentId").
        type: One of STRING, NUMBER, ARRAY.
        required: Whether the caller must supply the parameter.
        default: Value used when an optional parameter is absent.
        allow_empty: For required strings, whether "" is an acceptable value.
            Identifiers are never allowed to be empty; free text may be.
        minimum: Inclusive lower bound for NUMBER parameters.
        maximum: Inclusive upper bound for NUMBER parameters.
    """

    name: str
    type: str = STRING
    required: bool = False
    default: Any = None
    allow_empty: bool = False
    minimum: Optional[int] = None
    maximum: Optional[int] = None


def _coerce_string(param: ParamSpec, value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"Parameter '{param.name}' must be a string, got {type(value).__name__}",
            context={"param": param.name},
        )
    if param.required and not param.allow_empty and not value.strip():
        raise InvalidArgumentError.missing(param.name)
    return value


def _coerce_number(param: ParamSpec, value: Any) -> int:
    # bool is an int subclass; "true" is never a valid count or index
    if isinstance(value, bool):
        raise InvalidArgumentError(
            f"Parameter '{param.name}' must be a number, got bool",
            context={"param": param.name},
        )
    if isinstance(value, int):
        number = value
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    elif isinstance(value, str):
        try:
            number = int(value.strip())
        except ValueError as e:
            raise InvalidArgumentError(
                f"Parameter '{param.name}' must be an integer, got {value!r}",
                context={"param": param.name, "received": repr(value)},
            ) from e
    else:
        raise InvalidArgumentError(
            f"Parameter '{param.name}' must be an integer, got {value!r}",
            context={"param": param.name, "received": repr(value)},
        )

    if param.minimum is not None and number < param.minimum:
        raise InvalidArgumentError(
            f"Parameter '{param.name}' must be >= {param.minimum}, got {number}",
            context={"param": param.name, "received": number},
        )
    if param.maximum is not None and number > param.maximum:
        raise InvalidArgumentError(
            f"Parameter '{param.name}' must be <= {param.maximum}, got {number}",
            context={"param": param.name, "received": number},
        )
    return number


def _coerce_array(param: ParamSpec, value: Any) -> list:
    # MCP clients sometimes pass arrays as JSON strings
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError as e:
            raise InvalidArgumentError(
                f"Invalid JSON format for '{param.name}': {e}",
                context={"param": param.name},
            ) from e
        logger.debug(f"Parsed JSON string for '{param.name}'")
    if not isinstance(value, list):
        raise InvalidArgumentError(
            f"Parameter '{param.name}' must be an array, got {type(value).__name__}",
            context={"param": param.name},
        )
    return value


_COERCERS = {
    STRING: _coerce_string,
    NUMBER: _coerce_number,
    ARRAY: _coerce_array,
}


def validate_params(schema: Iterable[ParamSpec], arguments: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate and coerce raw tool arguments against a schema.

    Args:
        schema: The tool's parameter declarations.
        arguments: Raw arguments keyed by parameter name. None counts as absent.

    Returns:
        Dict of typed values for every declared parameter, with defaults applied.

    Raises:
        InvalidArgumentError: On the first missing, empty, or malformed parameter.
    """
    validated: Dict[str, Any] = {}
    for param in schema:
        value = arguments.get(param.name)
        if value is None:
            if param.required:
                raise InvalidArgumentError.missing(param.name)
            validated[param.name] = param.default
            continue
        validated[param.name] = _COERCERS[param.type](param, value)
    return validated
