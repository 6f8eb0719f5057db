"""
Google Sheets MCP Tools

This module provides MCP tools for reading and writing cell ranges in a
Google Sheet.
"""

import json
import logging
from typing import Any, List, Union

from core.errors import InvalidArgumentError
from core.params import ARRAY, ParamSpec, STRING, validate_params
from core.services import WorkspaceServices
from core.utils import handle_tool_errors

# Configure module logger
logger = logging.getLogger(__name__)

GET_SPREADSHEET_PARAMS = (
    ParamSpec("spreadsheetId", STRING, required=True),
    ParamSpec("range", STRING, required=True),
)

UPDATE_SPREADSHEET_PARAMS = (
    ParamSpec("spreadsheetId", STRING, required=True),
    ParamSpec("range", STRING, required=True),
    ParamSpec("values", ARRAY, required=True),
)


def _validate_rows(values: List[Any]) -> List[List[Any]]:
    """
    Check that values is a 2D array.

    Raises:
        InvalidArgumentError: Naming the first row that is not a list.
    """
    for i, row in enumerate(values):
        if not isinstance(row, list):
            raise InvalidArgumentError(
                f"Invalid values format: row {i} must be an array, got {type(row).__name__}",
                context={"param": "values", "row": i},
            )
    return values


async def _get_spreadsheet_impl(services: WorkspaceServices, spreadsheet_id: str, range_name: str) -> str:
    params = validate_params(
        GET_SPREADSHEET_PARAMS, {"spreadsheetId": spreadsheet_id, "range": range_name}
    )

    values = await services.get_spreadsheet_values(params["spreadsheetId"], params["range"])
    logger.info(f"[get_spreadsheet] Read {len(values)} rows from range '{params['range']}'")
    return json.dumps({"values": values, "range": params["range"]})


async def _update_spreadsheet_impl(
    services: WorkspaceServices,
    spreadsheet_id: str,
    range_name: str,
    values: Union[str, List[List[Any]]],
) -> str:
    params = validate_params(
        UPDATE_SPREADSHEET_PARAMS,
        {"spreadsheetId": spreadsheet_id, "range": range_name, "values": values},
    )
    rows = _validate_rows(params["values"])

    result = await services.update_spreadsheet_values(params["spreadsheetId"], params["range"], rows)
    logger.info(
        f"[update_spreadsheet] Updated {result.get('updatedCells', 0)} cells in range '{params['range']}'"
    )
    return "Spreadsheet updated successfully"


def create_sheets_tools(server, services: WorkspaceServices):
    """
    Register the Sheets tools on a FastMCP server.

    Returns:
        Dict mapping tool name to the registered tool
    """

    @server.tool()
    @handle_tool_errors("get_spreadsheet", "Failed to get spreadsheet values")
    async def get_spreadsheet(spreadsheetId: str, range: str) -> str:
        """
        Get values from a Google Spreadsheet.

        Args:
            spreadsheetId (str): The ID of the Google Spreadsheet. Required.
            range (str): The range to retrieve (e.g., 'Sheet1!A1:C10'). Required.

        Returns:
            str: JSON object with "values" (2D array) and "range".
        """
        logger.info(f"[get_spreadsheet] Invoked. Spreadsheet: {spreadsheetId}, Range: {range}")
        return await _get_spreadsheet_impl(services, spreadsheetId, range)

    @server.tool()
    @handle_tool_errors("update_spreadsheet", "Failed to update spreadsheet")
    async def update_spreadsheet(
        spreadsheetId: str,
        range: str,
        values: Union[str, List[List[Any]]],
    ) -> str:
        """
        Update values in a Google Spreadsheet.

        Values are interpreted as if typed by a user (USER_ENTERED), so
        formulas and dates are parsed.

        Args:
            spreadsheetId (str): The ID of the Google Spreadsheet. Required.
            range (str): The range to update (e.g., 'Sheet1!A1:C10'). Required.
            values: 2D array of values to write. Can be a JSON string or a list of lists. Required.

        Returns:
            str: Confirmation message.
        """
        logger.info(f"[update_spreadsheet] Invoked. Spreadsheet: {spreadsheetId}, Range: {range}")
        return await _update_spreadsheet_impl(services, spreadsheetId, range, values)

    return {
        "get_spreadsheet": get_spreadsheet,
        "update_spreadsheet": update_spreadsheet,
    }
