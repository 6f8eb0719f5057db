"""
Google Drive Helper Functions

Query builders for the Drive files.list `q` parameter.
"""

ROOT_FOLDER_ID = "root"
MAX_PAGE_SIZE = 1000


def escape_query_value(value: str) -> str:
    """Escape a user-supplied value for use inside a single-quoted Drive query literal."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def build_name_search_query(query: str) -> str:
    """
    Build a query matching files whose name contains the given text.

    >>> build_name_search_query("Q3 report")
    "name contains 'Q3 report'"
    """
    return f"name contains '{escape_query_value(query)}'"


def build_folder_list_query(folder_id: str = "") -> str:
    """
    Build a query listing the non-trashed children of a folder.

    An empty folder_id lists My Drive root.
    """
    parent = escape_query_value(folder_id) if folder_id else ROOT_FOLDER_ID
    return f"'{parent}' in parents and trashed = false"
