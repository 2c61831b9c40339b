# Tool definitions for the reports service
from .common import EXPORT_TYPE, SORT_ORDER, WORKSPACE_ID, string_list

DATE_RANGE_START = {"type": "string", "description": "Start date (ISO 8601 format)"}
DATE_RANGE_END = {"type": "string", "description": "End date (ISO 8601 format)"}

schemas = [
    {
        "name": "get_detailed_report",
        "description": "Generate a detailed time tracking report",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceId": WORKSPACE_ID,
                "dateRangeStart": DATE_RANGE_START,
                "dateRangeEnd": DATE_RANGE_END,
                "users": string_list("Array of user IDs to filter"),
                "clients": string_list("Array of client IDs to filter"),
                "projects": string_list("Array of project IDs to filter"),
                "tasks": string_list("Array of task IDs to filter"),
                "tags": string_list("Array of tag IDs to filter"),
                "billable": {"type": "boolean", "description": "Filter by billable status"},
                "description": {"type": "string", "description": "Filter by description"},
                "withoutDescription": {"type": "boolean", "description": "Filter entries without description"},
                "customFieldIds": string_list("Array of custom field IDs"),
                "sortColumn": {"type": "string", "description": "Sort column (DATE, USER, PROJECT, etc.)"},
                "sortOrder": SORT_ORDER,
                "page": {"type": "number", "description": "Page number (default: 1)"},
                "pageSize": {"type": "number", "description": "Page size (default: 50, max: 1000)"},
                "exportType": EXPORT_TYPE,
            },
            "required": ["workspaceId", "dateRangeStart", "dateRangeEnd"],
        },
    },
    {
        "name": "get_summary_report",
        "description": "Generate a summary time tracking report",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceId": WORKSPACE_ID,
                "dateRangeStart": DATE_RANGE_START,
                "dateRangeEnd": DATE_RANGE_END,
                "users": string_list("Array of user IDs to filter"),
                "clients": string_list("Array of client IDs to filter"),
                "projects": string_list("Array of project IDs to filter"),
                "tasks": string_list("Array of task IDs to filter"),
                "tags": string_list("Array of tag IDs to filter"),
                "billable": {"type": "boolean", "description": "Filter by billable status"},
                "groups": string_list("Group by fields (USER, PROJECT, CLIENT, etc.)"),
                "sortColumn": {"type": "string", "description": "Sort column"},
                "sortOrder": SORT_ORDER,
                "exportType": EXPORT_TYPE,
            },
            "required": ["workspaceId", "dateRangeStart", "dateRangeEnd"],
        },
    },
]
