# Tool definitions for time entries
from .common import PAGE, PAGE_SIZE, WORKSPACE_ID, string_list

schemas = [
    {
        "name": "create_time_entry",
        "description": "Create a new time entry",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceId": WORKSPACE_ID,
                "description": {"type": "string", "description": "Time entry description"},
                "start": {"type": "string", "description": "Start time (ISO 8601 format)"},
                "end": {"type": "string", "description": "End time (ISO 8601 format, optional for ongoing entries)"},
                "projectId": {"type": "string", "description": "Project ID (optional)"},
                "taskId": {"type": "string", "description": "Task ID (optional)"},
                "tagIds": string_list("Array of tag IDs (optional)"),
                "billable": {"type": "boolean", "description": "Whether the entry is billable (optional)"},
            },
            "required": ["workspaceId", "start"],
        },
    },
    {
        "name": "get_time_entries",
        "description": "Get time entries for a user",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceId": WORKSPACE_ID,
                "userId": {"type": "string", "description": "User ID (optional, defaults to current user)"},
                "description": {"type": "string", "description": "Filter by description"},
                "start": {"type": "string", "description": "Start date filter (ISO 8601)"},
                "end": {"type": "string", "description": "End date filter (ISO 8601)"},
                "project": {"type": "string", "description": "Filter by project ID"},
                "task": {"type": "string", "description": "Filter by task ID"},
                "tags": {"type": "string", "description": "Filter by tag IDs (comma-separated)"},
                "projectRequired": {"type": "boolean", "description": "Filter entries that require project"},
                "taskRequired": {"type": "boolean", "description": "Filter entries that require task"},
                "consideredRunning": {"type": "boolean", "description": "Include running time entries"},
                "hydrated": {"type": "boolean", "description": "Include additional data"},
                "inProgress": {"type": "boolean", "description": "Filter by running status"},
                "page": PAGE,
                "pageSize": PAGE_SIZE,
            },
            "required": ["workspaceId"],
        },
    },
    {
        "name": "update_time_entry",
        "description": "Update an existing time entry",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceId": WORKSPACE_ID,
                "timeEntryId": {"type": "string", "description": "Time entry ID"},
                "description": {"type": "string", "description": "Time entry description"},
                "start": {"type": "string", "description": "Start time (ISO 8601 format)"},
                "end": {"type": "string", "description": "End time (ISO 8601 format)"},
                "projectId": {"type": "string", "description": "Project ID"},
                "taskId": {"type": "string", "description": "Task ID"},
                "tagIds": string_list("Array of tag IDs"),
                "billable": {"type": "boolean", "description": "Whether the entry is billable"},
            },
            "required": ["workspaceId", "timeEntryId"],
        },
    },
    {
        "name": "delete_time_entry",
        "description": "Delete a time entry",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceId": WORKSPACE_ID,
                "timeEntryId": {"type": "string", "description": "Time entry ID"},
            },
            "required": ["workspaceId", "timeEntryId"],
        },
    },
    {
        "name": "stop_time_entry",
        "description": "Stop a running time entry",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceId": WORKSPACE_ID,
                "userId": {"type": "string", "description": "User ID"},
                "end": {"type": "string", "description": "End time (ISO 8601 format, optional - defaults to now)"},
            },
            "required": ["workspaceId", "userId"],
        },
    },
]
