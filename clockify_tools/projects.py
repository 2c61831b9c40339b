# Tool definitions for projects
from .common import PAGE, PAGE_SIZE, SORT_ORDER, WORKSPACE_ID

PROJECT_ID = {"type": "string", "description": "Project ID"}

schemas = [
    {
        "name": "create_project",
        "description": "Create a new project",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceId": WORKSPACE_ID,
                "name": {"type": "string", "description": "Project name"},
                "clientId": {"type": "string", "description": "Client ID (optional)"},
                "isPublic": {"type": "boolean", "description": "Whether project is public (optional)"},
                "billable": {"type": "boolean", "description": "Whether project is billable (optional)"},
                "color": {"type": "string", "description": "Project color (hex code, optional)"},
                "estimate": {
                    "type": "object",
                    "properties": {
                        "estimate": {"type": "string", "description": "Estimate duration (ISO 8601 duration)"},
                        "type": {"type": "string", "enum": ["AUTO", "MANUAL"], "description": "Estimate type"},
                    },
                    "description": "Project estimate (optional)",
                },
            },
            "required": ["workspaceId", "name"],
        },
    },
    {
        "name": "get_projects",
        "description": "Get all projects in a workspace",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceId": WORKSPACE_ID,
                "archived": {"type": "boolean", "description": "Filter by archived status"},
                "name": {"type": "string", "description": "Filter by project name"},
                "clientIds": {"type": "string", "description": "Filter by client IDs (comma-separated)"},
                "containsClient": {"type": "boolean", "description": "Filter projects that have clients"},
                "clientStatus": {"type": "string", "enum": ["ACTIVE", "ARCHIVED"], "description": "Filter by client status"},
                "users": {"type": "string", "description": "Filter by user IDs (comma-separated)"},
                "isTemplate": {"type": "boolean", "description": "Filter by template status"},
                "sortColumn": {"type": "string", "description": "Sort column"},
                "sortOrder": SORT_ORDER,
                "page": PAGE,
                "pageSize": PAGE_SIZE,
            },
            "required": ["workspaceId"],
        },
    },
    {
        "name": "get_project",
        "description": "Get a specific project by ID",
        "inputSchema": {
            "type": "object",
            "properties": {"workspaceId": WORKSPACE_ID, "projectId": PROJECT_ID},
            "required": ["workspaceId", "projectId"],
        },
    },
    {
        "name": "update_project",
        "description": "Update an existing project",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceId": WORKSPACE_ID,
                "projectId": PROJECT_ID,
                "name": {"type": "string", "description": "Project name"},
                "clientId": {"type": "string", "description": "Client ID"},
                "isPublic": {"type": "boolean", "description": "Whether project is public"},
                "billable": {"type": "boolean", "description": "Whether project is billable"},
                "color": {"type": "string", "description": "Project color (hex code)"},
                "archived": {"type": "boolean", "description": "Whether project is archived"},
            },
            "required": ["workspaceId", "projectId"],
        },
    },
    {
        "name": "delete_project",
        "description": "Delete a project",
        "inputSchema": {
            "type": "object",
            "properties": {"workspaceId": WORKSPACE_ID, "projectId": PROJECT_ID},
            "required": ["workspaceId", "projectId"],
        },
    },
]
