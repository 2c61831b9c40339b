# Tool definitions for clients
from .common import PAGE, PAGE_SIZE, WORKSPACE_ID

CLIENT_ID = {"type": "string", "description": "Client ID"}

schemas = [
    {
        "name": "create_client",
        "description": "Create a new client",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceId": WORKSPACE_ID,
                "name": {"type": "string", "description": "Client name"},
                "archived": {"type": "boolean", "description": "Whether client is archived (optional)"},
            },
            "required": ["workspaceId", "name"],
        },
    },
    {
        "name": "get_clients",
        "description": "Get all clients in a workspace",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceId": WORKSPACE_ID,
                "archived": {"type": "boolean", "description": "Filter by archived status"},
                "name": {"type": "string", "description": "Filter by client name"},
                "page": PAGE,
                "pageSize": PAGE_SIZE,
            },
            "required": ["workspaceId"],
        },
    },
    {
        "name": "update_client",
        "description": "Update an existing client",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceId": WORKSPACE_ID,
                "clientId": CLIENT_ID,
                "name": {"type": "string", "description": "Client name"},
                "archived": {"type": "boolean", "description": "Whether client is archived"},
            },
            "required": ["workspaceId", "clientId"],
        },
    },
    {
        "name": "delete_client",
        "description": "Delete a client",
        "inputSchema": {
            "type": "object",
            "properties": {"workspaceId": WORKSPACE_ID, "clientId": CLIENT_ID},
            "required": ["workspaceId", "clientId"],
        },
    },
]
