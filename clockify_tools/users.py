# Tool definitions for the current user and workspaces
from .common import WORKSPACE_ID

schemas = [
    {
        "name": "get_current_user",
        "description": "Get information about the current user",
        "inputSchema": {"type": "object", "properties": {}},
    },
    {
        "name": "get_workspaces",
        "description": "Get all workspaces for the current user",
        "inputSchema": {"type": "object", "properties": {}},
    },
    {
        "name": "get_workspace_users",
        "description": "Get all users in a workspace",
        "inputSchema": {
            "type": "object",
            "properties": {"workspaceId": WORKSPACE_ID},
            "required": ["workspaceId"],
        },
    },
]
