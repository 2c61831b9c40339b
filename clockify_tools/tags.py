# Tool definitions for tags
from .common import PAGE, PAGE_SIZE, WORKSPACE_ID

TAG_ID = {"type": "string", "description": "Tag ID"}

schemas = [
    {
        "name": "create_tag",
        "description": "Create a new tag",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceId": WORKSPACE_ID,
                "name": {"type": "string", "description": "Tag name"},
                "archived": {"type": "boolean", "description": "Whether tag is archived (optional)"},
            },
            "required": ["workspaceId", "name"],
        },
    },
    {
        "name": "get_tags",
        "description": "Get all tags in a workspace",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceId": WORKSPACE_ID,
                "archived": {"type": "boolean", "description": "Filter by archived status"},
                "name": {"type": "string", "description": "Filter by tag name"},
                "page": PAGE,
                "pageSize": PAGE_SIZE,
            },
            "required": ["workspaceId"],
        },
    },
    {
        "name": "update_tag",
        "description": "Update an existing tag",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceId": WORKSPACE_ID,
                "tagId": TAG_ID,
                "name": {"type": "string", "description": "Tag name"},
                "archived": {"type": "boolean", "description": "Whether tag is archived"},
            },
            "required": ["workspaceId", "tagId"],
        },
    },
    {
        "name": "delete_tag",
        "description": "Delete a tag",
        "inputSchema": {
            "type": "object",
            "properties": {"workspaceId": WORKSPACE_ID, "tagId": TAG_ID},
            "required": ["workspaceId", "tagId"],
        },
    },
]
