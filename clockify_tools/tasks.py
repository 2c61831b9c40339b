# Tool definitions for project tasks
from .common import PAGE, PAGE_SIZE, WORKSPACE_ID, string_list

PROJECT_ID = {"type": "string", "description": "Project ID"}
TASK_ID = {"type": "string", "description": "Task ID"}

schemas = [
    {
        "name": "create_task",
        "description": "Create a new task in a project",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceId": WORKSPACE_ID,
                "projectId": PROJECT_ID,
                "name": {"type": "string", "description": "Task name"},
                "assigneeIds": string_list("Array of assignee user IDs (optional)"),
                "estimate": {"type": "string", "description": "Task estimate (ISO 8601 duration, optional)"},
                "status": {"type": "string", "enum": ["ACTIVE", "DONE"], "description": "Task status (optional)"},
            },
            "required": ["workspaceId", "projectId", "name"],
        },
    },
    {
        "name": "get_tasks",
        "description": "Get all tasks in a project",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceId": WORKSPACE_ID,
                "projectId": PROJECT_ID,
                "isActive": {"type": "boolean", "description": "Filter by active status"},
                "name": {"type": "string", "description": "Filter by task name"},
                "page": PAGE,
                "pageSize": PAGE_SIZE,
            },
            "required": ["workspaceId", "projectId"],
        },
    },
    {
        "name": "get_task",
        "description": "Get a specific task by ID",
        "inputSchema": {
            "type": "object",
            "properties": {"workspaceId": WORKSPACE_ID, "projectId": PROJECT_ID, "taskId": TASK_ID},
            "required": ["workspaceId", "projectId", "taskId"],
        },
    },
    {
        "name": "update_task",
        "description": "Update an existing task",
        "inputSchema": {
            "type": "object",
            "properties": {
                "workspaceId": WORKSPACE_ID,
                "projectId": PROJECT_ID,
                "taskId": TASK_ID,
                "name": {"type": "string", "description": "Task name"},
                "assigneeIds": string_list("Array of assignee user IDs"),
                "estimate": {"type": "string", "description": "Task estimate (ISO 8601 duration)"},
                "status": {"type": "string", "enum": ["ACTIVE", "DONE"], "description": "Task status"},
            },
            "required": ["workspaceId", "projectId", "taskId"],
        },
    },
    {
        "name": "delete_task",
        "description": "Delete a task",
        "inputSchema": {
            "type": "object",
            "properties": {"workspaceId": WORKSPACE_ID, "projectId": PROJECT_ID, "taskId": TASK_ID},
            "required": ["workspaceId", "projectId", "taskId"],
        },
    },
]
