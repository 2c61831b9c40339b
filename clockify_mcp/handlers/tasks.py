from ..clockify import ClockifyClient
from ..models import Task
from ..routing import ToolRouter
from ..shaping import bullet_list, split_args, with_query

router = ToolRouter()


def tasks_path(workspace_id: str, project_id: str) -> str:
    return f"/workspaces/{workspace_id}/projects/{project_id}/tasks"


@router.tool("create_task")
async def create_task(api: ClockifyClient, args: dict) -> str:
    (workspace_id, project_id), body = split_args(args, "workspaceId", "projectId")
    task = Task.model_validate(await api.request(tasks_path(workspace_id, project_id), "POST", body))
    return (
        "Task created successfully!\n"
        f"ID: {task.id}\n"
        f"Name: {task.name}\n"
        f"Project: {project_id}\n"
        f"Status: {task.status}\n"
        f"Estimate: {task.estimate or 'No estimate'}"
    )


@router.tool("get_tasks")
async def get_tasks(api: ClockifyClient, args: dict) -> str:
    (workspace_id, project_id), params = split_args(args, "workspaceId", "projectId")
    tasks = [
        Task.model_validate(t)
        for t in await api.request(with_query(tasks_path(workspace_id, project_id), params))
    ]
    return bullet_list(
        f"Found {len(tasks)} task(s):",
        [f"- {t.name} ({t.id}) | Status: {t.status} | Estimate: {t.estimate or 'None'}" for t in tasks],
    )


@router.tool("get_task")
async def get_task(api: ClockifyClient, args: dict) -> str:
    project_id, task_id = args["projectId"], args["taskId"]
    task = Task.model_validate(await api.request(f"{tasks_path(args['workspaceId'], project_id)}/{task_id}"))
    return (
        "Task Details:\n"
        f"Name: {task.name}\n"
        f"ID: {task.id}\n"
        f"Project: {project_id}\n"
        f"Status: {task.status}\n"
        f"Estimate: {task.estimate or 'No estimate'}\n"
        f"Assignees: {len(task.assigneeIds or [])}"
    )


@router.tool("update_task")
async def update_task(api: ClockifyClient, args: dict) -> str:
    (workspace_id, project_id, task_id), body = split_args(args, "workspaceId", "projectId", "taskId")
    task = Task.model_validate(
        await api.request(f"{tasks_path(workspace_id, project_id)}/{task_id}", "PUT", body)
    )
    return (
        "Task updated successfully!\n"
        f"Name: {task.name}\n"
        f"Status: {task.status}\n"
        f"Estimate: {task.estimate or 'No estimate'}"
    )


@router.tool("delete_task")
async def delete_task(api: ClockifyClient, args: dict) -> str:
    task_id = args["taskId"]
    await api.request(f"{tasks_path(args['workspaceId'], args['projectId'])}/{task_id}", "DELETE")
    return f"Task {task_id} deleted successfully!"
