from ..clockify import ClockifyClient
from ..models import Project
from ..routing import ToolRouter
from ..shaping import bullet_list, flag, split_args, with_query

router = ToolRouter()


@router.tool("create_project")
async def create_project(api: ClockifyClient, args: dict) -> str:
    (workspace_id,), body = split_args(args, "workspaceId")
    project = Project.model_validate(await api.request(f"/workspaces/{workspace_id}/projects", "POST", body))
    return (
        "Project created successfully!\n"
        f"ID: {project.id}\n"
        f"Name: {project.name}\n"
        f"Client: {project.clientName or 'No client'}\n"
        f"Public: {flag(project.public)}\n"
        f"Billable: {flag(project.billable)}"
    )


@router.tool("get_projects")
async def get_projects(api: ClockifyClient, args: dict) -> str:
    (workspace_id,), params = split_args(args, "workspaceId")
    projects = [
        Project.model_validate(p)
        for p in await api.request(with_query(f"/workspaces/{workspace_id}/projects", params))
    ]
    return bullet_list(
        f"Found {len(projects)} project(s):",
        [
            f"- {p.name} ({p.id}) | Client: {p.clientName or 'None'} | Billable: {flag(p.billable)}"
            for p in projects
        ],
    )


@router.tool("get_project")
async def get_project(api: ClockifyClient, args: dict) -> str:
    project = Project.model_validate(
        await api.request(f"/workspaces/{args['workspaceId']}/projects/{args['projectId']}")
    )
    return (
        "Project Details:\n"
        f"Name: {project.name}\n"
        f"ID: {project.id}\n"
        f"Client: {project.clientName or 'No client'}\n"
        f"Public: {flag(project.public)}\n"
        f"Billable: {flag(project.billable)}\n"
        f"Color: {flag(project.color)}\n"
        f"Archived: {flag(project.archived)}"
    )


@router.tool("update_project")
async def update_project(api: ClockifyClient, args: dict) -> str:
    (workspace_id, project_id), body = split_args(args, "workspaceId", "projectId")
    project = Project.model_validate(
        await api.request(f"/workspaces/{workspace_id}/projects/{project_id}", "PUT", body)
    )
    return (
        "Project updated successfully!\n"
        f"Name: {project.name}\n"
        f"Client: {project.clientName or 'No client'}\n"
        f"Billable: {flag(project.billable)}"
    )


@router.tool("delete_project")
async def delete_project(api: ClockifyClient, args: dict) -> str:
    workspace_id, project_id = args["workspaceId"], args["projectId"]
    await api.request(f"/workspaces/{workspace_id}/projects/{project_id}", "DELETE")
    return f"Project {project_id} deleted successfully!"
