from ..clockify import ClockifyClient
from ..models import User, Workspace
from ..routing import ToolRouter
from ..shaping import bullet_list

router = ToolRouter()


@router.tool("get_current_user")
async def get_current_user(api: ClockifyClient, args: dict) -> str:
    user = User.model_validate(await api.request("/user"))
    return (
        f"Current user: {user.name} ({user.email})\n"
        f"Active Workspace: {user.activeWorkspace}\n"
        f"User ID: {user.id}"
    )


@router.tool("get_workspaces")
async def get_workspaces(api: ClockifyClient, args: dict) -> str:
    workspaces = [Workspace.model_validate(w) for w in await api.request("/workspaces")]
    return bullet_list(
        f"Found {len(workspaces)} workspace(s):",
        [f"- {w.name} ({w.id})" for w in workspaces],
    )


@router.tool("get_workspace_users")
async def get_workspace_users(api: ClockifyClient, args: dict) -> str:
    users = [User.model_validate(u) for u in await api.request(f"/workspaces/{args['workspaceId']}/users")]
    return bullet_list(
        f"Found {len(users)} user(s) in workspace:",
        [f"- {u.name} ({u.email}) - {u.id}" for u in users],
    )
