from ..clockify import ClockifyClient
from ..models import Client
from ..routing import ToolRouter
from ..shaping import bullet_list, flag, split_args, with_query

router = ToolRouter()


@router.tool("create_client")
async def create_client(api: ClockifyClient, args: dict) -> str:
    (workspace_id,), body = split_args(args, "workspaceId")
    client = Client.model_validate(await api.request(f"/workspaces/{workspace_id}/clients", "POST", body))
    return f"Client created successfully!\nID: {client.id}\nName: {client.name}\nArchived: {flag(client.archived)}"


@router.tool("get_clients")
async def get_clients(api: ClockifyClient, args: dict) -> str:
    (workspace_id,), params = split_args(args, "workspaceId")
    clients = [
        Client.model_validate(c)
        for c in await api.request(with_query(f"/workspaces/{workspace_id}/clients", params))
    ]
    return bullet_list(
        f"Found {len(clients)} client(s):",
        [f"- {c.name} ({c.id}) | Archived: {flag(c.archived)}" for c in clients],
    )


@router.tool("update_client")
async def update_client(api: ClockifyClient, args: dict) -> str:
    (workspace_id, client_id), body = split_args(args, "workspaceId", "clientId")
    client = Client.model_validate(
        await api.request(f"/workspaces/{workspace_id}/clients/{client_id}", "PUT", body)
    )
    return f"Client updated successfully!\nName: {client.name}\nArchived: {flag(client.archived)}"


@router.tool("delete_client")
async def delete_client(api: ClockifyClient, args: dict) -> str:
    workspace_id, client_id = args["workspaceId"], args["clientId"]
    await api.request(f"/workspaces/{workspace_id}/clients/{client_id}", "DELETE")
    return f"Client {client_id} deleted successfully!"
