from ..clockify import ClockifyClient
from ..models import Tag
from ..routing import ToolRouter
from ..shaping import bullet_list, flag, split_args, with_query

router = ToolRouter()


@router.tool("create_tag")
async def create_tag(api: ClockifyClient, args: dict) -> str:
    (workspace_id,), body = split_args(args, "workspaceId")
    tag = Tag.model_validate(await api.request(f"/workspaces/{workspace_id}/tags", "POST", body))
    return f"Tag created successfully!\nID: {tag.id}\nName: {tag.name}\nArchived: {flag(tag.archived)}"


@router.tool("get_tags")
async def get_tags(api: ClockifyClient, args: dict) -> str:
    (workspace_id,), params = split_args(args, "workspaceId")
    tags = [Tag.model_validate(t) for t in await api.request(with_query(f"/workspaces/{workspace_id}/tags", params))]
    return bullet_list(
        f"Found {len(tags)} tag(s):",
        [f"- {t.name} ({t.id}) | Archived: {flag(t.archived)}" for t in tags],
    )


@router.tool("update_tag")
async def update_tag(api: ClockifyClient, args: dict) -> str:
    (workspace_id, tag_id), body = split_args(args, "workspaceId", "tagId")
    tag = Tag.model_validate(await api.request(f"/workspaces/{workspace_id}/tags/{tag_id}", "PUT", body))
    return f"Tag updated successfully!\nName: {tag.name}\nArchived: {flag(tag.archived)}"


@router.tool("delete_tag")
async def delete_tag(api: ClockifyClient, args: dict) -> str:
    workspace_id, tag_id = args["workspaceId"], args["tagId"]
    await api.request(f"/workspaces/{workspace_id}/tags/{tag_id}", "DELETE")
    return f"Tag {tag_id} deleted successfully!"
