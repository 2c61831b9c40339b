from ..clockify import ClockifyClient
from ..models import TimeEntry
from ..routing import ToolRouter
from ..shaping import bullet_list, normalize_dates, now_instant, split_args, with_query

router = ToolRouter()


def describe_entry(headline: str, entry: TimeEntry) -> str:
    interval = entry.interval
    return (
        f"{headline}\n"
        f"ID: {entry.id}\n"
        f"Description: {entry.description or 'No description'}\n"
        f"Start: {interval.start}\n"
        f"End: {interval.end or 'Ongoing'}"
    )


@router.tool("create_time_entry")
async def create_time_entry(api: ClockifyClient, args: dict) -> str:
    (workspace_id,), body = split_args(args, "workspaceId")
    normalize_dates(body, "start", "end")
    entry = TimeEntry.model_validate(
        await api.request(f"/workspaces/{workspace_id}/time-entries", "POST", body)
    )
    return describe_entry("Time entry created successfully!", entry)


@router.tool("get_time_entries")
async def get_time_entries(api: ClockifyClient, args: dict) -> str:
    (workspace_id, user_id), params = split_args(args, "workspaceId", "userId")
    if user_id:
        path = f"/workspaces/{workspace_id}/user/{user_id}/time-entries"
    else:
        path = f"/workspaces/{workspace_id}/time-entries"
    entries = [TimeEntry.model_validate(e) for e in await api.request(with_query(path, params))]

    lines = []
    for entry in entries:
        interval = entry.interval
        lines.append(
            f"- {entry.description or 'No description'} | "
            f"{interval.start} - {interval.end or 'Ongoing'} | "
            f"{interval.duration or 'Running'}"
        )
    return bullet_list(f"Found {len(entries)} time entries:", lines)


@router.tool("update_time_entry")
async def update_time_entry(api: ClockifyClient, args: dict) -> str:
    (workspace_id, entry_id), body = split_args(args, "workspaceId", "timeEntryId")
    normalize_dates(body, "start", "end")
    entry = TimeEntry.model_validate(
        await api.request(f"/workspaces/{workspace_id}/time-entries/{entry_id}", "PUT", body)
    )
    return describe_entry("Time entry updated successfully!", entry)


@router.tool("delete_time_entry")
async def delete_time_entry(api: ClockifyClient, args: dict) -> str:
    workspace_id, entry_id = args["workspaceId"], args["timeEntryId"]
    await api.request(f"/workspaces/{workspace_id}/time-entries/{entry_id}", "DELETE")
    return f"Time entry {entry_id} deleted successfully!"


@router.tool("stop_time_entry")
async def stop_time_entry(api: ClockifyClient, args: dict) -> str:
    # Stops whatever entry is currently running for the user.
    end = args.get("end") or now_instant()
    result = await api.request(
        f"/workspaces/{args['workspaceId']}/user/{args['userId']}/time-entries",
        "PATCH",
        {"end": end},
    )
    entry = TimeEntry.model_validate(result or {})
    return f"Time entry stopped at {end}\nDuration: {entry.interval.duration or 'unknown'}"
