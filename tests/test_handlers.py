"""Tests for the request shaping and rendering of each handler."""
import json

import pytest

from clockify_mcp.errors import RemoteAPIError

pytestmark = pytest.mark.anyio

API = "https://api.clockify.me/api/v1"


def text(result: dict) -> str:
    return result["content"][0]["text"]


class TestUsers:
    async def test_current_user(self, dispatcher, fake) -> None:
        fake.reply(json={"id": "u1", "name": "Ada", "email": "ada@example.com", "activeWorkspace": "w1"})
        result = await dispatcher.handle("get_current_user", {})
        assert str(fake.last.url) == f"{API}/user"
        assert text(result) == "Current user: Ada (ada@example.com)\nActive Workspace: w1\nUser ID: u1"

    async def test_workspace_users(self, dispatcher, fake) -> None:
        fake.reply(json=[{"id": "u1", "name": "Ada", "email": "ada@example.com"}])
        result = await dispatcher.handle("get_workspace_users", {"workspaceId": "w1"})
        assert str(fake.last.url) == f"{API}/workspaces/w1/users"
        assert text(result) == "Found 1 user(s) in workspace:\n- Ada (ada@example.com) - u1"


class TestTimeEntries:
    async def test_create_normalizes_date_only_start(self, dispatcher, fake) -> None:
        fake.reply(json={"id": "e1", "timeInterval": {"start": "2024-01-15T00:00:00Z"}})
        result = await dispatcher.handle("create_time_entry", {"workspaceId": "w1", "start": "2024-01-15"})
        assert fake.last.method == "POST"
        assert str(fake.last.url) == f"{API}/workspaces/w1/time-entries"
        assert fake.last_body() == {"start": "2024-01-15T00:00:00.000Z"}
        assert "ID: e1" in text(result)
        assert "End: Ongoing" in text(result)
        assert "Description: No description" in text(result)

    async def test_create_keeps_full_instants(self, dispatcher, fake) -> None:
        fake.reply(json={"id": "e1", "timeInterval": {"start": "2024-01-15T09:00:00Z"}})
        await dispatcher.handle(
            "create_time_entry",
            {
                "workspaceId": "w1",
                "start": "2024-01-15T09:00:00Z",
                "end": "2024-01-15",
                "description": "Standup",
                "tagIds": ["t1"],
                "billable": True,
            },
        )
        assert fake.last_body() == {
            "start": "2024-01-15T09:00:00Z",
            "end": "2024-01-15T00:00:00.000Z",
            "description": "Standup",
            "tagIds": ["t1"],
            "billable": True,
        }

    async def test_list_for_user(self, dispatcher, fake) -> None:
        fake.reply(json=[
            {"description": "Review", "timeInterval": {"start": "s", "end": "e", "duration": "PT1H"}},
            {"timeInterval": {"start": "s2"}},
        ])
        result = await dispatcher.handle(
            "get_time_entries", {"workspaceId": "w1", "userId": "u1", "inProgress": False, "page": 2}
        )
        assert str(fake.last.url) == f"{API}/workspaces/w1/user/u1/time-entries?inProgress=false&page=2"
        assert text(result) == (
            "Found 2 time entries:\n"
            "- Review | s - e | PT1H\n"
            "- No description | s2 - Ongoing | Running"
        )

    async def test_list_without_user(self, dispatcher, fake) -> None:
        fake.reply(json=[])
        await dispatcher.handle("get_time_entries", {"workspaceId": "w1"})
        assert str(fake.last.url) == f"{API}/workspaces/w1/time-entries"

    async def test_update_sends_put_without_ids(self, dispatcher, fake) -> None:
        fake.reply(json={"id": "e1", "timeInterval": {"start": "s", "end": "e"}})
        result = await dispatcher.handle(
            "update_time_entry", {"workspaceId": "w1", "timeEntryId": "e1", "end": "2024-01-15"}
        )
        assert fake.last.method == "PUT"
        assert str(fake.last.url) == f"{API}/workspaces/w1/time-entries/e1"
        assert fake.last_body() == {"end": "2024-01-15T00:00:00.000Z"}
        assert text(result).startswith("Time entry updated successfully!")

    async def test_delete(self, dispatcher, fake) -> None:
        fake.reply(text="")
        result = await dispatcher.handle("delete_time_entry", {"workspaceId": "w1", "timeEntryId": "e1"})
        assert fake.last.method == "DELETE"
        assert fake.last.content == b""
        assert text(result) == "Time entry e1 deleted successfully!"

    async def test_stop_with_explicit_end(self, dispatcher, fake) -> None:
        fake.reply(json={"timeInterval": {"duration": "PT2H"}})
        result = await dispatcher.handle(
            "stop_time_entry", {"workspaceId": "w1", "userId": "u1", "end": "2024-01-15T17:00:00Z"}
        )
        assert fake.last.method == "PATCH"
        assert str(fake.last.url) == f"{API}/workspaces/w1/user/u1/time-entries"
        assert fake.last_body() == {"end": "2024-01-15T17:00:00Z"}
        assert text(result) == "Time entry stopped at 2024-01-15T17:00:00Z\nDuration: PT2H"

    async def test_stop_defaults_to_now(self, dispatcher, fake) -> None:
        fake.reply(json={"timeInterval": {"duration": "PT5M"}})
        await dispatcher.handle("stop_time_entry", {"workspaceId": "w1", "userId": "u1"})
        end = fake.last_body()["end"]
        assert "T" in end and end.endswith("Z")


class TestProjects:
    async def test_list_query_string(self, dispatcher, fake) -> None:
        fake.reply(json=[{"id": "p1", "name": "Site", "clientName": "Acme", "billable": True}])
        result = await dispatcher.handle("get_projects", {"workspaceId": "w1", "archived": True, "pageSize": 10})
        assert str(fake.last.url) == f"{API}/workspaces/w1/projects?archived=true&pageSize=10"
        assert text(result) == "Found 1 project(s):\n- Site (p1) | Client: Acme | Billable: true"

    async def test_create_sends_nested_estimate(self, dispatcher, fake) -> None:
        fake.reply(json={"id": "p1", "name": "Site", "public": False, "billable": True})
        arguments = {
            "workspaceId": "w1",
            "name": "Site",
            "estimate": {"estimate": "PT10H", "type": "MANUAL"},
        }
        result = await dispatcher.handle("create_project", arguments)
        assert fake.last_body() == {"name": "Site", "estimate": {"estimate": "PT10H", "type": "MANUAL"}}
        assert text(result) == (
            "Project created successfully!\nID: p1\nName: Site\nClient: No client\nPublic: false\nBillable: true"
        )

    async def test_get(self, dispatcher, fake) -> None:
        fake.reply(json={"id": "p1", "name": "Site", "color": "#03A9F4", "archived": False})
        result = await dispatcher.handle("get_project", {"workspaceId": "w1", "projectId": "p1"})
        assert str(fake.last.url) == f"{API}/workspaces/w1/projects/p1"
        assert "Color: #03A9F4" in text(result)
        assert "Archived: false" in text(result)

    async def test_update_and_delete(self, dispatcher, fake) -> None:
        fake.reply(json={"name": "Renamed", "billable": False})
        await dispatcher.handle("update_project", {"workspaceId": "w1", "projectId": "p1", "archived": True})
        assert fake.last.method == "PUT"
        assert fake.last_body() == {"archived": True}

        fake.reply(text="")
        result = await dispatcher.handle("delete_project", {"workspaceId": "w1", "projectId": "p1"})
        assert str(fake.last.url) == f"{API}/workspaces/w1/projects/p1"
        assert text(result) == "Project p1 deleted successfully!"


class TestTasks:
    async def test_create(self, dispatcher, fake) -> None:
        fake.reply(json={"id": "t1", "name": "Design", "status": "ACTIVE"})
        result = await dispatcher.handle(
            "create_task", {"workspaceId": "w1", "projectId": "p1", "name": "Design", "assigneeIds": ["u1"]}
        )
        assert str(fake.last.url) == f"{API}/workspaces/w1/projects/p1/tasks"
        assert fake.last_body() == {"name": "Design", "assigneeIds": ["u1"]}
        assert "Project: p1" in text(result)
        assert "Estimate: No estimate" in text(result)

    async def test_list(self, dispatcher, fake) -> None:
        fake.reply(json=[{"id": "t1", "name": "Design", "status": "DONE", "estimate": "PT3H"}])
        result = await dispatcher.handle("get_tasks", {"workspaceId": "w1", "projectId": "p1", "isActive": False})
        assert str(fake.last.url) == f"{API}/workspaces/w1/projects/p1/tasks?isActive=false"
        assert text(result) == "Found 1 task(s):\n- Design (t1) | Status: DONE | Estimate: PT3H"

    async def test_get_counts_assignees(self, dispatcher, fake) -> None:
        fake.reply(json={"id": "t1", "name": "Design", "assigneeIds": ["u1", "u2"]})
        result = await dispatcher.handle("get_task", {"workspaceId": "w1", "projectId": "p1", "taskId": "t1"})
        assert str(fake.last.url) == f"{API}/workspaces/w1/projects/p1/tasks/t1"
        assert text(result).endswith("Assignees: 2")

    async def test_unexpected_field_shapes_still_render(self, dispatcher, fake) -> None:
        estimate = {"estimate": "PT1H", "type": "AUTO"}
        fake.reply(json={"id": "t1", "name": "Design", "status": "ACTIVE", "estimate": estimate})
        result = await dispatcher.handle("create_task", {"workspaceId": "w1", "projectId": "p1", "name": "Design"})
        assert result["isError"] is False
        assert "Estimate: {'estimate': 'PT1H', 'type': 'AUTO'}" in text(result)

    async def test_update_and_delete(self, dispatcher, fake) -> None:
        fake.reply(json={"name": "Design", "status": "DONE"})
        await dispatcher.handle(
            "update_task", {"workspaceId": "w1", "projectId": "p1", "taskId": "t1", "status": "DONE"}
        )
        assert fake.last_body() == {"status": "DONE"}

        fake.reply(text="")
        result = await dispatcher.handle("delete_task", {"workspaceId": "w1", "projectId": "p1", "taskId": "t1"})
        assert fake.last.method == "DELETE"
        assert text(result) == "Task t1 deleted successfully!"


class TestClientsAndTags:
    async def test_client_crud(self, dispatcher, fake) -> None:
        fake.reply(json={"id": "c1", "name": "Acme", "archived": False})
        result = await dispatcher.handle("create_client", {"workspaceId": "w1", "name": "Acme"})
        assert text(result) == "Client created successfully!\nID: c1\nName: Acme\nArchived: false"

        fake.reply(json=[{"id": "c1", "name": "Acme", "archived": True}])
        result = await dispatcher.handle("get_clients", {"workspaceId": "w1", "name": "Ac me"})
        assert str(fake.last.url) == f"{API}/workspaces/w1/clients?name=Ac+me"
        assert text(result) == "Found 1 client(s):\n- Acme (c1) | Archived: true"

        fake.reply(json={"name": "Acme Ltd", "archived": False})
        await dispatcher.handle("update_client", {"workspaceId": "w1", "clientId": "c1", "name": "Acme Ltd"})
        assert fake.last_body() == {"name": "Acme Ltd"}

    async def test_tag_crud(self, dispatcher, fake) -> None:
        fake.reply(json={"id": "g1", "name": "urgent", "archived": False})
        await dispatcher.handle("create_tag", {"workspaceId": "w1", "name": "urgent"})
        assert str(fake.last.url) == f"{API}/workspaces/w1/tags"

        fake.reply(json=[])
        result = await dispatcher.handle("get_tags", {"workspaceId": "w1"})
        assert text(result) == "Found 0 tag(s):"

        fake.reply(json={"name": "urgent", "archived": True})
        result = await dispatcher.handle("update_tag", {"workspaceId": "w1", "tagId": "g1", "archived": True})
        assert text(result) == "Tag updated successfully!\nName: urgent\nArchived: true"

        fake.reply(text="")
        result = await dispatcher.handle("delete_tag", {"workspaceId": "w1", "tagId": "g1"})
        assert text(result) == "Tag g1 deleted successfully!"


@pytest.mark.parametrize(
    "name,arguments",
    [
        ("get_workspace_users", {"workspaceId": "w1"}),
        ("get_project", {"workspaceId": "w1", "projectId": "p1"}),
        ("get_task", {"workspaceId": "w1", "projectId": "p1", "taskId": "t1"}),
        ("get_tasks", {"workspaceId": "w1", "projectId": "p1"}),
        ("get_time_entries", {"workspaceId": "w1", "userId": "u1"}),
    ],
)
async def test_not_found_is_surfaced(dispatcher, fake, name, arguments) -> None:
    fake.reply(404, text="Not found")
    with pytest.raises(RemoteAPIError) as excinfo:
        await dispatcher.handle(name, arguments)
    assert excinfo.value.status_code == 404
    assert "Not found" in excinfo.value.error.message


async def test_deleting_twice_surfaces_remote_error(dispatcher, fake) -> None:
    fake.reply(text="")
    fake.reply(404, text=json.dumps({"message": "Client doesn't exist", "code": 501}))
    await dispatcher.handle("delete_client", {"workspaceId": "w1", "clientId": "c1"})
    with pytest.raises(RemoteAPIError) as excinfo:
        await dispatcher.handle("delete_client", {"workspaceId": "w1", "clientId": "c1"})
    assert excinfo.value.status_code == 404
    assert "Client doesn't exist" in excinfo.value.body
    assert len(fake.requests) == 2


async def test_missing_api_key_is_reported(fake) -> None:
    from clockify_mcp.clockify import ClockifyClient
    from clockify_mcp.config import Settings
    from clockify_mcp.dispatcher import Dispatcher
    from clockify_mcp.errors import ConfigurationError

    dispatcher = Dispatcher(ClockifyClient(Settings(), transport=fake.transport))
    with pytest.raises(ConfigurationError):
        await dispatcher.handle("get_workspaces", {})
    assert fake.requests == []
