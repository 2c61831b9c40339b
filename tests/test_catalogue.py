"""Tests for the tool catalogue."""
from clockify_mcp.handlers import HANDLERS
from clockify_tools import by_name, catalogue, required_arguments


class TestCatalogue:
    """The catalogue is the contract clients discover."""

    def test_every_tool_has_exactly_one_handler(self) -> None:
        names = [tool["name"] for tool in catalogue]
        assert sorted(names) == sorted(HANDLERS)
        assert len(names) == len(set(names))

    def test_groups_are_ordered(self) -> None:
        names = [tool["name"] for tool in catalogue]
        assert names[:3] == ["get_current_user", "get_workspaces", "get_workspace_users"]
        assert names.index("stop_time_entry") < names.index("create_project")
        assert names[-2:] == ["get_detailed_report", "get_summary_report"]
        assert len(names) == 28

    def test_descriptors_have_mcp_shape(self) -> None:
        for tool in catalogue:
            assert set(tool) == {"name", "description", "inputSchema"}
            assert tool["inputSchema"]["type"] == "object"
            for name in tool["inputSchema"].get("required", []):
                assert name in tool["inputSchema"]["properties"]

    def test_enums(self) -> None:
        detailed = by_name["get_detailed_report"]["inputSchema"]["properties"]
        assert detailed["sortOrder"]["enum"] == ["ASCENDING", "DESCENDING"]
        assert detailed["exportType"]["enum"] == ["JSON", "PDF", "CSV", "XLSX"]
        estimate = by_name["create_project"]["inputSchema"]["properties"]["estimate"]
        assert estimate["properties"]["type"]["enum"] == ["AUTO", "MANUAL"]

    def test_required_arguments(self) -> None:
        assert required_arguments("get_workspaces") == []
        assert required_arguments("get_task") == ["workspaceId", "projectId", "taskId"]
        assert required_arguments("get_summary_report") == ["workspaceId", "dateRangeStart", "dateRangeEnd"]
