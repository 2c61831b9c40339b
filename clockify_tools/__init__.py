"""Clockify tool catalogue.

Each module in this package describes one resource group and exposes a
``schemas`` list of MCP tool descriptors (``name``, ``description``,
``inputSchema``). The groups are assembled here in a fixed order; the
resulting ``catalogue`` is what clients see when they list tools.
"""
from importlib import import_module

GROUPS = (
    "users",
    "time_entries",
    "projects",
    "tasks",
    "clients",
    "tags",
    "reports",
)

catalogue = []

for _group in GROUPS:
    module = import_module(f"{__name__}.{_group}")
    catalogue.extend(module.schemas)

by_name = {schema["name"]: schema for schema in catalogue}

if len(by_name) != len(catalogue):
    raise RuntimeError("Duplicate tool names in the Clockify catalogue")


def required_arguments(name: str) -> list[str]:
    """Names of the mandatory arguments for a tool."""
    return list(by_name[name]["inputSchema"].get("required", []))
