"""Argument definitions shared by several tool groups."""

WORKSPACE_ID = {"type": "string", "description": "Workspace ID"}
PAGE = {"type": "number", "description": "Page number (default: 1)"}
PAGE_SIZE = {"type": "number", "description": "Page size (default: 50, max: 5000)"}
SORT_ORDER = {"type": "string", "enum": ["ASCENDING", "DESCENDING"], "description": "Sort order"}
EXPORT_TYPE = {"type": "string", "enum": ["JSON", "PDF", "CSV", "XLSX"], "description": "Export format"}


def string_list(description: str) -> dict:
    return {"type": "array", "items": {"type": "string"}, "description": description}
