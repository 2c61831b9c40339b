"""Detailed and summary reports.

Both reports live on a separate reports service. The flat tool arguments are
reshaped into Clockify's nested filter payload, and keys left as ``None`` are
stripped because the service rejects explicit nulls for optional filters.
"""
from ..clockify import ClockifyClient
from ..models import Report
from ..routing import ToolRouter
from ..shaping import compact, id_filter

router = ToolRouter()

MAX_DETAILED_PAGE_SIZE = 1000


def entity_filters(args: dict) -> dict:
    return {key: id_filter(args.get(key)) for key in ("users", "clients", "projects", "tasks", "tags")}


def detailed_payload(args: dict) -> dict:
    return compact({
        "dateRangeStart": args.get("dateRangeStart"),
        "dateRangeEnd": args.get("dateRangeEnd"),
        "detailedFilter": {
            "sortColumn": args.get("sortColumn") or "DATE",
            "sortOrder": args.get("sortOrder") or "DESCENDING",
            "page": args.get("page") or 1,
            "pageSize": min(args.get("pageSize") or 50, MAX_DETAILED_PAGE_SIZE),
            "options": {"totals": "CALCULATE"},
        },
        **entity_filters(args),
        "billable": args.get("billable"),
        "description": args.get("description"),
        "withoutDescription": args.get("withoutDescription"),
        "customFieldIds": args.get("customFieldIds"),
        "exportType": args.get("exportType") or "JSON",
    })


def summary_payload(args: dict) -> dict:
    return compact({
        "dateRangeStart": args.get("dateRangeStart"),
        "dateRangeEnd": args.get("dateRangeEnd"),
        "summaryFilter": {
            "groups": args.get("groups") or ["PROJECT"],
            "sortColumn": args.get("sortColumn") or "DURATION",
            "sortOrder": args.get("sortOrder") or "DESCENDING",
        },
        **entity_filters(args),
        "billable": args.get("billable"),
        "exportType": args.get("exportType") or "JSON",
    })


@router.tool("get_detailed_report")
async def get_detailed_report(api: ClockifyClient, args: dict) -> str:
    result = await api.request(
        f"/workspaces/{args['workspaceId']}/reports/detailed",
        "POST",
        detailed_payload(args),
        api.reports_url,
    )
    report = Report.model_validate(result or {})
    return (
        "Detailed Report Summary:\n"
        f"Total Entries: {len(report.timeentries or [])}\n"
        f"Total Duration: {report.total_time()}\n"
        f"Date Range: {args['dateRangeStart']} to {args['dateRangeEnd']}"
    )


@router.tool("get_summary_report")
async def get_summary_report(api: ClockifyClient, args: dict) -> str:
    result = await api.request(
        f"/workspaces/{args['workspaceId']}/reports/summary",
        "POST",
        summary_payload(args),
        api.reports_url,
    )
    report = Report.model_validate(result or {})
    return (
        "Summary Report:\n"
        f"Groups: {', '.join(args.get('groups') or []) or 'PROJECT'}\n"
        f"Total Duration: {report.total_time()}\n"
        f"Date Range: {args['dateRangeStart']} to {args['dateRangeEnd']}\n"
        f"Group Count: {len(report.groupOne or [])}"
    )
