"""Lenient views of Clockify resources.

Only the fields the handlers render are declared, and they accept any JSON
value so an unexpected shape never fails a call that already succeeded
remotely. Everything else the API returns is kept as extra data and ignored.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict


class Resource(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Any = None
    name: Any = None


class User(Resource):
    email: Any = None
    activeWorkspace: Any = None
    defaultWorkspace: Any = None


class Workspace(Resource):
    pass


class TimeInterval(BaseModel):
    model_config = ConfigDict(extra="allow")

    start: Any = None
    end: Any = None
    duration: Any = None


class TimeEntry(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Any = None
    description: Any = None
    timeInterval: TimeInterval | None = None

    @property
    def interval(self) -> TimeInterval:
        return self.timeInterval or TimeInterval()


class Project(Resource):
    clientName: Any = None
    public: Any = None
    billable: Any = None
    color: Any = None
    archived: Any = None


class Task(Resource):
    status: Any = None
    estimate: Any = None
    assigneeIds: list | None = None


class Client(Resource):
    archived: Any = None


class Tag(Resource):
    archived: Any = None


class ReportTotals(BaseModel):
    model_config = ConfigDict(extra="allow")

    totalTime: Any = None


class Report(BaseModel):
    model_config = ConfigDict(extra="allow")

    totals: list[ReportTotals | None] | None = None
    timeentries: list | None = None
    groupOne: list | None = None

    def total_time(self) -> str:
        first = self.totals[0] if self.totals else None
        if first is None or first.totalTime in (None, "", 0):
            return "0:00:00"
        return str(first.totalTime)
