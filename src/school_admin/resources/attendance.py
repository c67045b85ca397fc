from __future__ import annotations

from typing import Any, Mapping, Optional

from .base import ResourceDefinition


def attendance_key(entry: Mapping[str, Any]) -> Optional[tuple]:
    # one entry per teacher and check-in time
    if entry.get("teacherId") is None:
        return None
    return (entry.get("teacherId"), entry.get("attendanceTime"))


# Entries are produced by the API when a teacher is marked present; the page
# only lists and marks them, so there is no form validation.
ATTENDANCE = ResourceDefinition(
    name="attendance",
    path="attendance",
    key_field="teacherId",
    label="Attendance",
    search_fields=("fullname",),
    key_func=attendance_key,
    export_columns={
        "fullname": "Teacher",
        "numberOfAttendance": "Attendance count",
        "month": "Month",
        "teacherId": "Teacher ID",
    },
)
