from __future__ import annotations

from typing import Any, Mapping

from ..common.datetime_utils import today_iso
from ..common.validators import require_fields, require_iso_date
from .base import ResourceDefinition


def validate_absence(fields: Mapping[str, Any]) -> None:
    require_fields(fields, ("studentId", "date", "reason"))
    require_iso_date(fields.get("date"), "date")


ABSENCES = ResourceDefinition(
    name="absences",
    path="absences",
    key_field="id",
    label="Absence",
    search_fields=("studentName", "className", "reason", "date"),
    validate=validate_absence,
    defaults=lambda: {
        "studentId": "",
        "date": today_iso(),
        "reason": "",
        "justified": False,
        "comment": "",
    },
    export_columns={
        "studentName": "Student",
        "className": "Class",
        "date": "Date",
        "reason": "Reason",
        "justified": "Justified",
        "comment": "Comment",
    },
)
