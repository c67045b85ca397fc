from __future__ import annotations

from typing import Any, Mapping

from ..common.datetime_utils import today_iso, tomorrow_iso
from ..common.validators import require_date_order, require_fields
from .base import ResourceDefinition


def validate_exclusion(fields: Mapping[str, Any]) -> None:
    require_fields(fields, ("studentId", "startDate", "endDate", "reason"))
    require_date_order(
        fields.get("startDate"),
        fields.get("endDate"),
        start_field="startDate",
        end_field="endDate",
    )


EXCLUSIONS = ResourceDefinition(
    name="exclusions",
    path="exclusions",
    key_field="id",
    label="Exclusion",
    search_fields=("studentName", "className", "reason", "startDate", "endDate"),
    validate=validate_exclusion,
    defaults=lambda: {
        "studentId": "",
        "startDate": today_iso(),
        "endDate": tomorrow_iso(),
        "reason": "",
        "comment": "",
        "notified": False,
    },
    export_columns={
        "studentName": "Student",
        "startDate": "Start",
        "endDate": "End",
        "reason": "Reason",
        "notified": "Notified",
    },
)
