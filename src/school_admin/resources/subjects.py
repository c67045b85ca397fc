from __future__ import annotations

from typing import Any, Mapping

from ..common.validators import require_non_empty, require_positive
from .base import ResourceDefinition

DEFAULT_SUBJECT_COLOR = "#4C51BF"


def validate_subject(fields: Mapping[str, Any]) -> None:
    require_non_empty(fields.get("name"), "Name")
    require_non_empty(fields.get("shortName"), "Short name")
    require_positive(fields.get("coefficient"), "Coefficient")


SUBJECTS = ResourceDefinition(
    name="subjects",
    path="subjects",
    key_field="id",
    label="Subject",
    search_fields=("name", "shortName"),
    validate=validate_subject,
    defaults=lambda: {"name": "", "shortName": "", "coefficient": 1, "color": DEFAULT_SUBJECT_COLOR},
    export_columns={"name": "Subject", "shortName": "Code", "coefficient": "Coefficient"},
)
