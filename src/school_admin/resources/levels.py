from __future__ import annotations

from typing import Any, Mapping

from ..common.validators import require_non_empty
from .base import ResourceDefinition


def validate_level(fields: Mapping[str, Any]) -> None:
    require_non_empty(fields.get("name"), "Name")


LEVELS = ResourceDefinition(
    name="levels",
    path="levels",
    key_field="id",
    label="Level",
    search_fields=("name", "description"),
    validate=validate_level,
    defaults=lambda: {"name": "", "description": ""},
    export_columns={"name": "Level", "description": "Description"},
    list_suffix="",
)
