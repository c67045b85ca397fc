from __future__ import annotations

from typing import Any, Mapping

from ..common.validators import require_non_empty
from .base import ResourceDefinition


def validate_class(fields: Mapping[str, Any]) -> None:
    require_non_empty(fields.get("name"), "Name")
    require_non_empty(fields.get("levelId"), "Level")


CLASSES = ResourceDefinition(
    name="classes",
    path="classes",
    key_field="id",
    label="Class",
    search_fields=("name", "classDescription"),
    validate=validate_class,
    defaults=lambda: {"name": "", "levelId": "", "classDescription": ""},
    export_columns={"name": "Class", "levelId": "Level", "classDescription": "Description"},
    list_suffix="",
)
