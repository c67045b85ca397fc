from __future__ import annotations

from typing import Any, Mapping

from ..common.validators import require_non_empty, require_positive
from .base import ResourceDefinition


def validate_fee(fields: Mapping[str, Any]) -> None:
    require_non_empty(fields.get("feeName"), "Fee name")
    require_positive(fields.get("amount"), "Amount")


FEES = ResourceDefinition(
    name="fees",
    path="annex-fees",
    key_field="feeId",
    label="Fee",
    search_fields=("feeName", "description"),
    validate=validate_fee,
    defaults=lambda: {"feeName": "", "amount": 0, "description": ""},
    export_columns={"feeName": "Fee", "feeType": "Type", "amount": "Amount", "description": "Description"},
)
