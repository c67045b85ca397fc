from __future__ import annotations

from typing import Any, Mapping

from ..common.validators import require_non_empty, require_positive
from .base import ResourceDefinition


def validate_payment(fields: Mapping[str, Any]) -> None:
    require_non_empty(fields.get("studentFeeProfileId"), "Student fee profile")
    require_non_empty(fields.get("feeId"), "Fee")
    require_positive(fields.get("amount"), "Amount")
    require_positive(fields.get("quantity"), "Quantity")


PAYMENTS = ResourceDefinition(
    name="payments",
    path="payments",
    key_field="id",
    label="Payment",
    search_fields=("studentFeeProfileId", "feeId", "paymentMethod", "note"),
    validate=validate_payment,
    defaults=lambda: {
        "studentFeeProfileId": "",
        "feeId": "",
        "amount": 0,
        "quantity": 1,
        "paymentMethod": "",
        "applicablePeriod": "",
        "note": "",
    },
    export_columns={
        "studentFeeProfileId": "Student fee profile",
        "feeId": "Fee",
        "amount": "Amount",
        "quantity": "Quantity",
        "paymentMethod": "Method",
        "applicablePeriod": "Period",
    },
    list_suffix="",
)
