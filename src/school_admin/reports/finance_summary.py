from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

UNCATEGORIZED = "Other"


@dataclass(frozen=True)
class CategoryShare:
    category: str
    amount: float
    percentage: float

    def to_dict(self) -> dict:
        return {"category": self.category, "amount": self.amount, "percentage": self.percentage}


@dataclass(frozen=True)
class FinanceSummary:
    total: float
    breakdown: tuple[CategoryShare, ...]

    def to_dict(self) -> dict:
        return {"total": self.total, "breakdown": [c.to_dict() for c in self.breakdown]}


def summarize(
    records: Iterable[Mapping[str, Any]],
    *,
    category_field: str = "category",
    amount_field: str = "amount",
) -> FinanceSummary:
    """Total amount and per-category share (percent, one decimal), largest first."""
    totals: dict[str, float] = {}
    for record in records:
        category = record.get(category_field) or UNCATEGORIZED
        try:
            amount = float(record.get(amount_field) or 0)
        except (TypeError, ValueError):
            amount = 0.0
        totals[category] = totals.get(category, 0.0) + amount

    total = sum(totals.values())
    shares = [
        CategoryShare(
            category=category,
            amount=amount,
            percentage=round(amount * 100 / total, 1) if total else 0.0,
        )
        for category, amount in totals.items()
    ]
    shares.sort(key=lambda s: s.amount, reverse=True)
    return FinanceSummary(total=total, breakdown=tuple(shares))
