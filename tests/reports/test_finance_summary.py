from school_admin.reports.finance_summary import summarize


def test_breakdown_sorted_by_amount_with_rounded_percentages():
    expenses = [
        {"category": "Salaires", "amount": 380000},
        {"category": "Fournitures", "amount": 75000},
        {"category": "Salaires", "amount": 380000},
        {"category": "Entretien", "amount": 45000},
        {"category": "Électricité", "amount": 28500},
    ]

    summary = summarize(expenses)

    assert summary.total == 908500
    assert [c.category for c in summary.breakdown] == ["Salaires", "Fournitures", "Entretien", "Électricité"]
    assert summary.breakdown[0].percentage == 83.7
    assert summary.breakdown[-1].percentage == 3.1


def test_missing_category_and_bad_amounts():
    summary = summarize(
        [{"feeType": None, "amount": "12"}, {"feeType": "Bus", "amount": "n/a"}],
        category_field="feeType",
    )

    assert summary.total == 12
    assert summary.to_dict()["breakdown"][0] == {"category": "Other", "amount": 12.0, "percentage": 100.0}


def test_empty_input():
    summary = summarize([])

    assert summary.total == 0
    assert summary.breakdown == ()
