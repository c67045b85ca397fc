from school_admin.reports.export import export_csv
from school_admin.resources import FEES


def test_export_uses_labels_and_column_order(fee_records):
    content = export_csv(fee_records, FEES.export_columns)

    lines = content.strip().splitlines()
    assert lines[0] == "Fee,Type,Amount,Description"
    assert lines[1] == "Cantine,Meals,5000,Lunch"
    assert len(lines) == 3


def test_export_blank_for_missing_fields():
    content = export_csv([{"feeName": "Cantine"}], {"feeName": "Fee", "amount": "Amount"})

    assert content.strip().splitlines()[1] == "Cantine,"


def test_export_quotes_commas():
    content = export_csv([{"fullname": "Mbemba, Ada"}], {"fullname": "Teacher"})

    assert '"Mbemba, Ada"' in content
