from datetime import date

from models import Transaction
from kakeibo.services.csv_export import export_filename, export_transactions_csv


def test_export_filename():
    assert export_filename(date(2025, 3, 9)) == "finance_export_2025-03-09.csv"


def test_export_has_bom_header_and_semicolons():
    tx = Transaction(
        date=date(2025, 3, 1),
        amount=-12.5,
        category="Wants",
        subcategory="Dining Out",
        description="Ramen; extra egg",
        payment_method=None,
    )
    text = export_transactions_csv([tx])
    lines = text.splitlines()

    assert text.startswith("\ufeff")
    assert lines[0] == "\ufeffDate;Amount;Category;Subcategory;Description;Payment Method"
    assert lines[1] == '2025-03-01;-12.50;Wants;Dining Out;"Ramen; extra egg";'


def test_export_of_nothing_is_header_only():
    lines = export_transactions_csv([]).splitlines()
    assert len(lines) == 1
