# kakeibo/services/csv_export.py
#
# CSV export of transactions.
# Semicolon-separated with a UTF-8 BOM so spreadsheet apps pick up the encoding.

from datetime import date
from typing import Iterable, Optional

import pandas as pd

from models import Transaction

CSV_COLUMNS = ["Date", "Amount", "Category", "Subcategory", "Description", "Payment Method"]
CSV_SEPARATOR = ";"
UTF8_BOM = "\ufeff"


def export_filename(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"finance_export_{today.isoformat()}.csv"


def export_transactions_csv(transactions: Iterable[Transaction]) -> str:
    rows = [
        {
            "Date": tx.date.isoformat() if tx.date else "",
            "Amount": f"{float(tx.amount):.2f}",
            "Category": tx.category,
            "Subcategory": tx.subcategory,
            "Description": tx.description or "",
            "Payment Method": tx.payment_method or "",
        }
        for tx in transactions
    ]
    df = pd.DataFrame(rows, columns=CSV_COLUMNS)
    return UTF8_BOM + df.to_csv(sep=CSV_SEPARATOR, index=False, lineterminator="\n")
