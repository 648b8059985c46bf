# kakeibo/services/summaries.py
#
# Aggregation queries for the dashboard and the chart series built from them.
#
# The chart renderers only accept typed DataPoint series; the dict rows
# coming out of these queries are converted here, at the boundary.

from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Tuple

from sqlalchemy import case, func
from sqlalchemy.orm import Session

import config
from models import Transaction
from kakeibo.charts.shapes import DataPoint


# ---- Date Range Utilities ----

def add_months(year: int, month: int, delta: int) -> Tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """
    (first day of the month, first day of the next month)
    """
    next_year, next_month = add_months(year, month, 1)
    return date(year, month, 1), date(next_year, next_month, 1)


def month_range(month_str: Optional[str], today: Optional[date] = None):
    """
    month_str: 'YYYY-MM' or None.
    Returns (start_date, end_date_exclusive, normalized_month_str).
    If month_str is None or invalid, uses the current month.
    """
    today = today or date.today()
    year, month = today.year, today.month

    if month_str:
        try:
            year_str, month_only_str = month_str.split("-")
            parsed_year = int(year_str)
            parsed_month = int(month_only_str)
            if not (1 <= parsed_month <= 12):
                raise ValueError(month_str)
            year, month = parsed_year, parsed_month
        except ValueError:
            pass

    start_date, end_date_exclusive = month_bounds(year, month)
    return start_date, end_date_exclusive, f"{year:04d}-{month:02d}"


# ---- Aggregations ----

_income_sum = func.coalesce(
    func.sum(case((Transaction.amount > 0, Transaction.amount), else_=0.0)), 0.0
)
_expense_sum = func.coalesce(
    func.sum(case((Transaction.amount < 0, func.abs(Transaction.amount)), else_=0.0)), 0.0
)


def get_monthly_summary(db: Session, year: int, month: int) -> Dict[str, Any]:
    """
    Income / expense totals for one calendar month.

    Returns:
        {
            "by_category": [{"category", "total_income", "total_expense"}, ...],
            "totals": {"total_income", "total_expense", "net_balance"},
        }
    Expense totals are absolute values.
    """
    month_start, next_month_start = month_bounds(year, month)
    in_month = (Transaction.date >= month_start, Transaction.date < next_month_start)

    rows = (
        db.query(
            Transaction.category.label("category"),
            _income_sum.label("total_income"),
            _expense_sum.label("total_expense"),
        )
        .filter(*in_month)
        .group_by(Transaction.category)
        .order_by(Transaction.category)
        .all()
    )

    income, expense, net = (
        db.query(
            _income_sum,
            _expense_sum,
            func.coalesce(func.sum(Transaction.amount), 0.0),
        )
        .filter(*in_month)
        .one()
    )

    return {
        "by_category": [
            {
                "category": r.category,
                "total_income": float(r.total_income),
                "total_expense": float(r.total_expense),
            }
            for r in rows
        ],
        "totals": {
            "total_income": float(income),
            "total_expense": float(expense),
            "net_balance": float(net),
        },
    }


def get_monthly_trends(db: Session, months: int = 6, today: Optional[date] = None) -> List[Dict[str, Any]]:
    """
    One row per month for the last `months` months (current month included),
    oldest first: {"month": "Jan 2025", "income", "expense", "balance"}.
    """
    today = today or date.today()
    trends: List[Dict[str, Any]] = []

    for offset in range(months - 1, -1, -1):
        year, month = add_months(today.year, today.month, -offset)
        month_start, next_month_start = month_bounds(year, month)

        income, expense = (
            db.query(_income_sum, _expense_sum)
            .filter(Transaction.date >= month_start, Transaction.date < next_month_start)
            .one()
        )
        income = float(income)
        expense = float(expense)

        trends.append(
            {
                "month": month_start.strftime("%b %Y"),
                "income": income,
                "expense": expense,
                "balance": income - expense,
            }
        )

    return trends


# ---- Chart series ----

def expense_pie_series(summary: Mapping[str, Any], colors: Mapping[str, str]) -> List[DataPoint]:
    """
    Categories with a positive expense total, colored from `colors`.
    """
    return [
        DataPoint(
            label=row["category"],
            value=row["total_expense"],
            color=colors.get(row["category"], config.FALLBACK_COLOR),
        )
        for row in summary["by_category"]
        if row["total_expense"] > 0
    ]


def expense_line_series(trends: List[Mapping[str, Any]]) -> List[DataPoint]:
    return [DataPoint(label=row["month"], value=row["expense"]) for row in trends]
