# kakeibo/services/validation.py
#
# Form validation for the add / edit transaction forms.
# Turns the raw (string) form payload into a typed TransactionInput.

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, List, Mapping, Optional, Tuple

from kakeibo.services.categories import KAKEIBO_CATEGORIES


@dataclass
class TransactionInput:
    date: date
    amount: float
    category: str
    subcategory: str
    description: str
    payment_method: Optional[str] = None


def _clean(value: Any) -> str:
    return str(value if value is not None else "").strip()


def parse_optional_float(value: Optional[str]) -> Optional[float]:
    value = _clean(value)
    if value == "":
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    # inf, 1e999 and nan parse but are not amounts
    if not math.isfinite(number):
        return None
    return number


def parse_optional_date(s: Optional[str]) -> Optional[date]:
    s = _clean(s)
    if not s:
        return None
    try:
        return datetime.strptime(s, "%Y-%m-%d").date()
    except ValueError:
        return None


def signed_amount(amount: float, is_expense: bool) -> float:
    """
    Users always type a positive number; expenses are stored negative.
    """
    return -abs(amount) if is_expense else abs(amount)


def validate_transaction(form: Mapping[str, Any]) -> Tuple[Optional[TransactionInput], List[str]]:
    """
    Validate a submitted transaction form.

    Returns (TransactionInput, []) on success or (None, [error, ...]).
    """
    errors: List[str] = []

    tx_date = parse_optional_date(form.get("date"))
    if tx_date is None:
        errors.append("Date is required")

    amount = parse_optional_float(form.get("amount"))
    if amount is None or amount == 0:
        errors.append("Valid amount is required")

    category = _clean(form.get("category"))
    if category not in KAKEIBO_CATEGORIES:
        errors.append("Valid category is required")

    subcategory = _clean(form.get("subcategory"))
    if not subcategory:
        errors.append("Subcategory is required")

    description = _clean(form.get("description"))
    if not description:
        errors.append("Description is required")

    if errors:
        return None, errors

    is_expense = _clean(form.get("is_expense", "1")) == "1"

    return (
        TransactionInput(
            date=tx_date,
            amount=signed_amount(amount, is_expense),
            category=category,
            subcategory=subcategory,
            description=description,
            payment_method=_clean(form.get("payment_method")) or None,
        ),
        [],
    )
