# kakeibo/services/transactions.py
#
# CRUD and filtered listing for transactions.
# Everything goes through the ORM so user input is always a bound parameter.

import logging
from dataclasses import asdict, dataclass
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from models import Transaction
from kakeibo.services.validation import TransactionInput, parse_optional_date

logger = logging.getLogger(__name__)


@dataclass
class TransactionFilters:
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    category: Optional[str] = None
    search: Optional[str] = None


def add_transaction(db: Session, data: TransactionInput) -> Transaction:
    tx = Transaction(**asdict(data))
    db.add(tx)
    db.commit()
    db.refresh(tx)
    logger.info("Added transaction id=%s (%s %s)", tx.id, tx.category, tx.amount)
    return tx


def get_transaction(db: Session, tx_id: int) -> Optional[Transaction]:
    return db.get(Transaction, tx_id)


def update_transaction(db: Session, tx_id: int, data: TransactionInput) -> Optional[Transaction]:
    tx = get_transaction(db, tx_id)
    if tx is None:
        return None

    for field, value in asdict(data).items():
        setattr(tx, field, value)

    db.commit()
    db.refresh(tx)
    logger.info("Updated transaction id=%s", tx.id)
    return tx


def delete_transaction(db: Session, tx_id: int) -> bool:
    tx = get_transaction(db, tx_id)
    if tx is None:
        return False

    db.delete(tx)
    db.commit()
    logger.info("Deleted transaction id=%s", tx_id)
    return True


def get_transactions(db: Session, filters: Optional[TransactionFilters] = None) -> List[Transaction]:
    """
    All transactions matching the filters, newest first.

    - start_date / end_date are inclusive
    - category is an exact match
    - search is a case-insensitive substring of the description
    """
    filters = filters or TransactionFilters()
    query = db.query(Transaction)

    if filters.start_date:
        query = query.filter(Transaction.date >= filters.start_date)

    if filters.end_date:
        query = query.filter(Transaction.date <= filters.end_date)

    if filters.category:
        query = query.filter(Transaction.category == filters.category)

    if filters.search:
        query = query.filter(Transaction.description.ilike(f"%{filters.search}%"))

    return query.order_by(Transaction.date.desc(), Transaction.id.desc()).all()


def filters_from_params(params) -> TransactionFilters:
    """
    Build filters from query/form params (start_date, end_date, category, search).
    Blank or unparsable values are ignored.
    """
    category = (params.get("category") or "").strip()
    search = (params.get("search") or "").strip()
    return TransactionFilters(
        start_date=parse_optional_date(params.get("start_date")),
        end_date=parse_optional_date(params.get("end_date")),
        category=category or None,
        search=search or None,
    )
