# kakeibo/services/categories.py
#
# Kakeibo category catalogue: the four fixed top-level categories and
# their (seedable, extendable) subcategories stored in the `categories` table.

import logging
from typing import Dict, List

from sqlalchemy import func
from sqlalchemy.orm import Session

from models import Category

logger = logging.getLogger(__name__)

KAKEIBO_CATEGORIES = ("Needs", "Wants", "Culture", "Unexpected")

DEFAULT_SUBCATEGORIES: Dict[str, List[str]] = {
    "Needs": ["Housing", "Food & Groceries", "Transportation", "Healthcare", "Insurance"],
    "Wants": ["Entertainment", "Dining Out", "Shopping", "Travel"],
    "Culture": ["Education", "Books & Media", "Hobbies"],
    "Unexpected": ["Emergency", "Car Repair", "Medical Emergency"],
}


def seed_default_categories(db: Session) -> int:
    """
    Insert the default subcategories if the table is empty.
    Returns the number of rows inserted.
    """
    count = db.query(func.count(Category.id)).scalar() or 0
    if count:
        return 0

    rows = [
        Category(category_name=category, subcategory_name=sub, is_default=True)
        for category, subs in DEFAULT_SUBCATEGORIES.items()
        for sub in subs
    ]
    db.add_all(rows)
    db.commit()
    logger.info("Seeded %d default subcategories", len(rows))
    return len(rows)


def get_subcategories(db: Session, category: str) -> List[str]:
    rows = (
        db.query(Category.subcategory_name)
        .filter(Category.category_name == category)
        .distinct()
        .order_by(Category.subcategory_name)
        .all()
    )
    return [row[0] for row in rows]


def get_category_map(db: Session) -> Dict[str, List[str]]:
    """
    {category: [subcategory, ...]} for every Kakeibo category (empty lists included).
    Used by the transaction form script.
    """
    result: Dict[str, List[str]] = {name: [] for name in KAKEIBO_CATEGORIES}
    rows = (
        db.query(Category.category_name, Category.subcategory_name)
        .order_by(Category.category_name, Category.subcategory_name)
        .all()
    )
    for category, sub in rows:
        result.setdefault(category, []).append(sub)
    return result
