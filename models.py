# models.py
# Role: SQLAlchemy ORM models for the finance tracker domain.
#       Defines Transaction (one income/expense entry) and Category
#       (the Kakeibo category -> subcategory catalogue).

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    func,
)

from db import Base


class Transaction(Base):
    """
    ORM model representing a single financial transaction.

    Amounts are signed: negative = expense, positive = income.
    """

    __tablename__ = "transactions"

    # Primary key
    id = Column(Integer, primary_key=True, index=True)

    # Date the money moved
    date = Column(Date, nullable=False, index=True)

    # Signed amount, two decimals
    amount = Column(Numeric(15, 2, asdecimal=False), nullable=False)

    # Kakeibo category: Needs / Wants / Culture / Unexpected
    category = Column(String(50), nullable=False, index=True)

    # Subcategory within the category, e.g. "Housing"
    subcategory = Column(String(100), nullable=False, index=True)

    # Free-text description
    description = Column(Text, nullable=True)

    # Cash, Card, Transfer... (free text)
    payment_method = Column(String(50), nullable=True)

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime,
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    @property
    def is_expense(self) -> bool:
        return (self.amount or 0) < 0


class Category(Base):
    """
    One (category, subcategory) pair offered in the transaction form.
    """

    __tablename__ = "categories"
    __table_args__ = (
        UniqueConstraint("category_name", "subcategory_name", name="uq_category_subcategory"),
    )

    id = Column(Integer, primary_key=True, index=True)
    category_name = Column(String(50), nullable=False)
    subcategory_name = Column(String(100), nullable=False)

    # Seeded rows are marked as defaults
    is_default = Column(Boolean, nullable=False, default=True)
