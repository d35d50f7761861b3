"""Finance transaction database model."""

from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Float, String
from sqlalchemy.orm import validates

from jobhub.database import Base, new_id
from jobhub.schemas.transaction import AccountType, TxnInterval
from jobhub.utils.dates import as_local_naive


class Transaction(Base):
    """
    Single income or expense event.

    Attributes:
        id: Primary key (UUID string)
        amount: Non-negative magnitude; the sign comes from ``expense``
        date: When the transaction happened, stored as naive local time
        description: Free-text description
        interval: Recurrence interval (see TxnInterval)
        account_type: Account the transaction is booked against
        expense: True for outflows, False for income
    """

    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=new_id)
    amount = Column(Float, nullable=False)
    date = Column(DateTime, default=datetime.now, nullable=False, index=True)
    description = Column(String, nullable=False)
    interval = Column(String, default=TxnInterval.NONE.value, nullable=False)
    account_type = Column(String, default=AccountType.OTHER.value, nullable=False)
    expense = Column(Boolean, default=False, nullable=False)

    def __init__(self, **kwargs):
        kwargs.setdefault("id", new_id())
        kwargs.setdefault("date", datetime.now())
        kwargs.setdefault("interval", TxnInterval.NONE)
        kwargs.setdefault("account_type", AccountType.OTHER)
        kwargs.setdefault("expense", False)
        super().__init__(**kwargs)

    @validates("date")
    def _store_local_time(self, key, value):
        return as_local_naive(value)

    @validates("interval")
    def _coerce_interval(self, key, value):
        return TxnInterval(value).value

    @validates("account_type")
    def _coerce_account_type(self, key, value):
        return AccountType(value).value

    def __repr__(self) -> str:
        """String representation of Transaction."""
        sign = "-" if self.expense else "+"
        return f"<Transaction(id={self.id}, {sign}{self.amount}, '{self.description}')>"
