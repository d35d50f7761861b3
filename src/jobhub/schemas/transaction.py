"""Finance transaction Pydantic schemas."""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from jobhub.schemas.job import NonEmptyStr


class TxnInterval(str, Enum):
    """Recurrence interval of a transaction."""

    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    ANNUALLY = "annually"


class AccountType(str, Enum):
    """Account a transaction is booked against."""

    CHECKING = "checking"
    SAVINGS = "savings"
    CASH = "cash"
    CREDIT = "credit"
    OTHER = "other"


class TransactionCreate(BaseModel):
    """Schema for recording a transaction."""

    amount: float = Field(ge=0)
    date: datetime
    description: NonEmptyStr
    interval: TxnInterval = TxnInterval.NONE
    account_type: AccountType = AccountType.OTHER
    expense: bool = False


class Transaction(BaseModel):
    """Complete transaction schema with database fields."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    amount: float
    date: datetime
    description: str
    interval: TxnInterval
    account_type: AccountType
    expense: bool


class DaySummary(BaseModel):
    """One day of a weekly summary."""

    model_config = ConfigDict(from_attributes=True)

    date: date
    transactions: list[Transaction]
    total: float


class WeeklySummary(BaseModel):
    """Sunday-to-Saturday transaction summary."""

    model_config = ConfigDict(from_attributes=True)

    start: datetime
    end: datetime
    days: list[DaySummary]
    income: float
    expenses: float
    net: float
