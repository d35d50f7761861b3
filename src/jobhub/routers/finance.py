"""Finance API router - transactions and the weekly summary."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, HTTPException

from jobhub.models.transaction import Transaction
from jobhub.routers.dependencies import commit, get_repository
from jobhub.schemas.transaction import Transaction as TransactionSchema
from jobhub.schemas.transaction import TransactionCreate, WeeklySummary
from jobhub.services.finance import week_bounds, weekly_transaction_summary
from jobhub.services.repository import Repository

router = APIRouter()


@router.get("/transactions", response_model=list[TransactionSchema])
def list_transactions(repo: Repository = Depends(get_repository)) -> list[TransactionSchema]:
    """List all transactions, oldest first."""
    rows = repo.query(Transaction, order_by=[Transaction.date.asc()])
    return [TransactionSchema.model_validate(txn) for txn in rows]


@router.post("/transactions", response_model=TransactionSchema, status_code=201)
def create_transaction(
    payload: TransactionCreate,
    repo: Repository = Depends(get_repository),
) -> TransactionSchema:
    """Record an income or expense transaction."""
    txn = Transaction(**payload.model_dump())
    repo.insert(txn)
    commit(repo)
    return TransactionSchema.model_validate(txn)


@router.get("/transactions/weekly", response_model=WeeklySummary)
def weekly_summary(
    week_of: date | None = None,
    repo: Repository = Depends(get_repository),
) -> WeeklySummary:
    """
    Summarize the Sunday-to-Saturday week containing ``week_of``.

    Args:
        week_of: Any day in the week (default: today).

    Returns:
        Per-day totals plus week income, expenses, and net.
    """
    start, end = week_bounds(week_of or date.today())
    rows = repo.query(
        Transaction,
        order_by=[Transaction.date.asc()],
        where=Transaction.date.between(start, end),
    )
    return WeeklySummary.model_validate(weekly_transaction_summary(rows, start))


@router.delete("/transactions/{transaction_id}", status_code=204)
def delete_transaction(transaction_id: str, repo: Repository = Depends(get_repository)) -> None:
    """
    Delete a transaction.

    Raises:
        HTTPException 404: If the transaction is not found.
    """
    txn = repo.get(Transaction, transaction_id)
    if not txn:
        raise HTTPException(status_code=404, detail="Transaction not found")
    repo.delete(txn)
    commit(repo)
