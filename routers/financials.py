# routers/financials.py

from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from core.permission_helpers import requires_permission
from core.store import EntityStore
from dependencies.auth import get_condo_id
from dependencies.store import get_store
from models.enums import TransactionType
from models.transaction import FinancialSummary, Transaction, TransactionCreate
from services.notifications import financial_totals

router = APIRouter(
    prefix="/financials",
    tags=["Financials"],
)


@router.get(
    "/transactions",
    response_model=List[Transaction],
    dependencies=[Depends(requires_permission("finance:read"))],
)
def list_transactions(
    type: Optional[TransactionType] = Query(None, description="Receita or Despesa"),
    store: EntityStore = Depends(get_store),
    condo_id: str = Depends(get_condo_id),
):
    """Transactions of the active condominium, newest first."""
    return store.list_transactions(condo_id, type=type)


@router.post(
    "/transactions",
    response_model=Transaction,
    dependencies=[Depends(requires_permission("finance:write"))],
)
def create_transaction(
    payload: TransactionCreate,
    store: EntityStore = Depends(get_store),
    condo_id: str = Depends(get_condo_id),
):
    data = payload.model_dump()
    # Supplier only applies to expenses
    if payload.type == TransactionType.income:
        data["supplier"] = None
    return store.add_transaction(condo_id, data)


@router.get(
    "/summary",
    response_model=FinancialSummary,
    dependencies=[Depends(requires_permission("finance:read"))],
)
def get_summary(
    store: EntityStore = Depends(get_store),
    condo_id: str = Depends(get_condo_id),
):
    """
    Income, expenses and balance for the active condominium.
    Recomputed on every call.
    """
    return FinancialSummary(condo_id=condo_id, **financial_totals(store, condo_id))
