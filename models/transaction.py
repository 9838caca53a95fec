# models/transaction.py

from datetime import date as date_type
from typing import Optional
from pydantic import BaseModel, Field

from models.enums import TransactionType


class TransactionCreate(BaseModel):
    type: TransactionType = TransactionType.expense
    amount: float = Field(..., gt=0)
    category: str = Field(..., min_length=1)
    date: date_type
    description: str = ""
    supplier: Optional[str] = Field(None, description="Only meaningful for expenses")


class Transaction(TransactionCreate):
    id: str
    condo_id: str


class FinancialSummary(BaseModel):
    condo_id: str
    income: float
    expenses: float
    balance: float
