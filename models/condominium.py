# models/condominium.py

from typing import Optional
from pydantic import BaseModel, Field


# -------------------------------------------------
# Shared fields
# -------------------------------------------------
class CondominiumBase(BaseModel):
    name: str = Field(..., min_length=1)
    address: str = ""
    cnpj: Optional[str] = None
    units_total: int = Field(0, ge=0)


# -------------------------------------------------
# Create
# -------------------------------------------------
class CondominiumCreate(CondominiumBase):
    """
    Used when a manager registers a new condominium.
    No ID supplied; the store generates one.
    """
    pass


# -------------------------------------------------
# Stored record / API response
# -------------------------------------------------
class Condominium(CondominiumBase):
    id: str
    manager_name: str


class CondoSwitchRequest(BaseModel):
    condo_id: str
