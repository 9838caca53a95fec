# models/provider.py

from typing import Optional
from pydantic import BaseModel, Field


class ProviderBase(BaseModel):
    name: str = Field(..., min_length=1)
    specialty: str = Field(..., min_length=1, description="e.g. Elétrica, Hidráulica")
    phone: str = Field(..., min_length=1)
    email: str = ""
    company: str = Field(..., min_length=1)


class ProviderCreate(ProviderBase):
    pass


class Provider(ProviderBase):
    id: str
    condo_id: str
    active: bool = True


class ProviderUpdate(BaseModel):
    name: Optional[str] = None
    specialty: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    company: Optional[str] = None
    active: Optional[bool] = None
