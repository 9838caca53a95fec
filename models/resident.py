# models/resident.py

from typing import Optional
from pydantic import BaseModel, EmailStr, Field

from models.enums import ResidentStatus, ResidentType


class ResidentBase(BaseModel):
    name: str = Field(..., min_length=1)
    cpf: Optional[str] = None
    block: str = ""
    unit: str = Field(..., min_length=1)
    phone: str = ""
    email: str = ""
    type: ResidentType = ResidentType.resident


class ResidentCreate(ResidentBase):
    """Quick add by the manager; the resident is active right away."""
    email: Optional[EmailStr] = None


class Resident(ResidentBase):
    id: str
    condo_id: str
    status: ResidentStatus = ResidentStatus.active


# -------------------------------------------------
# Update (PATCH), condo_id and status are not editable here
# -------------------------------------------------
class ResidentUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    cpf: Optional[str] = None
    block: Optional[str] = None
    unit: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    type: Optional[ResidentType] = None


class ProfileUpdate(BaseModel):
    """Contact fields a resident may change on their own profile."""
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
