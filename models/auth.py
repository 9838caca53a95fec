from typing import Optional
from pydantic import BaseModel, EmailStr, Field

from models.enums import ResidentType, UserRole


# -----------------------------------------------------
# LOGIN REQUEST (simulated: only the email is matched)
# -----------------------------------------------------
class LoginRequest(BaseModel):
    email: EmailStr
    password: str = ""


# -----------------------------------------------------
# TOKEN RESPONSE (signed session reference)
# -----------------------------------------------------
class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    role: UserRole
    condo_id: Optional[str] = None
    resident_id: Optional[str] = None


# -----------------------------------------------------
# SELF REGISTRATION
# -----------------------------------------------------
class RegisterRequest(BaseModel):
    role: UserRole = UserRole.morador
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=1)
    confirm_password: str = Field(..., min_length=1)

    # Resident-only fields
    cpf: Optional[str] = None
    phone: str = ""
    condo_id: Optional[str] = None
    block: str = ""
    unit: Optional[str] = None
    type: ResidentType = ResidentType.resident


class RegisterResponse(BaseModel):
    status: str
    detail: str
    resident_id: Optional[str] = None
    token: Optional[TokenResponse] = None


class ForgotPasswordRequest(BaseModel):
    email: EmailStr


class SessionRead(BaseModel):
    """What /auth/me reports about the current session."""
    session_id: str
    role: UserRole
    condo_id: Optional[str] = None
    resident_id: Optional[str] = None
    permissions: list[str] = []
