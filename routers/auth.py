# routers/auth.py

from fastapi import APIRouter, HTTPException, Depends, Request

from core.auth_helpers import create_access_token
from core.config import settings
from core.errors import StoreError, handle_store_error
from core.logging_config import logger
from core.permissions import get_effective_permissions
from core.rate_limiter import require_rate_limit, get_rate_limit_identifier
from core.sessions import Session, SessionRegistry
from core.store import EntityStore
from dependencies.auth import get_current_session
from dependencies.store import get_sessions, get_store
from models.auth import (
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    SessionRead,
    TokenResponse,
)
from models.enums import ResidentStatus, UserRole


router = APIRouter(
    prefix="/auth",
    tags=["Auth"],
)


def _token_response(session: Session) -> TokenResponse:
    return TokenResponse(
        access_token=create_access_token(session),
        role=session.role,
        condo_id=session.condo_id,
        resident_id=session.resident_id,
    )


# ============================================================
# LOGIN (simulated, the email decides who you are)
# ============================================================
@router.post("/login", response_model=TokenResponse, summary="Authenticate user")
def login(
    payload: LoginRequest,
    store: EntityStore = Depends(get_store),
    sessions: SessionRegistry = Depends(get_sessions),
):
    email = payload.email.strip().lower()

    # Hardcoded manager account for the demo
    if email == settings.MANAGER_EMAIL.lower():
        session = sessions.login(UserRole.sindico)
        return _token_response(session)

    resident = store.find_resident_by_email(email)
    if resident is None:
        logger.warning(f"Login attempt failed for {email}: not found")
        raise HTTPException(
            status_code=401,
            detail="Usuário não encontrado ou senha incorreta."
        )

    try:
        session = sessions.login(UserRole.morador, resident.id)
    except StoreError as e:
        raise handle_store_error(e, f"Login for {email}")

    return _token_response(session)


# ============================================================
# REGISTER
# ============================================================
@router.post("/register", response_model=RegisterResponse, summary="Self registration")
def register(
    payload: RegisterRequest,
    store: EntityStore = Depends(get_store),
    sessions: SessionRegistry = Depends(get_sessions),
):
    """
    Residents register into a condominium and wait for the síndico's
    approval; they are not logged in. Manager registration is simulated and
    opens a manager session right away.
    """
    if payload.password != payload.confirm_password:
        raise HTTPException(400, "As senhas não coincidem.")

    if payload.role == UserRole.sindico:
        session = sessions.login(UserRole.sindico)
        return RegisterResponse(
            status="active",
            detail="Cadastro realizado com sucesso!",
            token=_token_response(session),
        )

    if not payload.condo_id or not payload.unit:
        raise HTTPException(400, "Condomínio e unidade são obrigatórios.")

    try:
        store.get_condo(payload.condo_id)
        store.ensure_email_available(payload.email)
    except StoreError as e:
        raise handle_store_error(e, "Register resident")

    resident = store.add_resident(
        payload.condo_id,
        {
            "name": payload.name.strip(),
            "cpf": payload.cpf,
            "phone": payload.phone,
            "email": payload.email.strip().lower(),
            "block": payload.block,
            "unit": payload.unit,
            "type": payload.type,
            "status": ResidentStatus.pending,
        },
    )

    return RegisterResponse(
        status=str(resident.status),
        detail="Cadastro enviado! Aguarde a aprovação do síndico.",
        resident_id=resident.id,
    )


# ============================================================
# FORGOT PASSWORD (simulated, rate limited)
# ============================================================
@router.post("/forgot-password", summary="Request password reset link")
def forgot_password(payload: ForgotPasswordRequest, request: Request):
    identifier = get_rate_limit_identifier(request, email=payload.email)
    require_rate_limit(
        request,
        identifier=identifier,
        max_requests=settings.FORGOT_PASSWORD_MAX_REQUESTS,
        window_seconds=settings.FORGOT_PASSWORD_WINDOW_SECONDS,
    )

    # Same answer whether or not the email exists
    return {
        "success": True,
        "detail": "Link enviado! (Simulação: Verifique seu email para redefinir)",
    }


# ============================================================
# LOGOUT
# ============================================================
@router.post("/logout", summary="End the current session")
def logout(
    session: Session = Depends(get_current_session),
    sessions: SessionRegistry = Depends(get_sessions),
):
    sessions.logout(session.id)
    return {"success": True}


# ============================================================
# CURRENT SESSION
# ============================================================
@router.get("/me", response_model=SessionRead, summary="Current session")
def read_me(session: Session = Depends(get_current_session)):
    return SessionRead(
        session_id=session.id,
        role=session.role,
        condo_id=session.condo_id,
        resident_id=session.resident_id,
        permissions=sorted(get_effective_permissions(session.role)),
    )
