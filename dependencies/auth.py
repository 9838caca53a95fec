from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from core.auth_helpers import decode_session_id
from core.sessions import Session, SessionRegistry
from dependencies.store import get_sessions


# auto_error=False so a missing header is a 401 like any other bad token
bearer_scheme = HTTPBearer(auto_error=False)


# ============================================================
# AUTH DECODING (token → live session)
# ============================================================
def get_current_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    sessions: SessionRegistry = Depends(get_sessions),
) -> Session:

    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired authentication token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if not credentials:
        raise unauthorized

    session_id = decode_session_id(credentials.credentials)
    if not session_id:
        raise unauthorized

    # Token is well-formed but the session was logged out
    session = sessions.get(session_id)
    if session is None:
        raise unauthorized

    return session


# ============================================================
# TENANT SCOPE: every tenant-scoped route needs an active condo
# ============================================================
def get_condo_id(session: Session = Depends(get_current_session)) -> str:
    if not session.condo_id:
        raise HTTPException(
            status_code=400,
            detail="Nenhum condomínio selecionado.",
        )
    return session.condo_id
