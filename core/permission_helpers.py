from fastapi import Depends, HTTPException

from core.permissions import can
from core.sessions import Session
from dependencies.auth import get_current_session
from models.enums import UserRole


def is_manager(session: Session) -> bool:
    return session.role == UserRole.sindico


def require_manager(session: Session):
    """Raise exception if the session is not the síndico."""
    if not is_manager(session):
        raise HTTPException(
            status_code=403,
            detail="Apenas o síndico pode realizar esta ação."
        )


# -----------------------------------------------------
# FastAPI dependency wrapper
# -----------------------------------------------------
def requires_permission(permission: str):
    """
    Usage:
        @router.post("/", dependencies=[Depends(requires_permission("notices:write"))])
    """

    def dependency(session: Session = Depends(get_current_session)):
        if not can(session.role, permission):
            raise HTTPException(
                status_code=403,
                detail=f"Insufficient permissions: '{permission}' required"
            )
        return session

    return dependency
