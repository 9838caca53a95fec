# core/auth_helpers.py

from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from core.config import settings
from core.sessions import Session


# ============================================================
# 🔐 Session token: signed reference to a live session
# ============================================================
def create_access_token(session: Session) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {
        "sid": session.id,
        "role": str(session.role),
        "exp": expire,
    }
    return jwt.encode(
        to_encode,
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_session_id(token: str) -> Optional[str]:
    """Return the session id carried by the token, or None if it is invalid/expired."""
    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except JWTError:
        return None
    return payload.get("sid")
