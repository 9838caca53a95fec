# core/sessions.py

"""
Session / scope resolution.

A session pins a viewer (role + optional resident id) to one active
condominium. Every tenant-scoped query reads session.condo_id.
"""

import uuid
from threading import Lock
from typing import Dict, Optional

from pydantic import BaseModel

from core.errors import NotFoundError, PendingApprovalError, PermissionDeniedError
from core.logging_config import logger
from core.permissions import can
from core.store import EntityStore
from models.enums import ResidentStatus, UserRole


class Session(BaseModel):
    id: str
    role: UserRole
    condo_id: Optional[str] = None
    resident_id: Optional[str] = None


class SessionRegistry:
    """Live sessions keyed by id. Logged-out sessions are simply forgotten."""

    def __init__(self, store: EntityStore):
        self._store = store
        self._sessions: Dict[str, Session] = {}
        self._lock = Lock()

    # ============================================================
    # LOGIN
    # ============================================================
    def login(self, role: UserRole, resident_id: Optional[str] = None) -> Session:
        """
        Open a session for the given role.

        Residents are locked to their home condominium; an unknown or pending
        resident raises before any session state is created. Managers start
        on the first condominium.
        """
        condo_id = None

        if role == UserRole.morador:
            if not resident_id:
                raise NotFoundError("Morador não encontrado.")
            resident = self._store.get_resident(resident_id)
            if resident.status != ResidentStatus.active:
                raise PendingApprovalError("Cadastro aguardando aprovação do síndico.")
            condo_id = resident.condo_id
        else:
            resident_id = None
            first = self._store.first_condo()
            condo_id = first.id if first else None

        session = Session(id=uuid.uuid4().hex, role=role, condo_id=condo_id, resident_id=resident_id)
        with self._lock:
            self._sessions[session.id] = session

        logger.info(f"Session {session.id} opened ({role}, condo={condo_id}, resident={resident_id})")
        return session

    def logout(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)
        logger.info(f"Session {session_id} closed")

    def get(self, session_id: str) -> Optional[Session]:
        return self._sessions.get(session_id)

    # ============================================================
    # TENANT SWITCH (manager only)
    # ============================================================
    def switch_tenant(self, session_id: str, condo_id: str) -> Session:
        session = self.get(session_id)
        if session is None:
            raise NotFoundError("Sessão não encontrada.")
        if not can(session.role, "condos:switch"):
            raise PermissionDeniedError("Apenas o síndico pode trocar de condomínio.")

        # Raises NotFoundError for unknown condominiums
        self._store.get_condo(condo_id)

        with self._lock:
            session.condo_id = condo_id
        logger.info(f"Session {session_id} switched to condo {condo_id}")
        return session
