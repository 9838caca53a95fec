# routers/condos.py

from typing import List
from fastapi import APIRouter, Depends

from core.errors import StoreError, handle_store_error
from core.permission_helpers import requires_permission
from core.sessions import Session, SessionRegistry
from core.store import EntityStore
from dependencies.store import get_sessions, get_store
from models.condominium import Condominium, CondominiumCreate, CondoSwitchRequest


router = APIRouter(
    prefix="/condos",
    tags=["Condominiums"],
)


@router.get("", response_model=List[Condominium], summary="List condominiums")
def list_condos(
    store: EntityStore = Depends(get_store),
    session: Session = Depends(requires_permission("dashboard:read")),
):
    return store.condos


# ============================================================
# CREATE: the new condominium becomes the active one
# ============================================================
@router.post("", response_model=Condominium, summary="Add condominium")
def create_condo(
    payload: CondominiumCreate,
    store: EntityStore = Depends(get_store),
    sessions: SessionRegistry = Depends(get_sessions),
    session: Session = Depends(requires_permission("condos:write")),
):
    condo = store.add_condo({**payload.model_dump(), "manager_name": "Síndico Logado"})
    sessions.switch_tenant(session.id, condo.id)
    return condo


@router.post("/switch", response_model=Condominium, summary="Switch active condominium")
def switch_condo(
    payload: CondoSwitchRequest,
    store: EntityStore = Depends(get_store),
    sessions: SessionRegistry = Depends(get_sessions),
    session: Session = Depends(requires_permission("condos:switch")),
):
    try:
        sessions.switch_tenant(session.id, payload.condo_id)
        return store.get_condo(payload.condo_id)
    except StoreError as e:
        raise handle_store_error(e, "Switch condominium")
