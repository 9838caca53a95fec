# routers/dashboard.py

from fastapi import APIRouter, Depends

from core.errors import StoreError, handle_store_error
from core.permission_helpers import requires_permission
from core.sessions import Session
from core.store import EntityStore
from dependencies.auth import get_condo_id, get_current_session
from dependencies.store import get_store
from services.notifications import badges, dashboard_summary

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
)


@router.get("", summary="Manager dashboard overview")
def get_dashboard(
    store: EntityStore = Depends(get_store),
    session: Session = Depends(requires_permission("dashboard:read")),
    condo_id: str = Depends(get_condo_id),
):
    try:
        return dashboard_summary(store, session)
    except StoreError as e:
        raise handle_store_error(e, "Build dashboard")


@router.get("/badges", summary="Navigation badges")
def get_badges(
    store: EntityStore = Depends(get_store),
    session: Session = Depends(get_current_session),
):
    """Pending approvals and unread messages, as of this very request."""
    return badges(store, session)
