# routers/notices.py

from typing import List
from fastapi import APIRouter, Depends

from core.permission_helpers import requires_permission
from core.store import EntityStore
from dependencies.auth import get_condo_id
from dependencies.store import get_store
from models.notice import Notice, NoticeCreate, NoticeDraftRequest, NoticeDraftResponse
from services.ai_drafting import draft_notice_content


router = APIRouter(
    prefix="/notices",
    tags=["Notices"],
)


@router.get(
    "",
    response_model=List[Notice],
    summary="List notices",
    dependencies=[Depends(requires_permission("notices:read"))],
)
def list_notices(
    store: EntityStore = Depends(get_store),
    condo_id: str = Depends(get_condo_id),
):
    """Pinned notices first; within each group newest first (store order)."""
    notices = store.list_notices(condo_id)
    return sorted(notices, key=lambda n: not n.pinned)


@router.post(
    "",
    response_model=Notice,
    summary="Publish notice",
    dependencies=[Depends(requires_permission("notices:write"))],
)
def create_notice(
    payload: NoticeCreate,
    store: EntityStore = Depends(get_store),
    condo_id: str = Depends(get_condo_id),
):
    return store.add_notice(condo_id, payload.model_dump())


# ============================================================
# AI DRAFT: never fails; fallback text comes back as the message
# ============================================================
@router.post(
    "/draft",
    response_model=NoticeDraftResponse,
    summary="Draft notice body with AI",
    dependencies=[Depends(requires_permission("ai:draft"))],
)
def draft_notice(payload: NoticeDraftRequest):
    return NoticeDraftResponse(message=draft_notice_content(payload.topic, payload.tone))
