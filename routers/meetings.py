# routers/meetings.py

from typing import List
from fastapi import APIRouter, Depends

from core.permission_helpers import requires_permission
from core.store import EntityStore
from dependencies.auth import get_condo_id
from dependencies.store import get_store
from models.meeting import Meeting, MeetingCreate


router = APIRouter(
    prefix="/meetings",
    tags=["Meetings"],
)


@router.get(
    "",
    response_model=List[Meeting],
    summary="Meeting calendar",
    dependencies=[Depends(requires_permission("meetings:read"))],
)
def list_meetings(
    store: EntityStore = Depends(get_store),
    condo_id: str = Depends(get_condo_id),
):
    """Meetings of the active condominium in date order."""
    return sorted(store.list_meetings(condo_id), key=lambda m: m.date)


@router.post(
    "",
    response_model=Meeting,
    summary="Schedule meeting",
    dependencies=[Depends(requires_permission("meetings:write"))],
)
def create_meeting(
    payload: MeetingCreate,
    store: EntityStore = Depends(get_store),
    condo_id: str = Depends(get_condo_id),
):
    return store.add_meeting(
        condo_id,
        {
            "title": payload.title,
            "date": payload.scheduled_for(),
            "description": payload.description,
            "agenda": payload.agenda,
        },
    )
