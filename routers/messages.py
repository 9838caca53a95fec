# routers/messages.py

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from core.errors import StoreError, handle_store_error
from core.permission_helpers import is_manager, requires_permission, require_manager
from core.sessions import Session
from core.store import EntityStore
from dependencies.auth import get_condo_id
from dependencies.store import get_store
from models.message import ChatMessage, MarkReadResponse, MessageCreate, ThreadSummary, UnreadCount
from services import chat_tracker

router = APIRouter(
    prefix="/messages",
    tags=["Messages"],
)


@router.post("", response_model=ChatMessage)
def send_message(
    payload: MessageCreate,
    store: EntityStore = Depends(get_store),
    session: Session = Depends(requires_permission("messages:write")),
    condo_id: str = Depends(get_condo_id),
):
    """
    Send a direct message.

    **Manager:** `resident_id` is required and must be a resident of the
    active condominium.

    **Resident:** the message always goes to their own thread with the
    manager; `resident_id` may be omitted.

    New messages always start unread.
    """
    if is_manager(session) and not payload.resident_id:
        raise HTTPException(400, "Informe o morador destinatário.")

    try:
        return chat_tracker.send_message(store, session, payload.content.strip(), payload.resident_id)
    except StoreError as e:
        raise handle_store_error(e, "Send message")


@router.get("/threads", response_model=List[ThreadSummary])
def list_threads(
    store: EntityStore = Depends(get_store),
    session: Session = Depends(requires_permission("messages:read")),
    condo_id: str = Depends(get_condo_id),
):
    """Manager inbox, most recent conversation first."""
    require_manager(session)
    return chat_tracker.list_threads(store, condo_id)


@router.get("/unread-count", response_model=UnreadCount)
def get_unread_count(
    resident_id: Optional[str] = Query(None, description="Manager only: restrict to one thread"),
    store: EntityStore = Depends(get_store),
    session: Session = Depends(requires_permission("messages:read")),
    condo_id: str = Depends(get_condo_id),
):
    try:
        return UnreadCount(unread_count=chat_tracker.unread_count(store, session, resident_id))
    except StoreError as e:
        raise handle_store_error(e, "Count unread messages")


@router.get("/thread", response_model=List[ChatMessage])
@router.get("/thread/{resident_id}", response_model=List[ChatMessage])
def get_thread(
    resident_id: Optional[str] = None,
    store: EntityStore = Depends(get_store),
    session: Session = Depends(requires_permission("messages:read")),
    condo_id: str = Depends(get_condo_id),
):
    """Messages of one thread in the order they were sent."""
    try:
        return chat_tracker.thread_messages(store, session, resident_id)
    except StoreError as e:
        raise handle_store_error(e, "Fetch thread")


@router.post("/thread/read", response_model=MarkReadResponse)
@router.post("/thread/{resident_id}/read", response_model=MarkReadResponse)
def mark_thread_read(
    resident_id: Optional[str] = None,
    store: EntityStore = Depends(get_store),
    session: Session = Depends(requires_permission("messages:read")),
    condo_id: str = Depends(get_condo_id),
):
    """Mark the other side's messages in the thread as read."""
    try:
        thread_id = chat_tracker.resolve_thread(store, session, resident_id)
        marked = chat_tracker.mark_thread_read(store, session, thread_id)
    except StoreError as e:
        raise handle_store_error(e, "Mark thread read")
    return MarkReadResponse(resident_id=thread_id, marked=marked)
