# services/chat_tracker.py

"""
Chat read-state bookkeeping between the síndico and each resident.

A thread is every message sharing (condo_id, resident_id), in append order.
Read flags model "read by the recipient": whoever opens a thread marks the
messages written by the other side.
"""

from datetime import datetime
from typing import List, Optional

from core.errors import NotFoundError, PermissionDeniedError
from core.logging_config import logger
from core.sessions import Session
from core.store import EntityStore
from models.enums import ResidentStatus, UserRole
from models.message import ChatMessage, ThreadSummary


def _is_manager(session: Session) -> bool:
    return session.role == UserRole.sindico


def resolve_thread(store: EntityStore, session: Session, resident_id: Optional[str] = None) -> str:
    """
    Work out which thread the session is addressing.

    Residents only ever see their own thread. The manager must name a
    resident that belongs to the active condominium.
    """
    if not _is_manager(session):
        if resident_id and resident_id != session.resident_id:
            raise PermissionDeniedError("Você só pode acessar sua própria conversa.")
        return session.resident_id

    if not resident_id:
        raise NotFoundError("Informe o morador da conversa.")

    resident = store.get_resident(resident_id)
    if resident.condo_id != session.condo_id:
        # Same answer as an unknown id: no leakage across condominiums
        raise NotFoundError("Morador não encontrado.")
    return resident.id


def send_message(store: EntityStore, session: Session, content: str, resident_id: Optional[str] = None) -> ChatMessage:
    """Append a new unread message in the resident's thread."""
    thread_id = resolve_thread(store, session, resident_id)
    message = store.add_message(
        session.condo_id,
        thread_id,
        {
            "content": content,
            "sent_by_manager": _is_manager(session),
            "read": False,
        },
    )
    logger.info(
        f"Message {message.id} sent by {'manager' if message.sent_by_manager else 'resident'} "
        f"in thread {session.condo_id}/{thread_id}"
    )
    return message


def mark_thread_read(store: EntityStore, session: Session, resident_id: Optional[str] = None) -> int:
    """Mark the other side's messages in the thread as read; returns how many flipped."""
    thread_id = resolve_thread(store, session, resident_id)
    # Manager reads resident-authored messages and vice versa
    marked = store.mark_read(session.condo_id, thread_id, sent_by_manager=not _is_manager(session))
    if marked:
        logger.info(f"{marked} message(s) marked read in thread {session.condo_id}/{thread_id}")
    return marked


def thread_messages(store: EntityStore, session: Session, resident_id: Optional[str] = None) -> List[ChatMessage]:
    thread_id = resolve_thread(store, session, resident_id)
    return store.thread(session.condo_id, thread_id)


def unread_count(store: EntityStore, session: Session, resident_id: Optional[str] = None) -> int:
    """
    Manager: unread resident-authored messages in one thread, or across the
    whole condominium when no resident is given.
    Resident: unread manager-authored messages in their own thread.
    """
    if _is_manager(session):
        if resident_id:
            thread_id = resolve_thread(store, session, resident_id)
            candidates = store.thread(session.condo_id, thread_id)
        else:
            candidates = store.messages_for_condo(session.condo_id)
        return sum(1 for m in candidates if not m.sent_by_manager and not m.read)

    # Raises PermissionDeniedError for someone else's thread
    thread_id = resolve_thread(store, session, resident_id)
    candidates = store.thread(session.condo_id, thread_id)
    return sum(1 for m in candidates if m.sent_by_manager and not m.read)


def list_threads(store: EntityStore, condo_id: str) -> List[ThreadSummary]:
    """
    Manager inbox: one entry per active resident of the condominium, most
    recent conversation first. Threads without messages sort last.
    """
    summaries = []
    for resident in store.list_residents(condo_id, status=ResidentStatus.active):
        messages = store.thread(condo_id, resident.id)
        last = messages[-1] if messages else None
        summaries.append(
            ThreadSummary(
                resident_id=resident.id,
                resident_name=resident.name,
                block=resident.block,
                unit=resident.unit,
                last_message=last.content if last else None,
                last_timestamp=last.timestamp if last else None,
                unread_count=sum(1 for m in messages if not m.sent_by_manager and not m.read),
            )
        )

    summaries.sort(key=lambda s: s.last_timestamp or datetime.min, reverse=True)
    return summaries
