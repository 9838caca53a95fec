# services/notifications.py

"""
Dashboard badges and summary, recomputed from the store on every call.
Nothing is cached, so a mutation shows up on the very next read.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from core.sessions import Session
from core.store import EntityStore
from models.enums import ResidentStatus, TransactionType, UserRole
from models.meeting import Meeting
from services.chat_tracker import unread_count


def pending_approval_count(store: EntityStore, condo_id: str) -> int:
    return len(store.list_residents(condo_id, status=ResidentStatus.pending))


def unread_message_count(store: EntityStore, session: Session) -> int:
    return unread_count(store, session)


def badges(store: EntityStore, session: Session) -> Dict[str, int]:
    """Sidebar badges; residents never see the approvals badge."""
    pending = 0
    if session.role == UserRole.sindico and session.condo_id:
        pending = pending_approval_count(store, session.condo_id)

    unread = unread_message_count(store, session) if session.condo_id else 0

    return {
        "pending_approvals": pending,
        "unread_messages": unread,
    }


def financial_totals(store: EntityStore, condo_id: str) -> Dict[str, float]:
    income = sum(t.amount for t in store.list_transactions(condo_id, type=TransactionType.income))
    expenses = sum(t.amount for t in store.list_transactions(condo_id, type=TransactionType.expense))
    return {
        "income": income,
        "expenses": expenses,
        "balance": income - expenses,
    }


def next_meeting(store: EntityStore, condo_id: str, now: Optional[datetime] = None) -> Optional[Meeting]:
    """Earliest meeting that has not happened yet."""
    now = now or datetime.now()
    upcoming = [m for m in store.list_meetings(condo_id) if m.date >= now]
    if not upcoming:
        return None
    return min(upcoming, key=lambda m: m.date)


def dashboard_summary(store: EntityStore, session: Session) -> Dict[str, Any]:
    condo_id = session.condo_id
    condo = store.get_condo(condo_id)
    meeting = next_meeting(store, condo_id)

    return {
        "condo": condo.model_dump(),
        "active_residents": len(store.list_residents(condo_id, status=ResidentStatus.active)),
        "active_providers": len(store.list_providers(condo_id, active_only=True)),
        "notices": len(store.list_notices(condo_id)),
        "next_meeting": meeting.model_dump() if meeting else None,
        **financial_totals(store, condo_id),
        **badges(store, session),
    }
