# models/message.py

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field


class MessageCreate(BaseModel):
    """Send a chat message inside a manager/resident thread."""
    content: str = Field(..., min_length=1, description="Message body")
    resident_id: Optional[str] = Field(
        None,
        description="Thread to post in. Required for the manager; residents always post in their own thread.",
    )


class ChatMessage(BaseModel):
    id: str
    condo_id: str
    resident_id: str
    content: str
    timestamp: datetime
    sent_by_manager: bool
    read: bool = False


class ThreadSummary(BaseModel):
    """One row of the manager's inbox."""
    resident_id: str
    resident_name: str
    block: str
    unit: str
    last_message: Optional[str] = None
    last_timestamp: Optional[datetime] = None
    unread_count: int = 0


class MarkReadResponse(BaseModel):
    resident_id: str
    marked: int


class UnreadCount(BaseModel):
    unread_count: int
