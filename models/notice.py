# models/notice.py

from datetime import datetime
from pydantic import BaseModel, Field

from models.enums import NoticeCategory


class NoticeCreate(BaseModel):
    title: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    category: NoticeCategory = NoticeCategory.general
    pinned: bool = False


class Notice(NoticeCreate):
    id: str
    condo_id: str
    date: datetime


class NoticeDraftRequest(BaseModel):
    topic: str = Field(..., min_length=1, description="Notice title the AI writes about")
    tone: str = "Respeitoso e Formal"


class NoticeDraftResponse(BaseModel):
    message: str
