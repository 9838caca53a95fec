# models/meeting.py

from datetime import date as date_type, datetime, time as time_type
from pydantic import BaseModel, Field


class MeetingCreate(BaseModel):
    """The dashboard form sends date and time as separate inputs."""
    title: str = Field(..., min_length=1)
    date: date_type
    time: time_type
    description: str = ""
    agenda: str = ""

    def scheduled_for(self) -> datetime:
        return datetime.combine(self.date, self.time)


class Meeting(BaseModel):
    """Meetings are immutable once scheduled."""
    id: str
    condo_id: str
    title: str
    date: datetime
    description: str = ""
    agenda: str = ""
