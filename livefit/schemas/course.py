import uuid
from pydantic import BaseModel

from livefit.schemas.fields import (
    DateTimeStr,
    HttpsUrl,
    PositiveCount,
    RequiredStr,
    UTCDateTime,
    UUIDStr,
)


class CourseBase(BaseModel):
    skill_id: UUIDStr
    name: RequiredStr
    description: RequiredStr
    start_at: DateTimeStr
    end_at: DateTimeStr
    max_participants: PositiveCount
    meeting_url: HttpsUrl


class CourseCreate(CourseBase):
    user_id: UUIDStr


class CourseUpdate(CourseBase):
    pass


class CoursePublic(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    skill_id: uuid.UUID
    name: str
    description: str
    start_at: UTCDateTime
    end_at: UTCDateTime
    max_participants: int
    meeting_url: str
    created_at: UTCDateTime
    updated_at: UTCDateTime

    class Config:
        from_attributes = True
