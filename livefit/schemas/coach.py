import uuid
from typing import Any

from pydantic import BaseModel, field_validator

from livefit.core.validation import is_https_url
from livefit.schemas.fields import Count, RequiredStr, UTCDateTime


class CoachCreate(BaseModel):
    experience_years: Count
    description: RequiredStr
    profile_image_url: str | None = None

    @field_validator("profile_image_url", mode="before")
    @classmethod
    def validate_profile_image_url(cls, v: Any) -> str | None:
        """Absent or empty means no image; anything else must be an https url."""
        if v is None or v == "":
            return None
        if not is_https_url(v):
            raise ValueError("profile_image_url must start with https")
        return v


class CoachPublic(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    experience_years: int
    description: str
    profile_image_url: str | None = None
    created_at: UTCDateTime
    updated_at: UTCDateTime

    class Config:
        from_attributes = True


class CoachListItem(BaseModel):
    id: uuid.UUID
    name: str
