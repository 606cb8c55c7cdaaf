"""Reusable annotated field types backed by the validation predicates."""

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator

from livefit.core.validation import (
    is_https_url,
    is_not_valid_integer,
    is_not_valid_string,
    is_undefined,
    is_valid_uuid,
)


def _require_string(value: Any) -> Any:
    if is_undefined(value) or is_not_valid_string(value):
        raise ValueError("must be a non-blank string")
    return value


def _require_integer(value: Any) -> Any:
    if is_undefined(value) or is_not_valid_integer(value):
        raise ValueError("must be a non-negative integer")
    return value


def _require_uuid(value: Any) -> Any:
    if not is_valid_uuid(value):
        raise ValueError("must be a UUID")
    return value


def _require_https(value: Any) -> Any:
    if not is_https_url(value):
        raise ValueError("must be an https url")
    return value


def _require_positive(value: int) -> int:
    if value < 1:
        raise ValueError("must be at least 1")
    return value


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _as_utc(value: datetime) -> datetime:
    # Stored values are naive UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


RequiredStr = Annotated[str, BeforeValidator(_require_string)]
Count = Annotated[int, BeforeValidator(_require_integer)]
PositiveCount = Annotated[int, BeforeValidator(_require_integer), AfterValidator(_require_positive)]
UUIDStr = Annotated[str, BeforeValidator(_require_uuid)]
HttpsUrl = Annotated[str, BeforeValidator(_require_https)]
DateTimeStr = Annotated[datetime, BeforeValidator(_require_string), AfterValidator(_to_naive_utc)]
UTCDateTime = Annotated[datetime, AfterValidator(_as_utc)]
