"""Field predicates shared by request schemas and route handlers.

Each predicate classifies a single raw value and never raises.
"""

import re
from typing import Any

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
PASSWORD_PATTERN = re.compile(r"(?=.*[0-9])(?=.*[a-z])(?=.*[A-Z]).{8,16}")


def is_undefined(value: Any) -> bool:
    return value is None


def is_not_valid_string(value: Any) -> bool:
    return not isinstance(value, str) or value.strip() == ""


def is_not_valid_integer(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is never a count
    if isinstance(value, bool) or not isinstance(value, int):
        return True
    return value < 0


def is_valid_uuid(value: Any) -> bool:
    return isinstance(value, str) and UUID_PATTERN.match(value) is not None


def is_not_valid_uuid(value: Any) -> bool:
    return not is_valid_uuid(value)


def is_valid_password(value: Any) -> bool:
    return isinstance(value, str) and PASSWORD_PATTERN.fullmatch(value) is not None


def is_https_url(value: Any) -> bool:
    return not is_not_valid_string(value) and value.startswith("https")
