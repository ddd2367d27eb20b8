from __future__ import annotations

import re
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date, parse_iso_datetime

E = TypeVar("E", bound=Enum)

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_INT_RE = re.compile(r"^[+-]?\d+$")


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_text(value: Any, field_name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value.strip() or None


def require_min_length(value: Any, field_name: str, min_len: int) -> str:
    if not isinstance(value, str) or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_email(value: Any, field_name: str = "email") -> str:
    email = require_non_empty(value, field_name).lower()
    if not _EMAIL_RE.match(email):
        raise ValidationError(f"{field_name} is not a valid email address")
    return email


def require_enum(value: Any, enum_cls: Type[E], field_name: str) -> E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")


def optional_enum(value: Any, enum_cls: Type[E], field_name: str, default: E) -> E:
    if value is None or value == "":
        return default
    return require_enum(value, enum_cls, field_name)


def require_int(value: Any, field_name: str, *, minimum: Optional[int] = None, maximum: Optional[int] = None) -> int:
    # floats are refused outright, int() would truncate 12.75 to 12
    if isinstance(value, int) and not isinstance(value, bool):
        number = value
    elif isinstance(value, str) and _INT_RE.match(value.strip()):
        number = int(value.strip())
    else:
        raise ValidationError(f"{field_name} must be an integer")
    if minimum is not None and number < minimum:
        raise ValidationError(f"{field_name} must be >= {minimum}")
    if maximum is not None and number > maximum:
        raise ValidationError(f"{field_name} must be <= {maximum}")
    return number


def optional_int(value: Any, field_name: str, *, minimum: Optional[int] = None, maximum: Optional[int] = None) -> Optional[int]:
    if value is None or value == "":
        return None
    return require_int(value, field_name, minimum=minimum, maximum=maximum)


def optional_bool(value: Any, field_name: str, default: bool = False) -> bool:
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in {"true", "1", "yes", "on"}:
        return True
    if isinstance(value, str) and value.lower() in {"false", "0", "no", "off"}:
        return False
    raise ValidationError(f"{field_name} must be a boolean")


def require_date(value: Any, field_name: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_iso_date(value)
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid date (YYYY-MM-DD)")


def optional_date(value: Any, field_name: str) -> Optional[date]:
    if value is None or value == "":
        return None
    return require_date(value, field_name)


def require_datetime(value: Any, field_name: str) -> datetime:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_iso_datetime(value)
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid timestamp (ISO-8601)")


def optional_datetime(value: Any, field_name: str) -> Optional[datetime]:
    if value is None or value == "":
        return None
    return require_datetime(value, field_name)


def optional_str_list(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None or value == "":
        return ()
    if isinstance(value, str):
        value = [part for part in value.split(",")]
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise ValidationError(f"{field_name} must be a list of strings")
    return tuple(v.strip() for v in value if v.strip())
