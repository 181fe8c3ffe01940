from __future__ import annotations

from typing import Any, Optional

from ..core.exceptions import InvalidArgumentError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise InvalidArgumentError(f"{field_name} is required")
    return str(value).strip()


def optional_text(value: Any, default: str) -> str:
    """Return `value` as text, or `default` when it is missing or empty.

    Mirrors the `value || default` behaviour of the mobile payload: an empty
    string counts as missing.
    """
    if value is None:
        return default
    text = str(value)
    return text if text else default


def optional_id(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
