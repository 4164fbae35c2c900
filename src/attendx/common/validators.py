from __future__ import annotations

from typing import Any, Mapping, Optional

from ..core.exceptions import ValidationError


def require_present(data: Mapping[str, Any], field_name: str) -> Any:
    value = data.get(field_name)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required")
    return value


def optional_text(data: Mapping[str, Any], field_name: str, default: Optional[str] = "") -> Optional[str]:
    value = data.get(field_name)
    if value is None:
        return default
    return value if isinstance(value, str) else str(value)
