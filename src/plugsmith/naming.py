"""Plugin name validation."""

from __future__ import annotations

import re

from plugsmith.errors import InvalidNameError

_NAME_RE = re.compile(r"[A-Za-z0-9_-]+")

NAME_RULE = "Plugin name must contain only letters, numbers, hyphens, or underscores."


def is_valid_name(name: str | None) -> bool:
    return bool(name) and _NAME_RE.fullmatch(name) is not None


def validate_name(name: str | None) -> str:
    """Return the accepted plugin name or raise InvalidNameError."""
    if not name:
        raise InvalidNameError("Invalid plugin name: name is required")
    if _NAME_RE.fullmatch(name) is None:
        raise InvalidNameError(f"Invalid plugin name {name!r}. {NAME_RULE}")
    return name
