"""PostgREST filter helpers.

Filter values are always sent as given, so callers spell the operator
themselves (``{"status": "eq.published"}``, or ``eq("published")``). That
holds for the primary-key filter built by ``put`` and ``delete`` too:
``delete("posts", "id", eq(1))``.
"""
from __future__ import annotations

from typing import Any

from .constants import REST_API_PATH


def eq(value: Any) -> str:
    return f"eq.{value}"


def primary_key_filter(name: str, value: Any) -> dict[str, Any]:
    if not name or value is None:
        raise ValueError("primary key name and value are required")
    return {name: value}


def table_path(endpoint: str) -> str:
    text = str(endpoint or "").strip()
    lowered = text.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return text
    stripped = text.lstrip("/")
    prefix = REST_API_PATH.lstrip("/")
    if stripped == prefix or stripped.startswith(prefix + "/"):
        return text
    return f"{REST_API_PATH}/{stripped}"
