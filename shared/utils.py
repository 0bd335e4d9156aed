"""Shared utility functions."""
import math
from datetime import datetime, timezone
from typing import Any, Dict
from bson import ObjectId


def get_utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


def calculate_total_pages(total: int, limit: int) -> int:
    """Number of pages needed to show `total` items `limit` at a time."""
    if limit <= 0:
        return 0
    return math.ceil(total / limit)


def calculate_skip(page: int, limit: int) -> int:
    """Offset of the first item on a 1-based page."""
    return (page - 1) * limit


def serialize_document(document: Dict[str, Any]) -> Dict[str, Any]:
    """Make a MongoDB document JSON friendly (ObjectId -> str)."""
    serialized = dict(document)
    if isinstance(serialized.get("_id"), ObjectId):
        serialized["_id"] = str(serialized["_id"])
    return serialized
