"""Identifier and timestamp generation for new boards, columns and tasks."""

import uuid
from datetime import datetime, timezone


def new_id() -> str:
    """Return a random (version 4) UUID string."""
    return str(uuid.uuid4())


def utc_timestamp() -> str:
    """Return the current UTC time as an ISO-8601 string with milliseconds."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
