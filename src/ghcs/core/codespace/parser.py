"""Convert raw `gh codespace list` JSON objects into Codespace records."""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from ghcs.core.codespace.state import parse_state
from ghcs.core.codespace.types import Codespace
from ghcs.errors import MalformedRecord

logger = logging.getLogger(__name__)


def _required_str(record: Mapping[str, Any], key: str) -> str:
    value = record.get(key)
    if not isinstance(value, str) or not value:
        raise MalformedRecord(
            f"Codespace record is missing required field '{key}': {dict(record)!r}"
        )
    return value


def _optional_str(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    return None


def _parse_timestamp(value: Any) -> datetime | None:
    """Parse gh's ISO-8601 timestamps (e.g. '2025-01-01T12:00:00.123Z')."""
    if not isinstance(value, str) or not value:
        return None
    # gh reports UTC with a Z suffix and sometimes more than microsecond precision
    normalized = value.removesuffix("Z")
    if "." in normalized:
        base, frac = normalized.split(".", 1)
        normalized = f"{base}.{frac[:6]}"
    try:
        parsed = datetime.fromisoformat(normalized)
    except ValueError:
        logger.debug("ignoring unparseable timestamp %r", value)
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def parse_codespace_record(record: Mapping[str, Any]) -> Codespace:
    """Build a Codespace from one raw record.

    Args:
        record: One element of the JSON array emitted by gh

    Returns:
        Parsed codespace

    Raises:
        MalformedRecord: If `name` or `repository` is missing or not a string
    """
    name = _required_str(record, "name")
    repository = _required_str(record, "repository")

    git_status = record.get("gitStatus")
    ref = _optional_str(git_status.get("ref")) if isinstance(git_status, Mapping) else None

    return Codespace(
        name=name,
        display_name=_optional_str(record.get("displayName")) or "",
        state=parse_state(_optional_str(record.get("state")) or ""),
        repository=repository,
        ref=ref or None,
        last_used_at=_parse_timestamp(record.get("lastUsedAt")),
    )
