"""Encoding of a week's shopping list as independently encoded records."""

import json
from collections.abc import Sequence

from pydantic import ValidationError

from mealweek.logging_config import get_logger
from mealweek.models import ShoppingEntry

logger = get_logger(__name__)


def encode_entries(entries: Sequence[ShoppingEntry]) -> list[str]:
    """One JSON string per entry, using the persisted camelCase field names."""
    return [entry.model_dump_json(by_alias=True) for entry in entries]


def decode_entries(records: Sequence[str] | None, week_key: str | None = None) -> list[ShoppingEntry]:
    """
    Decode records written by encode_entries.

    A malformed record invalidates the whole week, which then decodes to an
    empty list.
    """
    if not records:
        return []
    try:
        return [ShoppingEntry.model_validate(json.loads(record)) for record in records]
    except (TypeError, ValueError, ValidationError) as e:
        logger.error(f"Failed to decode shopping list {week_key or ''}: {e}")
        return []
