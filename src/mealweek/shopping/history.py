"""Household-level history of custom shopping items, most recent first."""

from collections.abc import Sequence

DEFAULT_HISTORY_LIMIT = 20


def push_history(
    history: Sequence[str],
    name: str,
    limit: int = DEFAULT_HISTORY_LIMIT,
) -> list[str]:
    """Prepend ``name`` and keep at most ``limit`` names. Known names are left in place."""
    trimmed = name.strip()
    if not trimmed or trimmed in history:
        return list(history)
    return [trimmed, *history][:limit]


def remove_from_history(history: Sequence[str], name: str) -> list[str]:
    return [item for item in history if item != name]
