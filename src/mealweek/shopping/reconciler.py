"""Shopping list reconciliation between the meal plan and user edits."""

import uuid
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from mealweek.logging_config import get_logger
from mealweek.models import AggregatedIngredient, ShoppingEntry

logger = get_logger(__name__)

INGREDIENT_ID_PREFIX = "ingredient-"


def _format_quantity(quantity: float | None) -> str:
    """Render a quantity the way it appears in ingredient ids ('' when absent or zero)."""
    if not quantity:
        return ""
    value = float(quantity)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def ingredient_entry_id(name: str, quantity: float | None) -> str:
    """Deterministic id of an ingredient entry, derived from name and quantity."""
    return f"{INGREDIENT_ID_PREFIX}{name}-{_format_quantity(quantity)}"


def reconcile_shopping_list(
    current_entries: Sequence[ShoppingEntry] | None,
    aggregated: Sequence[AggregatedIngredient],
) -> list[ShoppingEntry]:
    """
    Merge freshly aggregated ingredients into a week's shopping list.

    - Custom entries are kept as they are.
    - Checked ingredient entries are kept checked; when the same ingredient
      id is aggregated again it takes the new values, otherwise it stays
      as-is.
    - Every other aggregated ingredient becomes a new unchecked entry.

    Calling it again with the same aggregation returns an equal list.
    """
    current_entries = current_entries or []

    custom_entries = [e for e in current_entries if e.is_custom]
    checked_ingredient_entries = [e for e in current_entries if not e.is_custom and e.checked]

    fresh = {
        entry.id: entry
        for entry in (
            ShoppingEntry(
                id=ingredient_entry_id(item.name, item.quantity),
                name=item.name,
                quantity=item.quantity,
                checked=False,
                is_custom=False,
            )
            for item in aggregated
        )
    }

    kept_checked = [
        fresh[e.id].model_copy(update={"checked": True}) if e.id in fresh else e
        for e in checked_ingredient_entries
    ]
    kept_ids = {e.id for e in kept_checked}
    new_unchecked = [e for entry_id, e in fresh.items() if entry_id not in kept_ids]

    merged: list[ShoppingEntry] = []
    seen: set[str] = set()
    for entry in (*custom_entries, *kept_checked, *new_unchecked):
        if entry.id in seen:
            continue
        seen.add(entry.id)
        merged.append(entry)

    logger.debug(
        f"Reconciled shopping list: {len(custom_entries)} custom, "
        f"{len(kept_checked)} checked, {len(new_unchecked)} new"
    )
    return merged


@dataclass(frozen=True)
class AddResult:
    """Outcome of adding a custom item."""

    entries: list[ShoppingEntry]
    created: ShoppingEntry | None = None


def _new_custom_id() -> str:
    return uuid.uuid4().hex


def add_custom_entry(
    entries: Sequence[ShoppingEntry],
    name: str,
    *,
    id_factory: Callable[[], str] | None = None,
) -> AddResult:
    """
    Add a user-entered item to a week's list.

    The name is matched case-insensitively against every entry of the week.
    A checked match is unchecked ("I need this again"); an unchecked match
    leaves the list unchanged. Otherwise a new unchecked custom entry is
    appended and returned as ``created``.
    """
    trimmed = name.strip()
    if not trimmed:
        return AddResult(entries=list(entries))

    lowered = trimmed.lower()
    existing = next((e for e in entries if e.name.lower() == lowered), None)
    if existing is not None:
        if not existing.checked:
            return AddResult(entries=list(entries))
        return AddResult(
            entries=[
                e.model_copy(update={"checked": False}) if e.id == existing.id else e
                for e in entries
            ]
        )

    created = ShoppingEntry(
        id=(id_factory or _new_custom_id)(),
        name=trimmed,
        checked=False,
        is_custom=True,
    )
    return AddResult(entries=[*entries, created], created=created)


def toggle_entry(entries: Sequence[ShoppingEntry], entry_id: str) -> list[ShoppingEntry]:
    """Flip the checked state of one entry."""
    return [
        e.model_copy(update={"checked": not e.checked}) if e.id == entry_id else e
        for e in entries
    ]


def remove_entry(entries: Sequence[ShoppingEntry], entry_id: str) -> list[ShoppingEntry]:
    """
    Delete a custom entry by id.

    Ingredient entries follow the meal plan and only disappear through
    reconciliation, so removing one leaves the list unchanged.
    """
    target = next((e for e in entries if e.id == entry_id), None)
    if target is None:
        return list(entries)
    if not target.is_custom:
        logger.warning(f"Refusing to remove ingredient entry {entry_id}")
        return list(entries)
    return [e for e in entries if e.id != entry_id]


def clear_entries(entries: Sequence[ShoppingEntry]) -> list[ShoppingEntry]:
    """Remove every entry of a week."""
    return []
