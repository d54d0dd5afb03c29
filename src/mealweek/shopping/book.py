"""Household-level container of week-scoped shopping lists."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from mealweek.logging_config import get_logger
from mealweek.models import AggregatedIngredient, ShoppingEntry
from mealweek.shopping.history import DEFAULT_HISTORY_LIMIT, push_history, remove_from_history
from mealweek.shopping.reconciler import (
    add_custom_entry,
    clear_entries,
    reconcile_shopping_list,
    remove_entry,
    toggle_entry,
)

logger = get_logger(__name__)


@dataclass
class ShoppingListBook:
    """
    Every shopping list of a household, keyed by week-key, plus the
    household's custom item history.

    The book holds values only; callers load it, apply operations and
    persist the result.
    """

    lists: dict[str, list[ShoppingEntry]] = field(default_factory=dict)
    custom_item_history: list[str] = field(default_factory=list)
    history_limit: int = DEFAULT_HISTORY_LIMIT

    def get(self, week_key: str) -> list[ShoppingEntry]:
        """Entries of one week (empty when the week has no list yet)."""
        return list(self.lists.get(week_key, []))

    def sync_from_plan(
        self,
        week_key: str,
        aggregated: Sequence[AggregatedIngredient],
    ) -> list[ShoppingEntry]:
        """Reconcile a week's list against freshly aggregated ingredients."""
        self.lists[week_key] = reconcile_shopping_list(self.lists.get(week_key), aggregated)
        return self.get(week_key)

    def add_custom_item(
        self,
        week_key: str,
        name: str,
        *,
        id_factory: Callable[[], str] | None = None,
    ) -> list[ShoppingEntry]:
        """Add a custom item; newly created items are remembered in the history."""
        result = add_custom_entry(self.get(week_key), name, id_factory=id_factory)
        self.lists[week_key] = result.entries
        if result.created is not None:
            self.custom_item_history = push_history(
                self.custom_item_history, result.created.name, self.history_limit
            )
            logger.info(f"Added custom item '{result.created.name}' to {week_key}")
        return self.get(week_key)

    def forget_custom_item(self, name: str) -> list[str]:
        self.custom_item_history = remove_from_history(self.custom_item_history, name)
        return list(self.custom_item_history)

    def toggle(self, week_key: str, entry_id: str) -> list[ShoppingEntry]:
        self.lists[week_key] = toggle_entry(self.get(week_key), entry_id)
        return self.get(week_key)

    def remove(self, week_key: str, entry_id: str) -> list[ShoppingEntry]:
        self.lists[week_key] = remove_entry(self.get(week_key), entry_id)
        return self.get(week_key)

    def clear(self, week_key: str) -> list[ShoppingEntry]:
        self.lists[week_key] = clear_entries(self.get(week_key))
        return self.get(week_key)
