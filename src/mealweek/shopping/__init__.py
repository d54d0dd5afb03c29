"""Week-scoped shopping lists: reconciliation, custom items and history."""

from mealweek.shopping.book import ShoppingListBook
from mealweek.shopping.history import push_history, remove_from_history
from mealweek.shopping.reconciler import (
    AddResult,
    add_custom_entry,
    clear_entries,
    ingredient_entry_id,
    reconcile_shopping_list,
    remove_entry,
    toggle_entry,
)
from mealweek.shopping.serialization import decode_entries, encode_entries

__all__ = [
    "AddResult",
    "ShoppingListBook",
    "add_custom_entry",
    "clear_entries",
    "decode_entries",
    "encode_entries",
    "ingredient_entry_id",
    "push_history",
    "reconcile_shopping_list",
    "remove_entry",
    "remove_from_history",
    "toggle_entry",
]
