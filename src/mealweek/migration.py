"""Import of a legacy local snapshot into household data.

A snapshot holds up to four sections, each either decoded JSON or a JSON
string: ``meals``, ``weekPlans``, ``categoryWeightings`` and
``shoppingLists`` (week-key -> ``{"items": [...], "customItemHistory": [...]}``).
Sections are read independently; one broken section never blocks the rest.
"""

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from mealweek.calendar import parse_day_key
from mealweek.logging_config import get_logger
from mealweek.models import (
    CATEGORY_ORDER,
    AggregatedIngredient,
    CategoryWeightings,
    Meal,
    ShoppingEntry,
)
from mealweek.shopping.book import ShoppingListBook

logger = get_logger(__name__)

SECTIONS = ("meals", "weekPlans", "categoryWeightings", "shoppingLists")


@dataclass
class MigrationResult:
    """Household data rebuilt from a legacy snapshot."""

    meals: list[Meal] = field(default_factory=list)
    week_plans: dict[str, str | None] = field(default_factory=dict)
    category_weightings: CategoryWeightings = field(default_factory=CategoryWeightings)
    shopping: ShoppingListBook = field(default_factory=ShoppingListBook)
    skipped: list[str] = field(default_factory=list)


def _section(snapshot: Mapping[str, Any], name: str, expected: type) -> Any:
    """Decoded section, or None when missing or unreadable."""
    raw = snapshot.get(name)
    if raw is None:
        return None
    if isinstance(raw, (str, bytes)):
        try:
            raw = json.loads(raw)
        except ValueError as e:
            logger.warning(f"Ignoring unreadable legacy section {name}: {e}")
            return None
    if not isinstance(raw, expected):
        logger.warning(f"Ignoring legacy section {name}: expected {expected.__name__}")
        return None
    return raw


def has_legacy_data(snapshot: Mapping[str, Any] | None) -> bool:
    """True when any known section is present."""
    if not snapshot:
        return False
    return any(snapshot.get(name) for name in SECTIONS)


def load_weightings(raw: Any) -> CategoryWeightings:
    """Weightings from a legacy record; anything but three non-negative numbers gives 1:1:1."""
    if not isinstance(raw, Mapping):
        return CategoryWeightings()
    values = [raw.get(category.value) for category in CATEGORY_ORDER]
    if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in values):
        return CategoryWeightings()
    if any(v < 0 for v in values):
        return CategoryWeightings()
    return CategoryWeightings(**{c.value: v for c, v in zip(CATEGORY_ORDER, values)})


def migrate_snapshot(
    snapshot: Mapping[str, Any],
    *,
    history_limit: int | None = None,
    id_factory: Callable[[], str] | None = None,
) -> MigrationResult:
    """
    Rebuild household data from a legacy snapshot.

    - Meals that fail validation are skipped and reported in ``skipped``.
    - Week plan entries need a valid day-key; explicit nulls ("nothing
      planned") are kept.
    - Custom shopping items are re-added (unchecked, recorded in the
      history); ingredient items are reconciled as unchecked entries.
    """
    result = MigrationResult()
    if history_limit is not None:
        result.shopping.history_limit = history_limit

    for raw_meal in _section(snapshot, "meals", list) or []:
        try:
            result.meals.append(Meal.model_validate(raw_meal))
        except ValidationError as e:
            name = raw_meal.get("name") if isinstance(raw_meal, Mapping) else raw_meal
            logger.error(f"Failed to migrate meal {name}: {e}")
            result.skipped.append(f"meal:{name}")

    for key, meal_id in (_section(snapshot, "weekPlans", dict) or {}).items():
        if parse_day_key(key) is None or not (meal_id is None or isinstance(meal_id, str)):
            logger.error(f"Failed to migrate week plan entry {key}")
            result.skipped.append(f"plan:{key}")
            continue
        result.week_plans[key] = meal_id or None

    result.category_weightings = load_weightings(_section(snapshot, "categoryWeightings", dict))

    for week, data in (_section(snapshot, "shoppingLists", dict) or {}).items():
        try:
            entries = [ShoppingEntry.model_validate(item) for item in data.get("items", [])]
        except (AttributeError, TypeError, ValidationError) as e:
            logger.error(f"Failed to migrate shopping list {week}: {e}")
            result.skipped.append(f"shopping:{week}")
            continue

        for entry in entries:
            if entry.is_custom:
                result.shopping.add_custom_item(week, entry.name, id_factory=id_factory)
        result.shopping.sync_from_plan(
            week,
            [
                AggregatedIngredient(name=e.name, quantity=e.quantity or 0)
                for e in entries
                if not e.is_custom
            ],
        )

        history = data.get("customItemHistory") or []
        if isinstance(history, list):
            for name in history:
                if isinstance(name, str) and name not in result.shopping.custom_item_history:
                    if len(result.shopping.custom_item_history) < result.shopping.history_limit:
                        result.shopping.custom_item_history.append(name)

    logger.info(
        f"Migrated legacy snapshot: {len(result.meals)} meals, "
        f"{len(result.week_plans)} planned days, {len(result.shopping.lists)} shopping lists"
    )
    return result
