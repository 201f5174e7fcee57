"""Meal plan generation: filter, select, aggregate, persist.

All writes of one generation happen inside a single storage transaction, so a
failure while saving the shopping list leaves no orphan meal plan behind.
"""
import logging
import random
from datetime import date
from typing import List, Optional, Tuple

from mealplan.domain.Plan import MealPlanEntry
from mealplan.domain.ShoppingList import ShoppingList
from mealplan.domain.User import User
from mealplan.infra.Storage import Storage
from mealplan.logic.planning.preference_filter import filter_recipes
from mealplan.logic.planning.week_generator import select_week
from mealplan.logic.shopping.list_builder import build_shopping_list
from mealplan.utilities.config import REGENERATE_POLICY

logger = logging.getLogger(__name__)


def generate_week(storage: Storage, user: User, week_start: date,
                  rng: Optional[random.Random] = None,
                  policy: str = REGENERATE_POLICY) -> Tuple[List[MealPlanEntry], ShoppingList]:
    """Generate and store a week of meals plus its shopping list for a user.

    Args:
        storage: Persistence adapter.
        user: Requesting user; their preferences drive filtering and scaling.
        week_start: First day of the plan.
        rng: Random source for the selection; a fresh one when omitted.
        policy: 'replace' first drops the plan and list the user previously
            generated for this same weekStart (generations anchored on other
            days are untouched), 'append' keeps them (repeated calls then
            accumulate rows).

    Raises:
        EmptyCatalogError, NoMatchError: see filter_recipes.
    """
    recipes = storage.recipes.get_recipes()
    allowed = filter_recipes(recipes, user.preferences)
    selection = select_week(allowed, week_start, rng)
    items = build_shopping_list([recipe for _, recipe in selection], user.people_count)

    with storage.transaction():
        if policy == "replace":
            removed_entries = storage.plans.delete_meal_plan(user.id, week_start)
            removed_lists = storage.shopping_lists.delete_shopping_lists(user.id, week_start)
            if removed_entries or removed_lists:
                logger.info("Replacing week %s for user %s (%s entries, %s lists)",
                            week_start, user.id, removed_entries, removed_lists)
        entries = storage.plans.create_meal_plan(
            user.id, [(day, recipe.id) for day, recipe in selection], week_start
        )
        shopping_list = storage.shopping_lists.create_shopping_list(user.id, week_start, items)

    logger.info("Generated %s-day plan for user %s starting %s (%s shopping items)",
                len(entries), user.id, week_start, len(items))
    return entries, shopping_list


__all__ = ['generate_week']
