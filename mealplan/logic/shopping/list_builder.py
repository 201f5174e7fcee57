"""Shopping list builder.

Expands the ingredients of the selected recipes, scales them to the household
size and merges items that share exactly the same (name, unit).
"""
from typing import Dict, List, Tuple, Iterable

from mealplan.domain.Recipe import Recipe
from mealplan.domain.ShoppingList import ShoppingListItem
from mealplan.domain.errors import ValidationError
from mealplan.utilities.constants import DEFAULT_PEOPLE_COUNT


def scale_amount(amount: float, people_count: int, servings: int) -> float:
    """amount * people / servings; servings below 1 is treated as 1."""
    if servings is None or servings < 1:
        servings = 1
    return amount * people_count / servings


def build_shopping_list(recipes: Iterable[Recipe], people_count: int = DEFAULT_PEOPLE_COUNT) -> List[ShoppingListItem]:
    """Compute the aggregated, unchecked shopping list for a sequence of recipes.

    Args:
        recipes: Recipes in plan order; a recipe may appear more than once.
        people_count: Household size; anything below 1 counts as 1.

    Returns:
        Items in first-seen order of their (name, unit) pair. Names and units are
        compared exactly (case-sensitive, no unit conversion).
    """
    people = people_count if people_count and people_count > 0 else DEFAULT_PEOPLE_COUNT
    merged: Dict[Tuple[str, str], ShoppingListItem] = {}
    for recipe in recipes:
        servings = recipe.effective_servings()
        for ing in recipe.ingredients or []:
            amount = scale_amount(ing.amount, people, servings)
            key = (ing.name, ing.unit)
            if key in merged:
                merged[key].amount += amount
            else:
                merged[key] = ShoppingListItem(ing.name, amount, ing.unit, checked=False)
    # dicts keep insertion order, which is the first-seen order
    return list(merged.values())


def validate_items(items: List[ShoppingListItem]) -> List[ShoppingListItem]:
    """Reject a replacement item list that repeats a (name, unit) pair."""
    seen = set()
    for item in items:
        if item.key() in seen:
            raise ValidationError(f"Duplicate shopping list item: {item.name} ({item.unit})")
        seen.add(item.key())
    return items


__all__ = ['build_shopping_list', 'scale_amount', 'validate_items']
