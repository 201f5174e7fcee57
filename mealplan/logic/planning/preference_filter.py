"""Recipe filtering by a user's dietary restrictions and allergies.

Matching is a case-insensitive *substring* test on ingredient names, not a
whole-word test: the keyword "nut" excludes "peanut butter" and "egg" excludes
"eggplant". Restriction and allergy keywords behave identically.
"""
import logging
from typing import Iterable, List, Optional

from mealplan.domain.Preferences import Preferences
from mealplan.domain.Recipe import Recipe
from mealplan.domain.errors import EmptyCatalogError, NoMatchError

logger = logging.getLogger(__name__)


def _normalize(value: str) -> str:
    return (value or '').lower()


def matches_keyword(ingredient_name: str, keywords: Iterable[str]) -> bool:
    """True if any non-blank keyword occurs inside the ingredient name (case-insensitive)."""
    name = _normalize(ingredient_name)
    return any(k and _normalize(k) in name for k in keywords)


def is_allowed(recipe: Recipe, preferences: Preferences) -> bool:
    # A recipe without an ingredient list cannot be checked, so it is never served
    if recipe.ingredients is None:
        return False
    keywords = preferences.keywords()
    return not any(matches_keyword(ing.name, keywords) for ing in recipe.ingredients)


def filter_recipes(recipes: List[Recipe], preferences: Optional[Preferences]) -> List[Recipe]:
    """Return the recipes safe to serve under the given preferences, in catalog order.

    Raises:
        EmptyCatalogError: the catalog itself is empty (checked before filtering).
        NoMatchError: preferences were applied and excluded every recipe.
    """
    if not recipes:
        raise EmptyCatalogError()
    if preferences is None:
        return list(recipes)
    allowed = [r for r in recipes if is_allowed(r, preferences)]
    logger.debug("Preference filter kept %s of %s recipes", len(allowed), len(recipes))
    if not allowed:
        raise NoMatchError()
    return allowed


__all__ = ['filter_recipes', 'is_allowed', 'matches_keyword']
