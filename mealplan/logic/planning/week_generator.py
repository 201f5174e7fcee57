"""Random weekly selection: one recipe per consecutive day starting at week_start."""
import random
from datetime import date, timedelta
from typing import List, Optional, Tuple

from mealplan.domain.Recipe import Recipe
from mealplan.utilities.constants import MAX_PLAN_DAYS


def select_week(recipes: List[Recipe], week_start: date,
                rng: Optional[random.Random] = None) -> List[Tuple[date, Recipe]]:
    """Shuffle the candidates and assign the first min(7, len) of them to consecutive days.

    With fewer than seven candidates the plan is simply shorter; recipes are
    never repeated to fill the week. The input list is left untouched.
    """
    rng = rng or random.Random()
    pool = list(recipes)
    rng.shuffle(pool)
    selected = pool[:MAX_PLAN_DAYS]
    return [(week_start + timedelta(days=i), recipe) for i, recipe in enumerate(selected)]


__all__ = ['select_week']
