from datetime import date
from typing import List, Sequence, Tuple

from mealplan.domain.Plan import MealPlanEntry
from mealplan.infra.Json_Store import JsonStore
from mealplan.utilities.dates import week_range


def _in_range(row: dict, start: date, end: date) -> bool:
    return start <= date.fromisoformat(row["date"]) < end


def _generated_for(row: dict, week_start: date) -> bool:
    # rows written before the anchor existed fall back to their own date
    return row.get("weekStart", row["date"]) == week_start.isoformat()


class PlanRepository:
    """Meal plan entries, one row per (user, day, recipe), tagged with the weekStart they were generated for."""

    def __init__(self, store: JsonStore):
        self.store = store

    def get_meal_plan(self, user_id: int, week_start: date) -> List[MealPlanEntry]:
        """Entries of one user dated within [week_start, week_start + 7), ordered by date then id."""
        start, end = week_range(week_start)
        rows = [r for r in self.store.read()["meal_plans"]
                if r["userId"] == user_id and _in_range(r, start, end)]
        rows.sort(key=lambda r: (r["date"], r["id"]))
        return [MealPlanEntry.from_dict(r) for r in rows]

    def create_meal_plan(self, user_id: int, entries: Sequence[Tuple[date, int]],
                         week_start: date = None) -> List[MealPlanEntry]:
        """Bulk-insert (date, recipe_id) pairs for a user; never touches existing rows.

        week_start defaults to the first entry's date.
        """
        if week_start is None and entries:
            week_start = entries[0][0]
        created = []
        with self.store.transaction() as doc:
            for day, recipe_id in entries:
                entry = MealPlanEntry(user_id, day, recipe_id, id=JsonStore.next_id(doc, "meal_plans"),
                                      week_start=week_start)
                doc["meal_plans"].append(entry.to_dict())
                created.append(entry)
        return created

    def delete_meal_plan(self, user_id: int, week_start: date) -> int:
        """Remove the entries a user's generation for week_start produced. Returns the number removed.

        Entries of overlapping generations anchored on other days are left alone.
        """
        with self.store.transaction() as doc:
            kept = [r for r in doc["meal_plans"]
                    if not (r["userId"] == user_id and _generated_for(r, week_start))]
            removed = len(doc["meal_plans"]) - len(kept)
            doc["meal_plans"] = kept
        return removed
