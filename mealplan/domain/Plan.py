"""Plan domain entity: one MealPlanEntry per day of a generated week."""
from datetime import date
from typing import Optional


class MealPlanEntry:
    def __init__(self, user_id: int, day: date, recipe_id: int, id: int = 0,
                 week_start: Optional[date] = None):
        self.id = id
        self.user_id = user_id
        self.date = day
        self.recipe_id = recipe_id
        # weekStart of the generation that produced this entry
        self.week_start = week_start or day

    def __str__(self) -> str:
        return f"{self.date.isoformat()} - recipe {self.recipe_id} (user {self.user_id})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data)
        day = date.fromisoformat(d['date'])
        return MealPlanEntry(
            id=d.get('id', 0),
            user_id=d['userId'],
            day=day,
            recipe_id=d['recipeId'],
            week_start=date.fromisoformat(d['weekStart']) if d.get('weekStart') else day,
        )

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "date": self.date.isoformat(),
            "recipeId": self.recipe_id,
            "weekStart": self.week_start.isoformat(),
        }
