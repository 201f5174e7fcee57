"""Preferences value object: dietary restrictions, allergies and household size."""
from typing import Iterable, Optional

from mealplan.domain.errors import ValidationError
from mealplan.utilities.constants import DEFAULT_PEOPLE_COUNT, MIN_PEOPLE, MAX_PEOPLE


class Preferences:
    def __init__(self, dietary_restrictions: Optional[Iterable[str]] = None,
                 allergies: Optional[Iterable[str]] = None,
                 people_count: int = DEFAULT_PEOPLE_COUNT):
        self.dietary_restrictions = list(dietary_restrictions or [])
        self.allergies = list(allergies or [])
        if people_count < MIN_PEOPLE or people_count > MAX_PEOPLE:
            raise ValidationError(f"peopleCount must be between {MIN_PEOPLE} and {MAX_PEOPLE}")
        self.people_count = people_count

    def keywords(self):
        '''Restriction keywords followed by allergy keywords; both exclude a recipe the same way.'''
        return self.dietary_restrictions + self.allergies

    def __str__(self) -> str:
        return (f"Restrictions: {', '.join(self.dietary_restrictions) or '-'} - "
                f"Allergies: {', '.join(self.allergies) or '-'} - People: {self.people_count}")

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        if not data:
            return None
        d = dict(data)
        people = int(d.get('peopleCount') or DEFAULT_PEOPLE_COUNT)
        # stored rows are clamped rather than rejected
        people = min(max(people, MIN_PEOPLE), MAX_PEOPLE)
        return Preferences(
            dietary_restrictions=d.get('dietaryRestrictions') or [],
            allergies=d.get('allergies') or [],
            people_count=people,
        )

    def to_dict(self):
        return {
            "dietaryRestrictions": self.dietary_restrictions,
            "allergies": self.allergies,
            "peopleCount": self.people_count,
        }
