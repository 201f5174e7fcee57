"""Recipe domain entity: catalog entry with ingredients, instructions, servings, tags."""
from mealplan.domain.Ingredient import Ingredient
from typing import List, Optional


class Recipe:
    def __init__(self, id: int = 0, name: str = "", ingredients: Optional[List[Ingredient]] = None,
                 instructions: str = "", preparation_time: Optional[int] = None,
                 servings: Optional[int] = None, tags: Optional[List[str]] = None):
        self.id = id
        self.name = name
        # None means the recipe has no ingredient list at all (not matchable)
        self.ingredients = ingredients[:] if ingredients is not None else None
        self.instructions = instructions
        self.preparation_time = preparation_time
        self.servings = servings
        self.tags = tags[:] if tags else []

    def __str__(self) -> str:
        return f"{self.name} - {self.servings or 1} servings - {self.preparation_time or 0} min - Tags: {', '.join(self.tags)}"

    __repr__ = __str__

    def effective_servings(self) -> int:
        """Servings used for scaling; missing, zero or negative counts as 1."""
        try:
            servings = int(self.servings or 0)
        except (TypeError, ValueError):
            servings = 0
        return servings if servings > 0 else 1

    @staticmethod
    def from_dict(data):
        d = dict(data)
        raw_ingredients = d.get('ingredients')
        ingredients = None
        if raw_ingredients is not None:
            ingredients = [Ingredient.from_dict(ing) for ing in raw_ingredients]
        return Recipe(
            id=d.get('id', 0),
            name=d.get('name', ''),
            ingredients=ingredients,
            instructions=d.get('instructions', '') or '',
            preparation_time=d.get('preparationTime', d.get('preparation_time')),
            servings=d.get('servings'),
            tags=d.get('tags') or [],
        )

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "ingredients": [ing.to_dict() for ing in self.ingredients] if self.ingredients is not None else None,
            "instructions": self.instructions,
            "preparationTime": self.preparation_time,
            "servings": self.servings,
            "tags": self.tags,
        }
