import json
import logging
from pathlib import Path
from typing import List, Optional

from mealplan.domain.Recipe import Recipe

logger = logging.getLogger(__name__)


class RecipeRepository:
    """Read-only recipe catalog stored as a JSON array."""

    def __init__(self, path):
        self.path = Path(path)

    def reading_from_recipes(self) -> List[Recipe]:
        """Read recipes from JSON file with proper error handling."""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                recipes_data = json.load(f)
        except FileNotFoundError:
            logger.warning("Recipes file not found: %s. Returning empty list.", self.path)
            return []
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON in recipes file %s: %s", self.path, e)
            return []
        recipes = [Recipe.from_dict(entry) for entry in recipes_data or []]
        # catalog files may omit ids; number those after the highest explicit one
        next_id = max((r.id for r in recipes if r.id), default=0) + 1
        for recipe in recipes:
            if not recipe.id:
                recipe.id = next_id
                next_id += 1
        return recipes

    def get_recipes(self) -> List[Recipe]:
        return self.reading_from_recipes()

    def get_recipe(self, recipe_id: int) -> Optional[Recipe]:
        return next((r for r in self.reading_from_recipes() if r.id == recipe_id), None)
