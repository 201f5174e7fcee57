"""Persistence adapter: the repositories one request works with.

Constructed explicitly (see ``mealplan.api.api_run.create_app``) and handed to
the routes through a FastAPI dependency.
"""
from mealplan.infra.Json_Store import JsonStore
from mealplan.infra.Plan_Repository import PlanRepository
from mealplan.infra.Recipe_Repository import RecipeRepository
from mealplan.infra.ShoppingList_Repository import ShoppingListRepository
from mealplan.infra.User_Repository import UserRepository
from mealplan.infra.paths import RECIPES_FILE, STORE_FILE


class Storage:
    def __init__(self, store_file=STORE_FILE, recipes_file=RECIPES_FILE):
        self.store = JsonStore(store_file)
        self.recipes = RecipeRepository(recipes_file)
        self.users = UserRepository(self.store)
        self.plans = PlanRepository(self.store)
        self.shopping_lists = ShoppingListRepository(self.store)

    def transaction(self):
        """Single boundary for multi-entity writes (meal plan + shopping list)."""
        return self.store.transaction()

    def __repr__(self) -> str:
        return f"Storage(store={self.store.path}, recipes={self.recipes.path})"
