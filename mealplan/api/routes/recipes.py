from fastapi import APIRouter, Depends

from mealplan.api.deps import get_storage
from mealplan.domain.errors import NotFoundError
from mealplan.infra.Storage import Storage

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("")
def list_recipes(storage: Storage = Depends(get_storage)):
    """Return the whole catalog."""
    return [recipe.to_dict() for recipe in storage.recipes.get_recipes()]


@router.get("/{recipe_id}")
def recipe_detail(recipe_id: int, storage: Storage = Depends(get_storage)):
    recipe = storage.recipes.get_recipe(recipe_id)
    if recipe is None:
        raise NotFoundError("Recipe not found")
    return recipe.to_dict()
