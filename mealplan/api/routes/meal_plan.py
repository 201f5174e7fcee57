import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from mealplan.api.deps import get_current_user, get_rng, get_storage
from mealplan.domain.User import User
from mealplan.infra.Storage import Storage
from mealplan.infra.pdf_utils import generate_pdf_for_week
from mealplan.logic.planning.generation import generate_week
from mealplan.utilities.dates import parse_week_start

router = APIRouter(prefix="/api/meal-plan", tags=["meal-plan"])
logger = logging.getLogger(__name__)


@router.post("/generate")
def generate_meal_plan(weekStart: Optional[str] = Query(default=None),
                       user: User = Depends(get_current_user),
                       storage: Storage = Depends(get_storage),
                       rng=Depends(get_rng)):
    week_start = parse_week_start(weekStart)
    entries, shopping_list = generate_week(storage, user, week_start, rng=rng)
    return {
        "mealPlan": [entry.to_dict() for entry in entries],
        "shoppingList": shopping_list.to_dict(),
    }


@router.get("")
def get_meal_plan(weekStart: Optional[str] = Query(default=None),
                  user: User = Depends(get_current_user),
                  storage: Storage = Depends(get_storage)):
    week_start = parse_week_start(weekStart)
    return [entry.to_dict() for entry in storage.plans.get_meal_plan(user.id, week_start)]


@router.get("/pdf")
def export_pdf(weekStart: Optional[str] = Query(default=None),
               user: User = Depends(get_current_user),
               storage: Storage = Depends(get_storage)):
    week_start = parse_week_start(weekStart)
    entries = storage.plans.get_meal_plan(user.id, week_start)
    recipes = {recipe.id: recipe for recipe in storage.recipes.get_recipes()}
    pdf_bytes = generate_pdf_for_week(week_start, entries, recipes)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=meal_plan_{week_start.isoformat()}.pdf"
        },
    )
