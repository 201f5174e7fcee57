import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from mealplan.api.deps import get_current_user, get_storage
from mealplan.domain.ShoppingList import ShoppingListItem
from mealplan.domain.User import User
from mealplan.domain.errors import NotFoundError, ValidationError
from mealplan.infra.Storage import Storage
from mealplan.logic.shopping.list_builder import validate_items
from mealplan.utilities.dates import parse_week_start
from mealplan.utilities.validators import ShoppingListInput

router = APIRouter(prefix="/api/shopping-list", tags=["shopping-list"])
logger = logging.getLogger(__name__)


@router.get("")
def get_shopping_list(weekStart: Optional[str] = Query(default=None),
                      user: User = Depends(get_current_user),
                      storage: Storage = Depends(get_storage)):
    week_start = parse_week_start(weekStart)
    shopping_list = storage.shopping_lists.get_shopping_list(user.id, week_start)
    if shopping_list is None:
        raise NotFoundError("No shopping list for this week")
    return shopping_list.to_dict()


@router.patch("/{list_id}")
def update_shopping_list(list_id: int, payload: ShoppingListInput,
                         user: User = Depends(get_current_user),
                         storage: Storage = Depends(get_storage)):
    """Replace the items of one of the caller's lists (used to check/uncheck items)."""
    if payload.id is not None and payload.id != list_id:
        raise ValidationError("Shopping list id does not match the URL")
    items = validate_items([
        ShoppingListItem(i.name, i.amount, i.unit, i.checked) for i in payload.items
    ])
    with storage.transaction():
        existing = storage.shopping_lists.get_by_id(list_id)
        if existing is None or existing.user_id != user.id:
            raise NotFoundError("Shopping list not found")
        updated = storage.shopping_lists.replace_items(list_id, items)
    logger.info("Shopping list %s updated by user %s (%s items)", list_id, user.id, len(items))
    return updated.to_dict()
