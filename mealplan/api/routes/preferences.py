import logging

from fastapi import APIRouter, Depends

from mealplan.api.deps import get_current_user, get_storage
from mealplan.domain.Preferences import Preferences
from mealplan.domain.User import User
from mealplan.domain.errors import NotFoundError
from mealplan.infra.Storage import Storage
from mealplan.utilities.validators import PreferencesInput

router = APIRouter(prefix="/api/preferences", tags=["preferences"])
logger = logging.getLogger(__name__)


@router.patch("")
def update_preferences(payload: PreferencesInput,
                       user: User = Depends(get_current_user),
                       storage: Storage = Depends(get_storage)):
    preferences = Preferences(payload.dietaryRestrictions, payload.allergies, payload.peopleCount)
    updated = storage.users.update_user_preferences(user.id, preferences)
    if updated is None:
        raise NotFoundError("User not found")
    logger.info("Preferences updated for user %s: %s", user.id, preferences)
    return updated.to_public_dict()
