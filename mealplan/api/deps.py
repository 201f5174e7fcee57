"""Request-scoped dependencies: storage adapter, random source, current user."""
import random
from typing import Optional

from fastapi import Depends, Request

from mealplan.domain.User import User
from mealplan.infra.Storage import Storage
from mealplan.services.auth_service import AuthService
from mealplan.utilities.config import SESSION_COOKIE_NAME


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


def get_rng(request: Request) -> Optional[random.Random]:
    """Random source configured on the app; None means a fresh unseeded one per call."""
    return getattr(request.app.state, "rng", None)


def get_auth_service(storage: Storage = Depends(get_storage)) -> AuthService:
    return AuthService(storage)


def get_session_token(request: Request) -> Optional[str]:
    return request.cookies.get(SESSION_COOKIE_NAME)


def get_current_user(token: Optional[str] = Depends(get_session_token),
                     auth: AuthService = Depends(get_auth_service)) -> User:
    """Authenticated user of the request; raises AuthenticationRequiredError otherwise."""
    return auth.require_user(token)


__all__ = ['get_storage', 'get_rng', 'get_auth_service', 'get_session_token', 'get_current_user']
