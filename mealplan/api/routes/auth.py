import logging

from fastapi import APIRouter, Depends, Response

from mealplan.api.deps import get_auth_service, get_current_user, get_session_token
from mealplan.domain.User import User
from mealplan.services.auth_service import AuthService
from mealplan.utilities.config import SESSION_COOKIE_NAME, SESSION_TTL_HOURS
from mealplan.utilities.validators import CredentialsInput

router = APIRouter(prefix="/api", tags=["auth"])
logger = logging.getLogger(__name__)


def _set_session_cookie(response: Response, token: str):
    response.set_cookie(
        SESSION_COOKIE_NAME, token,
        max_age=SESSION_TTL_HOURS * 3600, httponly=True, samesite="lax"
    )


@router.post("/register", status_code=201)
def register(payload: CredentialsInput, response: Response, auth: AuthService = Depends(get_auth_service)):
    user, token = auth.register_user(payload.username, payload.password)
    _set_session_cookie(response, token)
    return user.to_public_dict()


@router.post("/login")
def login(payload: CredentialsInput, response: Response, auth: AuthService = Depends(get_auth_service)):
    user, token = auth.login(payload.username, payload.password)
    _set_session_cookie(response, token)
    return user.to_public_dict()


@router.post("/logout")
def logout(response: Response, token=Depends(get_session_token), auth: AuthService = Depends(get_auth_service)):
    auth.logout(token)
    response.delete_cookie(SESSION_COOKIE_NAME)
    return {"status": "ok"}


@router.get("/user")
def current_user(user: User = Depends(get_current_user)):
    return user.to_public_dict()
