import logging
import random
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mealplan.domain.errors import MealPlanError
from mealplan.infra.Storage import Storage
from mealplan.api.routes import auth, meal_plan, preferences, recipes, shopping_list

# Logging
logger = logging.getLogger("mealplan_app")


def _first_error_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    err = errors[0]
    field = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
    return f"{field}: {err.get('msg', 'invalid value')}" if field else err.get("msg", "Invalid request")


def create_app(storage: Optional[Storage] = None, rng: Optional[random.Random] = None) -> FastAPI:
    """Build the API around an explicitly constructed storage adapter.

    Args:
        storage: Persistence adapter; defaults to the configured data files.
        rng: Random source for meal selection; tests pass a seeded one.
    """
    app = FastAPI(title="Weekly Meal Planner API")
    app.state.storage = storage or Storage()
    app.state.rng = rng

    app.include_router(auth.router)
    app.include_router(recipes.router)
    app.include_router(meal_plan.router)
    app.include_router(shopping_list.router)
    app.include_router(preferences.router)

    @app.exception_handler(MealPlanError)
    async def _meal_plan_error(request: Request, exc: MealPlanError):
        logger.info("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def _request_validation_error(request: Request, exc: RequestValidationError):
        message = _first_error_message(exc)
        logger.info("%s %s -> 400 %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"message": message})

    @app.on_event("startup")
    def _startup_purge_sessions():
        """Drop sessions that expired while the server was down."""
        removed = app.state.storage.users.purge_expired_sessions(datetime.now())
        if removed:
            logger.info("Removed %s expired sessions", removed)
        logger.info("Meal planner started with %s", app.state.storage)

    return app


app = create_app()
