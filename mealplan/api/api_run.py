from pathlib import Path
from typing import Optional, Union
import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from mealplan.api.middleware import (
    CORSHeadersMiddleware,
    RequestLoggingMiddleware,
    general_exception_handler,
    http_exception_handler,
    meal_plan_exception_handler,
    validation_exception_handler,
)
from mealplan.api.routes import meal_plans, recipes
from mealplan.infra.Plan_Repository import MealPlanStore
from mealplan.infra.Recipe_Repository import RecipeRepository
from mealplan.logic.recipes.query import RecipeQueryService
from mealplan.utilities import config
from mealplan.utilities.exceptions import MealPlanError

# Logging
logger = logging.getLogger("mealplan_app")

# Routes are served at the root and under the legacy /api prefix
API_PREFIXES = ("", "/api")


def create_app(recipes_file: Union[str, Path, None] = None,
               plan_store: Optional[MealPlanStore] = None) -> FastAPI:
    """Build the API with its own catalog and plan store.

    Args:
        recipes_file: catalog location; defaults to config.RECIPES_FILE.
            The file is read lazily on the first request that needs it.
        plan_store: store to serve; a fresh in-memory store by default.
    """
    repository = RecipeRepository(recipes_file or config.RECIPES_FILE)
    recipe_service = RecipeQueryService(repository)

    app = FastAPI(title="Meal Plan API", debug=config.DEBUG)
    app.state.recipe_repository = repository
    app.state.recipe_service = recipe_service
    app.state.plan_store = plan_store or MealPlanStore(recipe_service)

    for prefix in API_PREFIXES:
        app.include_router(recipes.router, prefix=prefix)
        app.include_router(meal_plans.router, prefix=prefix)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CORSHeadersMiddleware)

    app.add_exception_handler(MealPlanError, meal_plan_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("Meal Plan API ready (catalog: %s)", repository.recipes_file)
    return app


app = create_app()
