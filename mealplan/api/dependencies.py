"""
API dependencies for dependency injection.

The catalog, query service and plan store are created by ``create_app`` and
kept on ``app.state``; handlers receive them through ``Depends`` so tests can
build isolated apps or override them.
"""
from fastapi import Request

from mealplan.infra.Plan_Repository import MealPlanStore
from mealplan.logic.recipes.query import RecipeQueryService


def get_recipe_service(request: Request) -> RecipeQueryService:
    return request.app.state.recipe_service


def get_plan_store(request: Request) -> MealPlanStore:
    return request.app.state.plan_store
