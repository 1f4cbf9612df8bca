from typing import Optional

from fastapi import APIRouter, Depends, Query

from mealplan.api.dependencies import get_recipe_service
from mealplan.api.responses import success_response
from mealplan.logic.recipes.query import RecipeQueryService

router = APIRouter(tags=["recipes"])


@router.get("/recipes")
def list_recipes(recipe_id: Optional[str] = Query(default=None, alias="id"),
                 service: RecipeQueryService = Depends(get_recipe_service)):
    """Whole catalog, or a single recipe when ``id`` is given."""
    if recipe_id is not None:
        return success_response(service.get_by_id(recipe_id).to_dict())
    recipes, count = service.get_all()
    return success_response([r.to_dict() for r in recipes], count=count)


@router.get("/search")
def search_recipes(q: Optional[str] = Query(default=None),
                   meal_type: Optional[str] = Query(default=None),
                   service: RecipeQueryService = Depends(get_recipe_service)):
    recipes, count = service.search(q, meal_type)
    return success_response([r.to_dict() for r in recipes], count=count)
