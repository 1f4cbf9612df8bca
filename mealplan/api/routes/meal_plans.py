"""Meal plan endpoints.

Everything lives on ``/meal-plans``; the plan is addressed with ``?id=`` and
entry operations with ``?action=``:

    POST   /meal-plans                                  create
    GET    /meal-plans                                  list
    GET    /meal-plans?id=plan-1                        get
    DELETE /meal-plans?id=plan-1                        delete
    POST   /meal-plans?id=plan-1&action=add-meal        add recipe
    DELETE /meal-plans?id=plan-1&action=remove-meal     remove entry
    PUT    /meal-plans?id=plan-1&action=update-servings update multiplier
    GET    /meal-plans?id=plan-1&action=grocery-list    grocery list
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from mealplan.api.dependencies import get_plan_store
from mealplan.api.responses import success_response
from mealplan.infra.Plan_Repository import MealPlanStore
from mealplan.utilities.constants import (
    ACTION_ADD_MEAL,
    ACTION_GROCERY_LIST,
    ACTION_REMOVE_MEAL,
    ACTION_UPDATE_SERVINGS,
)
from mealplan.utilities.exceptions import InvalidArgumentError
from mealplan.utilities.validators import (
    AddMealInput,
    CreatePlanInput,
    RemoveMealInput,
    UpdateServingsInput,
    parse_body,
)

router = APIRouter(tags=["meal-plans"])


def _require_id(plan_id: Optional[str]) -> str:
    if not plan_id:
        raise InvalidArgumentError("Plan ID required")
    return plan_id


@router.get("/meal-plans")
def read_meal_plans(plan_id: Optional[str] = Query(default=None, alias="id"),
                    action: Optional[str] = Query(default=None),
                    store: MealPlanStore = Depends(get_plan_store)):
    if not plan_id:
        plans, count = store.list_plans()
        return success_response([p.to_dict() for p in plans], count=count)
    if not action:
        return success_response(store.get(plan_id).to_dict())
    if action == ACTION_GROCERY_LIST:
        items, count = store.grocery_list(plan_id)
        return success_response(items, count=count)
    raise InvalidArgumentError("Invalid request")


@router.post("/meal-plans")
def create_or_add(plan_id: Optional[str] = Query(default=None, alias="id"),
                  action: Optional[str] = Query(default=None),
                  payload: Optional[Dict[str, Any]] = Body(default=None),
                  store: MealPlanStore = Depends(get_plan_store)):
    if not plan_id:
        body = parse_body(CreatePlanInput, payload)
        plan = store.create(body.name)
        return success_response(plan.to_dict(), status_code=status.HTTP_201_CREATED)
    if action == ACTION_ADD_MEAL:
        body = parse_body(AddMealInput, payload)
        entry = store.add_meal(plan_id, body.recipe_id, body.meal_type, body.serving_multiplier)
        return success_response(entry.to_dict(), status_code=status.HTTP_201_CREATED)
    raise InvalidArgumentError("Invalid request")


@router.put("/meal-plans")
def update_meal_plan(plan_id: Optional[str] = Query(default=None, alias="id"),
                     action: Optional[str] = Query(default=None),
                     payload: Optional[Dict[str, Any]] = Body(default=None),
                     store: MealPlanStore = Depends(get_plan_store)):
    plan_id = _require_id(plan_id)
    if action == ACTION_UPDATE_SERVINGS:
        body = parse_body(UpdateServingsInput, payload)
        entry = store.update_servings(plan_id, body.meal_type, body.index, body.serving_multiplier)
        return success_response(entry.to_dict())
    raise InvalidArgumentError("Invalid request")


@router.delete("/meal-plans")
def delete_from_meal_plans(plan_id: Optional[str] = Query(default=None, alias="id"),
                           action: Optional[str] = Query(default=None),
                           payload: Optional[Dict[str, Any]] = Body(default=None),
                           store: MealPlanStore = Depends(get_plan_store)):
    plan_id = _require_id(plan_id)
    if not action:
        store.delete(plan_id)
        return success_response({"message": "Meal plan deleted"})
    if action == ACTION_REMOVE_MEAL:
        body = parse_body(RemoveMealInput, payload)
        removed = store.remove_meal(plan_id, body.meal_type, body.index)
        return success_response({"message": "Meal removed", "removed": removed.to_dict()})
    raise InvalidArgumentError("Invalid request")
