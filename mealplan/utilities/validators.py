"""
Request body schemas for the meal plan endpoints (Pydantic).

Only the serving multiplier is type checked here. Meal types, indices and
identifiers are passed through untouched and checked by the store, so that
lookups fail in a fixed order (plan, recipe, meal type, index).
"""
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from mealplan.utilities.exceptions import InvalidArgumentError


class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra='ignore')


class CreatePlanInput(_Body):
    """Body of POST /meal-plans."""
    name: Optional[str] = None

    @field_validator('name', mode='before')
    @classmethod
    def strip_name(cls, v):
        """Blank names fall back to the generated placeholder."""
        if isinstance(v, str):
            return v.strip() or None
        return v


class AddMealInput(_Body):
    """Body of POST /meal-plans?action=add-meal."""
    recipe_id: Any = Field(default=None, alias='recipeId')
    meal_type: Any = Field(default=None, alias='mealType')
    serving_multiplier: Optional[Union[int, float]] = Field(default=None, alias='servingMultiplier')


class RemoveMealInput(_Body):
    """Body of DELETE /meal-plans?action=remove-meal."""
    meal_type: Any = Field(default=None, alias='mealType')
    index: Any = None


class UpdateServingsInput(RemoveMealInput):
    """Body of PUT /meal-plans?action=update-servings."""
    serving_multiplier: Optional[Union[int, float]] = Field(default=None, alias='servingMultiplier')


def parse_body(schema, payload: Optional[dict]):
    """Validate ``payload`` against ``schema``; a missing body counts as ``{}``.

    Raises InvalidArgumentError naming the first offending field.
    """
    try:
        return schema.model_validate(payload or {})
    except ValidationError as e:
        first = e.errors()[0]
        loc = first.get('loc') or ('body',)
        field = str(loc[0])
        raise InvalidArgumentError(f"Invalid {field}: {first.get('msg', 'invalid value')}")


__all__ = ['CreatePlanInput', 'AddMealInput', 'RemoveMealInput', 'UpdateServingsInput', 'parse_body']
