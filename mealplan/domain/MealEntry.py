"""MealEntry domain entity: one recipe placed in a meal plan slot."""
from datetime import datetime, timezone
from typing import Any, Optional

from mealplan.domain.Recipe import Recipe
from mealplan.utilities.constants import DEFAULT_SERVING_MULTIPLIER


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. ``2025-01-31T08:00:00.000Z``."""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class MealEntry:
    def __init__(self, recipe: Recipe, serving_multiplier: Any = DEFAULT_SERVING_MULTIPLIER,
                 added_at: Optional[str] = None, updated_at: Optional[str] = None):
        self.recipe_id = recipe.id
        self.recipe = recipe
        self.serving_multiplier = serving_multiplier
        self.added_at = added_at or utc_timestamp()
        self.updated_at = updated_at

    def __str__(self) -> str:
        return f"{self.recipe.title} x{self.serving_multiplier}"

    __repr__ = __str__

    def set_servings(self, serving_multiplier: Any):
        '''Overwrites the multiplier and stamps the modification time.'''
        self.serving_multiplier = serving_multiplier
        self.updated_at = utc_timestamp()

    def to_dict(self):
        d = {
            "recipeId": self.recipe_id,
            "recipe": self.recipe.to_dict(),
            "servingMultiplier": self.serving_multiplier,
            "addedAt": self.added_at,
        }
        if self.updated_at is not None:
            d["updatedAt"] = self.updated_at
        return d
