"""MealPlan domain entity: named collection of meal entries grouped by meal type."""
from typing import Dict, List, Optional

from mealplan.domain.MealEntry import MealEntry, utc_timestamp
from mealplan.utilities.constants import MEAL_TYPES


class MealPlan:
    def __init__(self, plan_id: str, name: str, created_at: Optional[str] = None):
        self.id = plan_id
        self.name = name
        self.created_at = created_at or utc_timestamp()
        self.meals: Dict[str, List[MealEntry]] = {meal_type: [] for meal_type in MEAL_TYPES}

    def __str__(self) -> str:
        sizes = ", ".join(f"{k}: {len(v)}" for k, v in self.meals.items())
        return f"{self.id} '{self.name}' ({sizes})"

    __repr__ = __str__

    def entries(self):
        """Yield every entry, meal types in fixed order."""
        for meal_type in MEAL_TYPES:
            yield from self.meals[meal_type]

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "createdAt": self.created_at,
            "meals": {meal_type: [entry.to_dict() for entry in entries]
                      for meal_type, entries in self.meals.items()},
        }
