import logging
import math
import re
from numbers import Number
from threading import RLock
from typing import Any, Dict, List, Optional, Tuple

from mealplan.domain.MealEntry import MealEntry
from mealplan.domain.Plan import MealPlan
from mealplan.logic.recipes.query import RecipeQueryService
from mealplan.logic.shopping.list_builder import build_grocery_list
from mealplan.utilities.constants import (
    DEFAULT_PLAN_NAME,
    DEFAULT_SERVING_MULTIPLIER,
    MEAL_TYPES,
    PLAN_ID_PREFIX,
)
from mealplan.utilities.exceptions import InvalidArgumentError, NotFoundError

logger = logging.getLogger(__name__)

_INDEX_PREFIX = re.compile(r'^\s*([+-]?\d+)')


def _parse_index(value: Any) -> Optional[int]:
    """Read an entry index the lenient way clients send it ("2", 2, 2.0, "2 ").

    Returns None when no integer can be read; callers treat that as out of bounds.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        m = _INDEX_PREFIX.match(value)
        return int(m.group(1)) if m else None
    return None


def _resolve_multiplier(value: Any):
    if not value:
        return DEFAULT_SERVING_MULTIPLIER
    if isinstance(value, bool) or not isinstance(value, Number):
        raise InvalidArgumentError("Invalid serving multiplier")
    if value < 0 or not math.isfinite(value):
        raise InvalidArgumentError("Serving multiplier must be a positive number")
    return value


class MealPlanStore:
    """In-memory meal plans for the lifetime of the process.

    Plans are kept in insertion order. Identifiers are minted from a counter
    that only grows, so an id is never reused even after a delete. All public
    methods take the store lock; indices handed out by reads are only valid
    until the next mutation.
    """

    def __init__(self, recipes: RecipeQueryService, id_prefix: str = PLAN_ID_PREFIX):
        self.recipes = recipes
        self.id_prefix = id_prefix
        self._plans: Dict[str, MealPlan] = {}
        self._counter = 1
        self._lock = RLock()

    # -------------------- plans --------------------
    def create(self, name: Optional[str] = None) -> MealPlan:
        with self._lock:
            plan_id = f"{self.id_prefix}{self._counter}"
            self._counter += 1
            plan = MealPlan(plan_id, name or DEFAULT_PLAN_NAME.format(plan_id=plan_id))
            self._plans[plan_id] = plan
        logger.info("Created meal plan %s (%s)", plan_id, plan.name)
        return plan

    def list_plans(self) -> Tuple[List[MealPlan], int]:
        with self._lock:
            plans = list(self._plans.values())
        return plans, len(plans)

    def get(self, plan_id: str) -> MealPlan:
        with self._lock:
            plan = self._plans.get(plan_id)
        if plan is None:
            raise NotFoundError("Meal plan not found")
        return plan

    def delete(self, plan_id: str) -> None:
        with self._lock:
            if plan_id not in self._plans:
                raise NotFoundError("Meal plan not found")
            del self._plans[plan_id]
        logger.info("Deleted meal plan %s", plan_id)

    # -------------------- entries --------------------
    def add_meal(self, plan_id: str, recipe_id: Any, meal_type: Any, serving_multiplier: Any = None) -> MealEntry:
        with self._lock:
            plan = self.get(plan_id)
            recipe = self.recipes.get_by_id(recipe_id)
            self._check_meal_type(meal_type)
            entry = MealEntry(recipe.snapshot(), _resolve_multiplier(serving_multiplier))
            plan.meals[meal_type].append(entry)
        logger.info("Added recipe %s to %s/%s", recipe.id, plan_id, meal_type)
        return entry

    def remove_meal(self, plan_id: str, meal_type: Any, index: Any) -> MealEntry:
        with self._lock:
            entries, position = self._locate(plan_id, meal_type, index)
            removed = entries.pop(position)
        logger.info("Removed entry %d from %s/%s", position, plan_id, meal_type)
        return removed

    def update_servings(self, plan_id: str, meal_type: Any, index: Any, serving_multiplier: Any = None) -> MealEntry:
        with self._lock:
            entries, position = self._locate(plan_id, meal_type, index)
            multiplier = _resolve_multiplier(serving_multiplier)
            entry = entries[position]
            entry.set_servings(multiplier)
        return entry

    def grocery_list(self, plan_id: str) -> Tuple[List[Dict[str, Any]], int]:
        with self._lock:
            items = build_grocery_list(self.get(plan_id))
        return items, len(items)

    # -------------------- helpers --------------------
    @staticmethod
    def _check_meal_type(meal_type: Any) -> None:
        if meal_type not in MEAL_TYPES:
            raise InvalidArgumentError("Invalid meal type")

    def _locate(self, plan_id: str, meal_type: Any, index: Any) -> Tuple[List[MealEntry], int]:
        plan = self.get(plan_id)
        self._check_meal_type(meal_type)
        entries = plan.meals[meal_type]
        position = _parse_index(index)
        if position is None or position < 0 or position >= len(entries):
            raise NotFoundError("Meal entry not found")
        return entries, position
