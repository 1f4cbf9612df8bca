"""Grocery list builder.

Provides build_grocery_list(plan): one line per distinct ingredient name
across every entry of a meal plan.
"""
from typing import Any, Dict, List

from mealplan.domain.Plan import MealPlan


def build_grocery_list(plan: MealPlan) -> List[Dict[str, Any]]:
    """Aggregate the ingredients of every entry in ``plan``.

    Ingredients are keyed by exact name. The first occurrence fixes the
    quantity; later occurrences of the same name only bump ``count``.
    Quantities are not scaled by the serving multiplier.

    Returns:
        List of dicts { name, quantity, count } in first-occurrence order.
    """
    grocery: Dict[str, Dict[str, Any]] = {}
    for entry in plan.entries():
        for ing in entry.recipe.ingredients:
            item = grocery.get(ing.name)
            if item is None:
                grocery[ing.name] = {
                    'name': ing.name,
                    'quantity': ing.quantity,
                    'count': 1,
                }
            else:
                item['count'] += 1
    return list(grocery.values())


__all__ = ['build_grocery_list']
