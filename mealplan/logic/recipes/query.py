"""Recipe lookup and search over the cached catalog.

Provides RecipeQueryService.get_all / get_by_id / search.
"""
from typing import Any, List, Optional, Tuple

from mealplan.domain.Recipe import Recipe
from mealplan.infra.Recipe_Repository import RecipeRepository
from mealplan.utilities.exceptions import NotFoundError


def _matches_text(recipe: Recipe, term: str) -> bool:
    # term is already lower-cased
    if term in recipe.title.lower():
        return True
    if term in recipe.dietary_restrictions.lower():
        return True
    return any(term in ing.name.lower() for ing in recipe.ingredients)


class RecipeQueryService:
    def __init__(self, repository: RecipeRepository):
        self.repository = repository

    def get_all(self) -> Tuple[List[Recipe], int]:
        recipes = self.repository.load()
        return recipes, len(recipes)

    def get_by_id(self, recipe_id: Any) -> Recipe:
        """Return the first recipe whose canonical id matches ``recipe_id``."""
        for recipe in self.repository.load():
            if recipe.matches_id(recipe_id):
                return recipe
        raise NotFoundError("Recipe not found")

    def search(self, query: Optional[str] = None, meal_type: Optional[str] = None) -> Tuple[List[Recipe], int]:
        """Filter the catalog, preserving catalog order.

        Args:
            query: case-insensitive substring matched against title, dietary
                restrictions text and ingredient names.
            meal_type: substring that must be contained in the recipe section.

        Returns:
            (matching recipes, count). Without criteria the whole catalog.
        """
        filtered = self.repository.load()

        if query:
            term = query.lower()
            filtered = [r for r in filtered if _matches_text(r, term)]

        if meal_type:
            filtered = [r for r in filtered if meal_type in r.section]

        return list(filtered), len(filtered)


__all__ = ['RecipeQueryService']
