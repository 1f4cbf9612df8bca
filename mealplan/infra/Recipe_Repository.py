import json
import logging
from pathlib import Path
from threading import Lock
from typing import List, Optional, Union

from mealplan.domain.Recipe import Recipe
from mealplan.infra.paths import RECIPES_FILE
from mealplan.utilities.exceptions import LoadError

logger = logging.getLogger(__name__)


class RecipeRepository:
    """Read-only recipe catalog, parsed from JSON on first access and cached."""

    def __init__(self, recipes_file: Union[str, Path, None] = None):
        self.recipes_file = Path(recipes_file) if recipes_file else RECIPES_FILE
        self._recipes: Optional[List[Recipe]] = None
        self._lock = Lock()

    @property
    def loaded(self) -> bool:
        return self._recipes is not None

    def load(self) -> List[Recipe]:
        """Return the cached catalog, reading the file the first time.

        Raises LoadError when the file is missing, unreadable or not a JSON
        list of recipe objects. Failures are not cached.
        """
        if self._recipes is not None:
            return self._recipes
        with self._lock:
            if self._recipes is None:
                self._recipes = self._read()
        return self._recipes

    def reset(self) -> None:
        with self._lock:
            self._recipes = None

    def _read(self) -> List[Recipe]:
        try:
            with open(self.recipes_file, 'r', encoding='utf-8') as f:
                recipes_data = json.load(f)
        except FileNotFoundError:
            logger.error("Recipes file not found: %s", self.recipes_file)
            raise LoadError(f"Recipes file not found: {self.recipes_file}")
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON in recipes file %s: %s", self.recipes_file, e)
            raise LoadError(f"Invalid JSON in recipes file: {e}")
        except OSError as e:
            logger.error("Error reading recipes file %s: %s", self.recipes_file, e)
            raise LoadError(f"Error reading recipes file: {e}")

        if not isinstance(recipes_data, list):
            logger.error("Recipes file %s does not contain a list", self.recipes_file)
            raise LoadError("Recipes file must contain a JSON list of recipes")
        try:
            recipes = [Recipe.from_dict(entry) for entry in recipes_data]
        except ValueError as e:
            logger.error("Malformed recipe in %s: %s", self.recipes_file, e)
            raise LoadError(f"Malformed recipe: {e}")
        logger.info("Loaded %d recipes from %s", len(recipes), self.recipes_file)
        return recipes
