"""Recipe domain entity: id, title, dietary restrictions, section and ingredients."""
import copy
import re
from typing import Any, Dict, List, Optional

from mealplan.domain.Ingredient import Ingredient

_INTEGER_LITERAL = re.compile(r'^[+-]?\d+$')

# Keys modelled explicitly; anything else in the catalog entry is carried in ``extra``.
_KNOWN_KEYS = ("id", "title", "dietary_restrictions", "section", "ingredients")


class Recipe:
    def __init__(self, id: Any = None, title: str = "", dietary_restrictions: str = "", section: str = "",
                 ingredients: Optional[List[Ingredient]] = None, extra: Optional[Dict[str, Any]] = None,
                 key_order: Optional[List[str]] = None):
        self.id = id
        self.title = title
        self.dietary_restrictions = dietary_restrictions
        self.section = section
        self.ingredients = ingredients[:] if ingredients else []
        self.extra = dict(extra) if extra else {}
        # catalog key order, replayed by to_dict
        self.key_order = list(key_order) if key_order else []

    def __str__(self) -> str:
        return f"{self.id}: {self.title} [{self.section}] - {len(self.ingredients)} ingredients"

    __repr__ = __str__

    @property
    def key(self) -> Optional[str]:
        """Canonical identifier used for lookups."""
        return self.normalize_id(self.id)

    @staticmethod
    def normalize_id(value: Any) -> Optional[str]:
        """Normalize a recipe identifier to its canonical string form.

        ``1``, ``1.0``, ``"1"``, ``" 01 "`` all normalize to ``"1"``; other
        strings are only stripped. ``None`` and booleans have no canonical form.
        """
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return str(int(value)) if value.is_integer() else repr(value)
        text = str(value).strip()
        if not text:
            return None
        if _INTEGER_LITERAL.match(text):
            return str(int(text))
        return text

    def matches_id(self, value: Any) -> bool:
        wanted = self.normalize_id(value)
        return wanted is not None and wanted == self.key

    def snapshot(self) -> "Recipe":
        """Independent copy embedded into meal entries."""
        return Recipe.from_dict(self.to_dict())

    @staticmethod
    def from_dict(data):
        if not isinstance(data, dict):
            raise ValueError(f"Recipe entry must be an object, got {type(data).__name__}")
        ingredients = data.get('ingredients') or []
        if not isinstance(ingredients, list):
            raise ValueError(f"Recipe {data.get('id')!r} has a non-list 'ingredients' field")
        return Recipe(
            id=data.get('id'),
            title=str(data.get('title') or ""),
            dietary_restrictions=str(data.get('dietary_restrictions') or ""),
            section=str(data.get('section') or ""),
            ingredients=[Ingredient.from_dict(ing) for ing in ingredients],
            extra={k: copy.deepcopy(v) for k, v in data.items() if k not in _KNOWN_KEYS},
            key_order=list(data.keys()),
        )

    def to_dict(self):
        d = {
            "id": self.id,
            "title": self.title,
            "dietary_restrictions": self.dietary_restrictions,
            "section": self.section,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
        }
        d.update(copy.deepcopy(self.extra))
        ordered = {k: d[k] for k in self.key_order if k in d}
        ordered.update((k, v) for k, v in d.items() if k not in ordered)
        return ordered
