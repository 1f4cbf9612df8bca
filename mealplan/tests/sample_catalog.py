"""Small recipe catalog shared by the tests."""
import json
from pathlib import Path

SAMPLE_RECIPES = [
    {
        "id": 1,
        "title": "Omelette",
        "dietary_restrictions": "Vegetarian",
        "section": "Breakfast",
        "ingredients": [{"name": "egg", "quantity": "2"}],
    },
    {
        "id": 2,
        "title": "Pancakes",
        "dietary_restrictions": "Vegetarian",
        "section": "Breakfast",
        "ingredients": [
            {"name": "flour", "quantity": "200 g"},
            {"name": "milk", "quantity": "300 ml"},
            {"name": "Eggs", "quantity": "2"},
        ],
    },
    {
        "id": "3",
        "title": "Tomato Soup",
        "dietary_restrictions": "Vegan, contains no egg",
        "section": "Lunch",
        "ingredients": [
            {"name": "tomato", "quantity": "6"},
            {"name": "onion", "quantity": "1"},
        ],
        "prep_time": "30 minutes",
    },
    {
        "id": 4,
        "title": "Beef Stew",
        "dietary_restrictions": "None",
        "section": "Lunch, Dinner",
        "ingredients": [
            {"name": "beef", "quantity": "500 g"},
            {"name": "onion", "quantity": "2"},
            {"name": "carrot", "quantity": "3"},
        ],
    },
    {
        "id": 5,
        "title": "Grilled Salmon",
        "dietary_restrictions": "Gluten-Free",
        "section": "Dinner",
        "ingredients": [
            {"name": "salmon", "quantity": "2 fillets"},
            {"name": "lemon", "quantity": "1"},
        ],
    },
]


def write_catalog(directory, recipes=None) -> Path:
    """Write ``recipes`` (default SAMPLE_RECIPES) as recipes.json inside ``directory``."""
    path = Path(directory) / "recipes.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(SAMPLE_RECIPES if recipes is None else recipes, f)
    return path
