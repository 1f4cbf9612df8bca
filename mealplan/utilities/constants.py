from typing import Final

MEAL_TYPES: Final[tuple[str, ...]] = ("Breakfast", "Lunch", "Dinner")
PLAN_ID_PREFIX: Final[str] = "plan-"
DEFAULT_PLAN_NAME: Final[str] = "Meal Plan {plan_id}"
DEFAULT_SERVING_MULTIPLIER: Final[int] = 1

# Actions accepted on /meal-plans?id=...&action=...
ACTION_ADD_MEAL: Final[str] = "add-meal"
ACTION_REMOVE_MEAL: Final[str] = "remove-meal"
ACTION_UPDATE_SERVINGS: Final[str] = "update-servings"
ACTION_GROCERY_LIST: Final[str] = "grocery-list"

CORS_HEADERS: Final[dict[str, str]] = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS,PATCH,DELETE,POST,PUT",
    "Access-Control-Allow-Headers": (
        "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
        "Content-MD5, Content-Type, Date, X-Api-Version"
    ),
}
