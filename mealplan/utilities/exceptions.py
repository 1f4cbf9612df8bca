"""Domain errors raised by the catalog, the query service and the meal plan store.

Each error carries the HTTP status the API layer should answer with, so the
handlers registered in ``mealplan.api.api_run`` never need to know which
component raised it.
"""


class MealPlanError(Exception):
    """Base class for errors rendered as ``{"success": false, "error": ...}``."""

    http_status = 500

    def __init__(self, message: str = "Internal error"):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class LoadError(MealPlanError):
    """Raised when the recipe catalog is missing or malformed."""

    http_status = 500

    def __init__(self, message: str = "Recipe catalog could not be loaded"):
        super().__init__(message)


class NotFoundError(MealPlanError):
    """Raised when a plan, recipe or meal entry does not exist."""

    http_status = 404

    def __init__(self, message: str = "Not found"):
        super().__init__(message)


class InvalidArgumentError(MealPlanError):
    """Raised for a bad meal type, a missing identifier or a malformed body."""

    http_status = 400

    def __init__(self, message: str = "Invalid request"):
        super().__init__(message)


class MethodNotAllowedError(MealPlanError):
    http_status = 405

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message)


__all__ = ['MealPlanError', 'LoadError', 'NotFoundError', 'InvalidArgumentError', 'MethodNotAllowedError']
