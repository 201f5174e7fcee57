"""
Domain-level exceptions.

Every failure the API surfaces to a caller is one of these. Each carries the HTTP
status it maps to and a user-visible message; the web layer turns them into
``{"message": ...}`` responses.
"""


class MealPlanError(Exception):
    """Base class for user-visible failures."""
    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(MealPlanError):
    """Raised when a required field or date is missing or malformed."""
    status_code = 400
    default_message = "Invalid request"


class InvalidDateError(ValidationError):
    default_message = "Invalid date format for weekStart"


class ConflictError(ValidationError):
    default_message = "Username already exists"


class AuthenticationRequiredError(MealPlanError):
    """Raised when there is no authenticated session."""
    status_code = 401
    default_message = "Authentication required"


class EmptyCatalogError(MealPlanError):
    """Raised when the recipe catalog itself is empty."""
    status_code = 404
    default_message = "No recipes available"


class NoMatchError(MealPlanError):
    """Raised when preferences exclude every recipe in the catalog."""
    status_code = 404
    default_message = "No recipes match your dietary preferences."


class NotFoundError(MealPlanError):
    status_code = 404
    default_message = "Not found"


__all__ = [
    'MealPlanError', 'ValidationError', 'InvalidDateError', 'ConflictError',
    'AuthenticationRequiredError', 'EmptyCatalogError', 'NoMatchError', 'NotFoundError'
]
