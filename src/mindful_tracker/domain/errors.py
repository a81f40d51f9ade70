"""Domain errors raised by services."""


class MealNotFoundError(LookupError):
    """Raised when a meal does not exist for the user."""


class MealParseError(ValueError):
    """Raised when the parser response cannot be turned into food items."""
