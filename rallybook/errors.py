"""Custom exception classes for the roster services."""


class AppError(Exception):
    """Base application error class.

    ``field`` names the submitted field the error belongs to, when there is
    one, so a form can show the message next to it.
    """

    def __init__(self, message, status_code=400, field=None):
        """Initialize the error."""
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.field = field


class ValidationError(AppError):
    """Raised when submitted values fail validation."""

    def __init__(self, message="Validation failed.", field=None):
        """Initialize the error."""
        super().__init__(message, 400, field)


class InvalidSkillRangeError(ValidationError):
    """Raised when a player's minimum skill is above their maximum skill."""

    def __init__(self, message="Minimum level cannot be higher than maximum level."):
        super().__init__(message, field="max_level")


class DuplicateResourceError(AppError):
    """Raised when a nickname or email is already taken by another player."""

    def __init__(self, message="Resource already exists.", field=None):
        """Initialize the error."""
        super().__init__(message, 409, field)
