from typing import Any, Mapping, Optional


class CookbookError(Exception):
    """Base class for errors reported back to API callers.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, entry names)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 400
    default_message = "Cookbook error"
    default_code: Optional[str] = None

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(CookbookError):
    """Raised when an entry payload is malformed or conflicts with the cookbook.

    ``code`` names the rule that failed (``INVALID_TYPE``, ``DUPLICATE_NAME``, ...).
    """

    default_message = "Invalid input"
    default_code = "VALIDATION_ERROR"


class NotFoundError(CookbookError):
    """Raised when a requested resource was not found."""

    http_status = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"


class RecipeNotFoundError(NotFoundError):
    """Summary requested for an unknown name or for an ingredient.

    Reported as 400 to stay compatible with existing cookbook clients.
    """

    http_status = 400
    default_message = "Recipe not found"
    default_code = "NOT_FOUND_OR_NOT_RECIPE"


class ResolutionError(CookbookError):
    """Raised when a recipe cannot be expanded into base ingredients."""

    default_message = "Recipe could not be resolved"
    default_code = "RESOLUTION_ERROR"


class MissingRequirementError(ResolutionError):
    default_message = "Required item is missing from the cookbook"
    default_code = "MISSING_REQUIREMENT"


class InvalidEntityTypeError(ResolutionError):
    default_message = "Stored entry has an unrecognized type"
    default_code = "INVALID_ENTITY_TYPE"


class CyclicRequirementError(ResolutionError):
    default_message = "Recipe requires itself"
    default_code = "CYCLIC_REQUIREMENT"


class ExpansionDepthError(ResolutionError):
    default_message = "Recipe nesting is too deep"
    default_code = "DEPTH_EXCEEDED"
