"""Entry service - validated insertion of ingredients and recipes."""

import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from app.exceptions import ServiceValidationError
from domain.models.entry import CookbookEntry
from domain.schemas.entry_schemas import ENTRY_TYPES, entry_create_adapter
from repositories.cookbook_repository import CookbookRepository

logger = logging.getLogger("cookbook.entries")


class EntryService:
    """Business logic for adding entries to the cookbook."""

    def __init__(self, repository: CookbookRepository):
        self.repository = repository

    def insert(self, payload: Any) -> CookbookEntry:
        """
        Validate a raw entry payload and store it.

        Rules are checked in order and the first failure wins:
        1. ``type`` is "ingredient" or "recipe"
        2. ``name`` is a non-empty string
        3. ``name`` is not already in the cookbook
        4. ingredients: ``cookTime`` is an integer >= 0
        5. recipes: ``requiredItems`` is a list of ``{name, quantity >= 1}``
           with no repeated names

        Args:
            payload: Decoded JSON body

        Returns:
            The stored entry

        Raises:
            ServiceValidationError: If any rule fails; nothing is stored
        """
        if not isinstance(payload, Mapping):
            raise self._reject("Entry must be a JSON object", "INVALID_PAYLOAD")

        entry_type = payload.get("type")
        if not isinstance(entry_type, str) or entry_type not in ENTRY_TYPES:
            raise self._reject(
                f"Entry type must be one of {', '.join(ENTRY_TYPES)}",
                "INVALID_TYPE",
                {"type": entry_type},
            )

        name = payload.get("name")
        if not isinstance(name, str) or not name:
            raise self._reject("Entry name must be a non-empty string", "INVALID_NAME")

        if self.repository.exists(name):
            raise self._reject(
                f"Entry '{name}' already exists", "DUPLICATE_NAME", {"name": name}
            )

        try:
            candidate = entry_create_adapter.validate_python(dict(payload))
        except ValidationError as e:
            raise self._from_validation_error(name, e)

        entry = self.repository.add(candidate.to_entry())
        logger.info(f"Added {entry_type} '{name}'")
        return entry

    def lookup(self, name: str) -> Optional[CookbookEntry]:
        """Exact-match retrieval; None when the name is unknown."""
        return self.repository.get_by_name(name)

    @staticmethod
    def _reject(message: str, code: str, details: Optional[Mapping[str, Any]] = None) -> ServiceValidationError:
        logger.warning(f"Rejected entry ({code}): {message}")
        return ServiceValidationError(message, details=details, code=code)

    @classmethod
    def _from_validation_error(cls, name: str, exc: ValidationError) -> ServiceValidationError:
        """Map the first schema error to the rule it violates."""
        errors = exc.errors(include_url=False, include_context=False, include_input=False)
        first = errors[0]
        # loc starts with the union tag, e.g. ("recipe", "requiredItems", 0, "quantity")
        loc = first["loc"][1:]
        field = loc[0] if loc else None

        if first["type"] == "duplicate_required_item":
            code = "DUPLICATE_REQUIRED_ITEM"
        elif field == "cookTime":
            code = "INVALID_COOK_TIME"
        elif field == "requiredItems" and len(loc) == 1:
            code = "INVALID_REQUIRED_ITEMS"
        elif field == "requiredItems":
            code = "INVALID_REQUIRED_ITEM"
        else:
            code = "VALIDATION_ERROR"

        return cls._reject(
            f"Invalid entry '{name}': {first['msg']}",
            code,
            {"errors": [{"loc": list(err["loc"]), "msg": err["msg"]} for err in errors]},
        )
