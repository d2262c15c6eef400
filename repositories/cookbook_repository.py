"""
Cookbook Repository - in-memory store of ingredients and recipes.
"""

import logging
from typing import Dict, List, Optional

from app.exceptions import ServiceValidationError
from domain.models.entry import CookbookEntry
from repositories.base import BaseRepository

logger = logging.getLogger("cookbook.repository")


class CookbookRepository(BaseRepository[CookbookEntry]):
    """
    Owns every cookbook entry for the lifetime of the process.

    Names are unique across ingredients and recipes. Entries are never
    updated or removed once added.
    """

    def __init__(self):
        self._entries: Dict[str, CookbookEntry] = {}

    def get_by_name(self, name: str) -> Optional[CookbookEntry]:
        return self._entries.get(name)

    def get_all(self) -> List[CookbookEntry]:
        return list(self._entries.values())

    def add(self, entity: CookbookEntry) -> CookbookEntry:
        """Store an already validated entry.

        Raises:
            ServiceValidationError: If an entry with the same name exists
        """
        if entity.name in self._entries:
            raise ServiceValidationError(
                f"Entry '{entity.name}' already exists",
                details={"name": entity.name},
                code="DUPLICATE_NAME",
            )
        self._entries[entity.name] = entity
        logger.debug(f"Stored entry '{entity.name}'")
        return entity

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
