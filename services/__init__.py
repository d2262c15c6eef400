"""Services package - Business logic layer"""

from services.entry_service import EntryService
from services.summary_service import SummaryService

__all__ = [
    "EntryService",
    "SummaryService",
]
