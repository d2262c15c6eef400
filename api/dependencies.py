"""
API dependencies for dependency injection
"""

from fastapi import Depends, Request

from repositories.cookbook_repository import CookbookRepository
from services.entry_service import EntryService
from services.summary_service import SummaryService


def get_repository(request: Request) -> CookbookRepository:
    """
    Cookbook owned by the running application.

    Usage:
        @router.get("/example")
        def example(repo: CookbookRepository = Depends(get_repository)):
            ...
    """
    return request.app.state.repository


def get_entry_service(
    repository: CookbookRepository = Depends(get_repository),
) -> EntryService:
    return EntryService(repository)


def get_summary_service(
    request: Request,
    repository: CookbookRepository = Depends(get_repository),
) -> SummaryService:
    return SummaryService(repository, max_depth=request.app.state.settings.max_expansion_depth)
