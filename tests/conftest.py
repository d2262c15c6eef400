"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from fastapi.testclient import TestClient

from main import create_app
from repositories.cookbook_repository import CookbookRepository
from services.entry_service import EntryService
from services.summary_service import SummaryService


@pytest.fixture
def repository() -> CookbookRepository:
    """Empty cookbook for each test"""
    return CookbookRepository()


@pytest.fixture
def entry_service(repository: CookbookRepository) -> EntryService:
    return EntryService(repository)


@pytest.fixture
def summary_service(repository: CookbookRepository) -> SummaryService:
    return SummaryService(repository)


@pytest.fixture
def client(repository: CookbookRepository) -> TestClient:
    """TestClient over an app serving the test's cookbook"""
    return TestClient(create_app(repository=repository))
