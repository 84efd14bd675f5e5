# tests/conftest.py
import pytest
from unittest.mock import MagicMock

from shelfwise.domain import Book, User
from shelfwise.notifications import Notifier
from shelfwise.repositories import CatalogStore, MembershipStore
from shelfwise.services import CirculationService


@pytest.fixture
def catalog():
    """Mock catalog store"""
    return MagicMock(spec=CatalogStore)


@pytest.fixture
def members():
    """Mock membership store"""
    return MagicMock(spec=MembershipStore)


@pytest.fixture
def notifier():
    """Mock notifier"""
    return MagicMock(spec=Notifier)


@pytest.fixture
def circulation(catalog, members, notifier):
    return CirculationService(catalog, members, notifier)


@pytest.fixture
def john():
    return User("U001", "John Doe", "john@example.com", borrowed_count=1)


@pytest.fixture
def jane_at_limit():
    return User("U002", "Jane Smith", "jane@example.com", borrowed_count=3)


@pytest.fixture
def available_book():
    return Book("978-1234567890", "Test Book", "Test Author")


@pytest.fixture
def unavailable_book():
    return Book("978-0987654321", "Borrowed Book", "Another Author", available=False)
