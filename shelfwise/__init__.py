"""
ShelfWise circulation package.

Exports key modules for convenient imports.
"""

from .domain import Book, User

from .exceptions import BorrowCountUnderflowError, CirculationError

from .repositories import (
    CatalogStore,
    MembershipStore,
    InMemoryCatalogStore,
    InMemoryMembershipStore,
)

from .notifications import Message, MessageKind, Notifier, OutboxNotifier

from .policies import FixedOverdueTitles, OverduePolicy, RecordedOverdueTitles

from .services import CirculationService, OverdueNotifier

from .config import Settings, load_settings

from .api import LibrarySystem
from .seed import seed_demo_data

__all__ = [
    # domain
    "Book",
    "User",
    # errors
    "CirculationError",
    "BorrowCountUnderflowError",
    # stores
    "CatalogStore",
    "MembershipStore",
    "InMemoryCatalogStore",
    "InMemoryMembershipStore",
    # notifications
    "Notifier",
    "OutboxNotifier",
    "Message",
    "MessageKind",
    # policies
    "OverduePolicy",
    "FixedOverdueTitles",
    "RecordedOverdueTitles",
    # services
    "CirculationService",
    "OverdueNotifier",
    # config
    "Settings",
    "load_settings",
    # api
    "LibrarySystem",
    # seed
    "seed_demo_data",
]
