from __future__ import annotations
from typing import Iterable, Optional
import uuid

from .config import Settings, settings as default_settings
from .domain import Book, User
from .notifications import OutboxNotifier
from .policies import RecordedOverdueTitles
from .repositories import InMemoryCatalogStore, InMemoryMembershipStore
from .services import CirculationService, OverdueNotifier


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:8]}"


class LibrarySystem:
    """
    A simple facade that wires in-memory stores + services and offers a compact API.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or default_settings

        # stores
        self.books = InMemoryCatalogStore()
        self.users = InMemoryMembershipStore()

        # collaborators
        self.notifier = OutboxNotifier()
        self.overdue_policy = RecordedOverdueTitles(self.users)

        # services
        self.circulation = CirculationService(
            self.books, self.users, self.notifier, max_books=self.settings.max_books
        )
        self.overdue = OverdueNotifier(self.users, self.notifier, self.overdue_policy)

    # ---- membership
    def create_user(self, name: str, email: str, user_id: Optional[str] = None) -> User:
        u = User(user_id=user_id or _new_id("usr"), name=name, email=email)
        self.users.save(u)
        return u

    # ---- catalog
    def add_book(self, isbn: str, title: str, author: str) -> Book:
        b = Book(isbn=isbn, title=title, author=author)
        self.books.save(b)
        return b

    # ---- circulation
    def borrow(self, user_id: str, isbn: str) -> bool:
        return self.circulation.borrow_book(user_id, isbn)

    def return_book(self, user_id: str, isbn: str) -> bool:
        if not self.circulation.return_book(user_id, isbn):
            return False
        # a returned book is no longer overdue
        self.users.clear_overdue_title(user_id, self.books.find_by_isbn(isbn).title)
        return True

    # ---- overdue
    def flag_overdue(self, user_id: str, titles: Iterable[str]) -> None:
        self.users.flag_overdue(user_id, titles)

    def send_overdue_notifications(self) -> int:
        return self.overdue.send_overdue_notifications()

    # ---- reporting
    def report_inventory(self) -> list[tuple[Book, bool]]:
        """
        Returns tuples of (Book, available)
        """
        return [(book, book.available) for book in self.books.list_all()]
