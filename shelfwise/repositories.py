from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from .domain import Book, User


class CatalogStore(ABC):
    """Lookup and persistence contract for books."""

    @abstractmethod
    def find_by_isbn(self, isbn: str) -> Optional[Book]:
        """Return the book with this ISBN, or None."""

    @abstractmethod
    def save(self, book: Book) -> None:
        """Persist the current state of a book."""

    @abstractmethod
    def find_available(self) -> List[Book]:
        """Return every book that is not on loan."""


class MembershipStore(ABC):
    """Lookup and persistence contract for library users."""

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        """Return the user with this id, or None."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist the current state of a user."""

    @abstractmethod
    def find_users_with_overdue(self) -> List[User]:
        """Return users holding at least one overdue item."""


class InMemoryCatalogStore(CatalogStore):
    def __init__(self, books: Iterable[Book] = ()) -> None:
        self._books: Dict[str, Book] = {}
        for b in books:
            self.save(b)

    def find_by_isbn(self, isbn: str) -> Optional[Book]:
        return self._books.get(isbn)

    def save(self, book: Book) -> None:
        self._books[book.isbn] = book

    def find_available(self) -> List[Book]:
        return [b for b in self._books.values() if b.available]

    def list_all(self) -> List[Book]:
        return list(self._books.values())


class InMemoryMembershipStore(MembershipStore):
    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: Dict[str, User] = {}
        # user_id -> overdue titles, kept in flagging order
        self._overdue: Dict[str, List[str]] = {}
        for u in users:
            self.save(u)

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def save(self, user: User) -> None:
        self._users[user.user_id] = user

    def list_all(self) -> List[User]:
        return list(self._users.values())

    # overdue bookkeeping
    def flag_overdue(self, user_id: str, titles: Iterable[str]) -> None:
        self._overdue[user_id] = list(titles)

    def clear_overdue(self, user_id: str) -> None:
        self._overdue.pop(user_id, None)

    def clear_overdue_title(self, user_id: str, title: str) -> None:
        remaining = [t for t in self._overdue.get(user_id, []) if t != title]
        if remaining:
            self._overdue[user_id] = remaining
        else:
            self.clear_overdue(user_id)

    def overdue_titles_for(self, user_id: str) -> List[str]:
        return list(self._overdue.get(user_id, []))

    def find_users_with_overdue(self) -> List[User]:
        return [self._users[uid] for uid in self._overdue if uid in self._users]
