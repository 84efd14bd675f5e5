from __future__ import annotations
from typing import List, Optional
import logging

from .domain import Book, User
from .exceptions import BorrowCountUnderflowError
from .notifications import Notifier
from .policies import DEFAULT_OVERDUE_TITLES, FixedOverdueTitles, OverduePolicy
from .repositories import CatalogStore, MembershipStore

logger = logging.getLogger(__name__)


class CirculationService:
    """
    Borrow/return rules.  Reads from the stores, validates, mutates the
    entities, saves them (book first, then user) and finally notifies.
    Collaborator errors are not caught and nothing is rolled back.
    """

    def __init__(
        self,
        catalog: CatalogStore,
        members: MembershipStore,
        notifier: Notifier,
        max_books: int = User.MAX_BOOKS,
    ):
        if max_books < 1:
            raise ValueError(f"max_books must be at least 1, got {max_books}")
        self.catalog = catalog
        self.members = members
        self.notifier = notifier
        self.max_books = max_books

    def borrow_book(self, user_id: str, isbn: str) -> bool:
        user = self.members.find_by_id(user_id)
        if user is None or not user.can_borrow_more(self.max_books):
            logger.info("[borrow] user %s missing or at borrow limit", user_id)
            return False

        book = self.catalog.find_by_isbn(isbn)
        if book is None or not book.available:
            logger.info("[borrow] book %s missing or on loan", isbn)
            return False

        book.available = False
        user.borrowed_count += 1

        self.catalog.save(book)
        self.members.save(user)
        self.notifier.send_borrow_confirmation(user.email, book.title)

        logger.info("[borrow] %s -> %s (now holds %d)", isbn, user_id, user.borrowed_count)
        return True

    def return_book(self, user_id: str, isbn: str) -> bool:
        user = self.members.find_by_id(user_id)
        book = self.catalog.find_by_isbn(isbn)

        if user is None or book is None or book.available:
            logger.info("[return] invalid return of %s by %s", isbn, user_id)
            return False

        if user.borrowed_count <= 0:
            logger.error(
                "[return] %s has no borrowed books on record but is returning %s",
                user_id,
                isbn,
            )
            raise BorrowCountUnderflowError(user.user_id, user.borrowed_count)

        book.available = True
        user.borrowed_count -= 1

        self.catalog.save(book)
        self.members.save(user)
        self.notifier.send_return_confirmation(user.email, book.title)

        logger.info("[return] %s <- %s (now holds %d)", isbn, user_id, user.borrowed_count)
        return True

    def search_available_books(self) -> List[Book]:
        return self.catalog.find_available()


class OverdueNotifier:
    def __init__(
        self,
        members: MembershipStore,
        notifier: Notifier,
        policy: Optional[OverduePolicy] = None,
    ):
        self.members = members
        self.notifier = notifier
        self.policy = policy or FixedOverdueTitles(DEFAULT_OVERDUE_TITLES)

    def send_overdue_notifications(self) -> int:
        """
        Notify every overdue user that has at least one overdue title.

        Users are processed in the order the store returns them.  The first
        error raised by the store, the policy or the notifier stops the run.
        Returns how many notifications were sent.
        """
        sent = 0
        for user in self.members.find_users_with_overdue():
            titles = self.policy.overdue_titles(user)
            if not titles:
                continue
            self.notifier.send_overdue_notification(user.email, user.name, titles)
            sent += 1

        logger.info("[overdue] sent %d notification(s)", sent)
        return sent
