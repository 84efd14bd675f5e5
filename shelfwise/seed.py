from __future__ import annotations
import logging

from .api import LibrarySystem

logger = logging.getLogger(__name__)


def seed_demo_data(sys: LibrarySystem) -> None:
    # users
    alice = sys.create_user("Alice Reader", "alice@example.com", user_id="U001")
    bob = sys.create_user("Bob Borrower", "bob@example.com", user_id="U002")
    sys.create_user("Carol Casual", "carol@example.com", user_id="U003")

    # books
    dune = sys.add_book("9780441172719", "Dune", "Frank Herbert")
    hp1 = sys.add_book(
        "9780590353427", "Harry Potter and the Sorcerer's Stone", "J.K. Rowling"
    )
    clean_code = sys.add_book("9780132350884", "Clean Code", "Robert C. Martin")
    sys.add_book("9780201633610", "Design Patterns", "Erich Gamma")
    sys.add_book("9780262033848", "Introduction to Algorithms", "Thomas H. Cormen")

    # loans
    sys.borrow(alice.user_id, dune.isbn)
    sys.borrow(alice.user_id, clean_code.isbn)
    sys.borrow(bob.user_id, hp1.isbn)

    # Simulate overdue (due dates are not tracked, so flag directly)
    sys.flag_overdue(alice.user_id, [dune.title])
    sys.flag_overdue(bob.user_id, [hp1.title])

    logger.info("[seed] users: %s", [u.name for u in sys.users.list_all()])
    logger.info("[seed] books: %s", [b.title for b in sys.books.list_all()])
