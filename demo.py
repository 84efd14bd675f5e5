from __future__ import annotations

from shelfwise import LibrarySystem, seed_demo_data
from shelfwise.config import settings
from shelfwise.logging_config import setup_logging


def demo_flow() -> None:
    setup_logging(settings.log_level, settings.log_file)
    sys = LibrarySystem()
    seed_demo_data(sys)

    # Report inventory
    print("\n[demo] inventory:")
    for book, available in sys.report_inventory():
        print(f"  - {book.title}: {'available' if available else 'on loan'}")

    # Fill Alice up to the limit, then try one more
    alice = sys.users.find_by_id("U001")
    spare = sys.circulation.search_available_books()
    sys.borrow(alice.user_id, spare[0].isbn)
    attempt = sys.borrow(alice.user_id, spare[1].isbn)
    print(
        f"\n[demo] Alice tries a book #{alice.borrowed_count + 1}:",
        "SUCCESS" if attempt else "DENIED",
    )

    # Return a loan, then return it again (second one should fail)
    print("\n[demo] return Dune:", sys.return_book(alice.user_id, "9780441172719"))
    print("[demo] return Dune again:", sys.return_book(alice.user_id, "9780441172719"))

    # Overdue run
    sent = sys.send_overdue_notifications()
    print(f"\n[demo] overdue notices sent: {sent}")

    print("\n[demo] outbox:")
    for m in sys.notifier.outbox:
        print(f"  - {m.kind.name:<20} {m.email:<20} {m.subject}")


if __name__ == "__main__":
    demo_flow()
