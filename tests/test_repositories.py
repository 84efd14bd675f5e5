# tests/test_repositories.py
from shelfwise.domain import Book, User
from shelfwise.policies import FixedOverdueTitles, RecordedOverdueTitles
from shelfwise.repositories import InMemoryCatalogStore, InMemoryMembershipStore


def test_catalog_find_and_save():
    dune = Book("9780441172719", "Dune", "Frank Herbert")
    store = InMemoryCatalogStore([dune])

    assert store.find_by_isbn("9780441172719") is dune
    assert store.find_by_isbn("missing") is None

    replacement = Book("9780441172719", "Dune (2nd ed.)", "Frank Herbert")
    store.save(replacement)
    assert store.find_by_isbn("9780441172719") is replacement
    assert len(store.list_all()) == 1


def test_catalog_find_available_keeps_insertion_order():
    a = Book("1", "A", "x")
    b = Book("2", "B", "y", available=False)
    c = Book("3", "C", "z")
    store = InMemoryCatalogStore([a, b, c])

    assert store.find_available() == [a, c]


def test_membership_overdue_flagging_order():
    u1 = User("U001", "One", "one@example.com")
    u2 = User("U002", "Two", "two@example.com")
    store = InMemoryMembershipStore([u1, u2])

    store.flag_overdue("U002", ["Dune"])
    store.flag_overdue("U001", ["Emma", "Persuasion"])

    assert store.find_users_with_overdue() == [u2, u1]
    assert store.overdue_titles_for("U001") == ["Emma", "Persuasion"]
    assert store.overdue_titles_for("U404") == []


def test_membership_clear_and_unknown_users():
    u1 = User("U001", "One", "one@example.com")
    store = InMemoryMembershipStore([u1])
    store.flag_overdue("U001", ["Dune"])
    store.flag_overdue("GHOST", ["Nothing"])

    assert store.find_users_with_overdue() == [u1]

    store.clear_overdue("U001")
    store.clear_overdue("U001")
    assert store.find_users_with_overdue() == []


def test_overdue_titles_for_returns_a_copy():
    store = InMemoryMembershipStore([User("U001", "One", "one@example.com")])
    store.flag_overdue("U001", ["Dune"])

    store.overdue_titles_for("U001").append("Tampered")

    assert store.overdue_titles_for("U001") == ["Dune"]


def test_policies():
    user = User("U001", "One", "one@example.com")
    store = InMemoryMembershipStore([user])
    store.flag_overdue("U001", ["Dune"])

    assert FixedOverdueTitles(["A", "B"]).overdue_titles(user) == ["A", "B"]
    assert RecordedOverdueTitles(store).overdue_titles(user) == ["Dune"]


def test_user_borrow_limit():
    user = User("U001", "One", "one@example.com", borrowed_count=2)

    assert User.MAX_BOOKS == 3
    assert user.can_borrow_more()
    user.borrowed_count = 3
    assert not user.can_borrow_more()
    assert user.can_borrow_more(limit=4)


def test_clear_overdue_title():
    u1 = User("U001", "One", "one@example.com")
    store = InMemoryMembershipStore([u1])
    store.flag_overdue("U001", ["Dune", "Emma"])

    store.clear_overdue_title("U001", "Dune")
    assert store.overdue_titles_for("U001") == ["Emma"]
    assert store.find_users_with_overdue() == [u1]

    store.clear_overdue_title("U001", "Emma")
    assert store.overdue_titles_for("U001") == []
    assert store.find_users_with_overdue() == []

    # unknown user or title is a no-op
    store.clear_overdue_title("U404", "Dune")
    assert store.find_users_with_overdue() == []
