from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, List

from .domain import User
from .repositories import InMemoryMembershipStore

DEFAULT_OVERDUE_TITLES = ["Sample Overdue Book 1", "Sample Overdue Book 2"]


class OverduePolicy(ABC):
    """Decides which titles a user is overdue on."""

    @abstractmethod
    def overdue_titles(self, user: User) -> List[str]:
        ...


class FixedOverdueTitles(OverduePolicy):
    """Same titles for every user; stands in until due dates are tracked."""

    def __init__(self, titles: Iterable[str]) -> None:
        self.titles = list(titles)

    def overdue_titles(self, user: User) -> List[str]:
        return list(self.titles)


class RecordedOverdueTitles(OverduePolicy):
    def __init__(self, members: InMemoryMembershipStore) -> None:
        self.members = members

    def overdue_titles(self, user: User) -> List[str]:
        return self.members.overdue_titles_for(user.user_id)
