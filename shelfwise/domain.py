from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Optional


@dataclass
class Book:
    isbn: str
    title: str
    author: str
    available: bool = True


@dataclass
class User:
    user_id: str
    name: str
    email: str
    borrowed_count: int = 0

    MAX_BOOKS: ClassVar[int] = 3

    def can_borrow_more(self, limit: Optional[int] = None) -> bool:
        if limit is None:
            limit = self.MAX_BOOKS
        return self.borrowed_count < limit
