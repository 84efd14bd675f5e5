"""
Notification contract and an in-process outbox implementation.

``Notifier`` is what the circulation services talk to.  ``OutboxNotifier``
keeps every message in a list and writes it to the log instead of handing
it to a mail transport, which is enough for the demo and for tests.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Sequence
import logging

logger = logging.getLogger(__name__)


class Notifier(ABC):
    @abstractmethod
    def send_borrow_confirmation(self, email: str, title: str) -> None:
        ...

    @abstractmethod
    def send_return_confirmation(self, email: str, title: str) -> None:
        ...

    @abstractmethod
    def send_overdue_notification(self, email: str, name: str, titles: Sequence[str]) -> None:
        ...


class MessageKind(Enum):
    BORROW_CONFIRMATION = auto()
    RETURN_CONFIRMATION = auto()
    OVERDUE_NOTICE = auto()


@dataclass
class Message:
    kind: MessageKind
    email: str
    subject: str
    body: str
    titles: List[str] = field(default_factory=list)


class OutboxNotifier(Notifier):
    def __init__(self) -> None:
        self.outbox: List[Message] = []

    def _post(self, message: Message) -> None:
        self.outbox.append(message)
        logger.info("[notify] %s -> %s: %s", message.kind.name, message.email, message.subject)

    def send_borrow_confirmation(self, email: str, title: str) -> None:
        self._post(
            Message(
                kind=MessageKind.BORROW_CONFIRMATION,
                email=email,
                subject=f"You borrowed '{title}'",
                body=f"Enjoy '{title}'. Please return it on time.",
                titles=[title],
            )
        )

    def send_return_confirmation(self, email: str, title: str) -> None:
        self._post(
            Message(
                kind=MessageKind.RETURN_CONFIRMATION,
                email=email,
                subject=f"Thanks for returning '{title}'",
                body=f"We have received '{title}'.",
                titles=[title],
            )
        )

    def send_overdue_notification(self, email: str, name: str, titles: Sequence[str]) -> None:
        listing = "\n".join(f"  - {t}" for t in titles)
        self._post(
            Message(
                kind=MessageKind.OVERDUE_NOTICE,
                email=email,
                subject=f"{len(titles)} overdue item(s)",
                body=f"Hello {name},\n\nThe following items are overdue:\n{listing}",
                titles=list(titles),
            )
        )

    def messages_for(self, email: str) -> List[Message]:
        return [m for m in self.outbox if m.email == email]
