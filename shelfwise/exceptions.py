class CirculationError(Exception):
    """Base exception for circulation errors that are not plain validation failures."""


class BorrowCountUnderflowError(CirculationError):
    """A return would take a user's borrowed count below zero."""

    def __init__(self, user_id: str, borrowed_count: int) -> None:
        super().__init__(
            f"user {user_id} has borrowed_count={borrowed_count}; cannot record a return"
        )
        self.user_id = user_id
        self.borrowed_count = borrowed_count
