"""Guard set for in-flight background fills."""

from typing import Set


class PendingSet:
    """Tokens of (locale, key) pairs whose fill is queued or running.

    A token is reserved when its fill is enqueued and released when the
    fill finishes, whatever the outcome.
    """

    def __init__(self):
        self._tokens: Set[str] = set()

    def try_reserve(self, token: str) -> bool:
        """Reserve token if it is free.

        Returns:
            True if the token was reserved, False if already reserved.
        """
        if token in self._tokens:
            return False
        self._tokens.add(token)
        return True

    def release(self, token: str) -> None:
        self._tokens.discard(token)

    def clear(self) -> None:
        self._tokens.clear()

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __len__(self) -> int:
        return len(self._tokens)
