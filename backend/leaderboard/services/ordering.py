from enum import Enum
from typing import List, Optional, Tuple

from leaderboard.errors import InvalidRequest, UnexpectedStoreState


class SortingOrder(str, Enum):
    """Which direction of the score axis is better.

    The value is both the wire code and the code persisted under
    ``board:<name>:order``.
    """
    ASCENDING = 'ASC'   # lower is better
    DESCENDING = 'DSC'  # higher is better

    @classmethod
    def from_code(cls, code) -> 'SortingOrder':
        """Parse a code supplied by a client."""
        try:
            return cls(code)
        except ValueError:
            raise InvalidRequest(f"Unknown sorting order: {code!r} (expected ASC or DSC)")

    @classmethod
    def from_stored(cls, value: Optional[str]) -> 'SortingOrder':
        """Parse a code read back from the store.

        The service only ever writes ASC or DSC, so anything else means the
        store holds data we did not put there.
        """
        try:
            return cls(value)
        except ValueError:
            raise UnexpectedStoreState()

    @property
    def zadd_mode(self) -> str:
        # ZADD only replaces an existing member when the new score is strictly better
        return 'LT' if self is SortingOrder.ASCENDING else 'GT'

    @property
    def zadd_flags(self) -> dict:
        return {'lt': True} if self is SortingOrder.ASCENDING else {'gt': True}

    def rank(self, client, key: str, member: str) -> Optional[int]:
        if self is SortingOrder.ASCENDING:
            return client.zrank(key, member)
        return client.zrevrank(key, member)

    def page(self, client, key: str, start: int, stop: int) -> List[Tuple[str, float]]:
        if self is SortingOrder.ASCENDING:
            return client.zrange(key, start, stop, withscores=True)
        return client.zrevrange(key, start, stop, withscores=True)
