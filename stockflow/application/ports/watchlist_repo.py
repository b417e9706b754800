from typing import Protocol, List

from .user_repo import RecipientDto


class WatchlistRepository(Protocol):
    def add(self, user_id: int, product_id: int) -> bool:
        """Returns False when the entry already existed."""
        ...

    def remove(self, user_id: int, product_id: int) -> bool:
        ...

    def list_product_ids(self, user_id: int) -> List[int]:
        ...

    def list_watchers(self, product_id: int) -> List[RecipientDto]:
        ...
