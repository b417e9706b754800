from dataclasses import dataclass
from typing import List

from ..ports.product_repo import ProductDto
from ..ports.user_repo import UserRepository, RecipientDto
from ..ports.watchlist_repo import WatchlistRepository


@dataclass
class RecipientResolver:
    user_repo: UserRepository
    watchlist_repo: WatchlistRepository

    def resolve(self, product: ProductDto) -> List[RecipientDto]:
        """Creator plus watchlist subscribers, each user once."""
        recipients = {}
        creator = self.user_repo.get_recipient(product.created_by)
        if creator:
            recipients[creator.id] = creator
        for watcher in self.watchlist_repo.list_watchers(product.id):
            recipients.setdefault(watcher.id, watcher)
        return list(recipients.values())
