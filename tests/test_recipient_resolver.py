from datetime import datetime

from stockflow.application.ports.product_repo import ProductDto
from stockflow.application.ports.user_repo import RecipientDto
from stockflow.application.services.recipient_resolver import RecipientResolver


class FakeUsers:
    def __init__(self, *recipients):
        self.recipients = {r.id: r for r in recipients}

    def get_recipient(self, user_id):
        return self.recipients.get(user_id)


class FakeWatchlist:
    def __init__(self, watchers):
        self.watchers = watchers

    def list_watchers(self, product_id):
        return self.watchers


def product(created_by=1):
    return ProductDto(3, "Lamp", "LAMP", None, 1, 10.0, 1, 5, created_by, datetime.utcnow())


def test_creator_and_watchers_are_merged_once():
    a = RecipientDto(1, "a@x.io", "a", True)
    b = RecipientDto(2, "b@x.io", "b", True)
    resolver = RecipientResolver(FakeUsers(a, b), FakeWatchlist([a, b, b]))
    recipients = resolver.resolve(product())
    assert sorted(r.id for r in recipients) == [1, 2]


def test_missing_creator_still_returns_watchers():
    b = RecipientDto(2, "b@x.io", "b", False)
    resolver = RecipientResolver(FakeUsers(), FakeWatchlist([b]))
    assert resolver.resolve(product(created_by=99)) == [b]
