from datetime import datetime
from dataclasses import replace

import pytest

from stockflow.application.ports.product_repo import ProductDto, ProductInput
from stockflow.application.ports.sector_repo import SectorDto
from stockflow.application.services.product_service import ProductService
from stockflow.exceptions import DuplicateSKU, NotFound, Unauthorized, ValidationError


class FakeProductRepo:
    def __init__(self):
        self._id = 1
        self.products = {}

    def get_by_id(self, product_id):
        return self.products.get(product_id)

    def find_id_by_sku(self, sku, exclude_id=None):
        for p in self.products.values():
            if p.sku.strip().upper() == sku and p.id != exclude_id:
                return p.id
        return None

    def create(self, data, created_by):
        p = ProductDto(self._id, data.name, data.sku, data.description, data.sector_id, data.price,
                       data.stock_quantity, data.min_stock, created_by, datetime.utcnow())
        self.products[p.id] = p
        self._id += 1
        return p

    def update(self, product_id, data):
        p = self.products.get(product_id)
        if not p:
            return False
        self.products[product_id] = replace(
            p, name=data.name, sku=data.sku, description=data.description, sector_id=data.sector_id,
            price=data.price, stock_quantity=data.stock_quantity, min_stock=data.min_stock,
        )
        return True

    def delete(self, product_id):
        return self.products.pop(product_id, None) is not None

    def list_all(self):
        return list(self.products.values())


class FakeSectors:
    def get_by_id(self, sector_id):
        if sector_id == 1:
            return SectorDto(1, "Electronics", None, "📱")
        return None


class FakeUsers:
    def get_by_id(self, user_id):
        return object() if user_id == 7 else None


class FakeAlerts:
    def __init__(self):
        self.triggered = []

    def notify_if_low_stock(self, product_id):
        self.triggered.append(product_id)
        return []


def make_service():
    repo = FakeProductRepo()
    alerts = FakeAlerts()
    svc = ProductService(repo=repo, sector_repo=FakeSectors(), user_repo=FakeUsers(), alerts=alerts)
    return svc, repo, alerts


def product_input(**overrides):
    data = dict(name="Widget", sku="wid-001", sector_id=1, price=9.5, stock_quantity=50, min_stock=10)
    data.update(overrides)
    return ProductInput(**data)


def test_create_stores_normalized_sku():
    svc, repo, _ = make_service()
    product = svc.create_product(7, product_input(sku="  wid-001 "))
    assert product.sku == "WID-001"
    assert repo.products[product.id].sku == "WID-001"


@pytest.mark.parametrize("second", ["WID-001", "wid-001", " Wid-001  ", "\twid-001\n"])
def test_create_rejects_sku_differing_only_in_case_or_whitespace(second):
    svc, repo, _ = make_service()
    svc.create_product(7, product_input(sku="wid-001"))
    with pytest.raises(DuplicateSKU):
        svc.create_product(7, product_input(sku=second, name="Other"))
    assert len(repo.products) == 1


def test_update_to_own_sku_recased_succeeds():
    svc, repo, _ = make_service()
    product = svc.create_product(7, product_input(sku="WID-001"))
    svc.update_product(product.id, product_input(sku=" wid-001", stock_quantity=40))
    assert repo.products[product.id].sku == "WID-001"
    assert repo.products[product.id].stock_quantity == 40


def test_update_to_other_products_sku_is_rejected_without_changes():
    svc, repo, _ = make_service()
    svc.create_product(7, product_input(sku="A-1"))
    second = svc.create_product(7, product_input(sku="B-2", name="Gadget"))
    with pytest.raises(DuplicateSKU):
        svc.update_product(second.id, product_input(sku="a-1", name="Renamed"))
    assert repo.products[second.id].sku == "B-2"
    assert repo.products[second.id].name == "Gadget"


def test_update_missing_product_raises_not_found():
    svc, _, _ = make_service()
    with pytest.raises(NotFound):
        svc.update_product(99, product_input())


def test_delete_missing_product_raises_not_found():
    svc, _, _ = make_service()
    with pytest.raises(NotFound):
        svc.delete_product(99)


def test_low_stock_create_triggers_pipeline():
    svc, _, alerts = make_service()
    product = svc.create_product(7, product_input(stock_quantity=5, min_stock=10))
    assert alerts.triggered == [product.id]


def test_healthy_create_does_not_trigger_pipeline():
    svc, _, alerts = make_service()
    svc.create_product(7, product_input(stock_quantity=11, min_stock=10))
    assert alerts.triggered == []


def test_every_low_write_triggers_not_only_transitions():
    svc, _, alerts = make_service()
    product = svc.create_product(7, product_input(stock_quantity=10, min_stock=10))
    svc.update_product(product.id, product_input(stock_quantity=3, min_stock=10))
    svc.update_product(product.id, product_input(stock_quantity=3, min_stock=10))
    assert alerts.triggered == [product.id] * 3


def test_create_requires_known_user():
    svc, _, _ = make_service()
    with pytest.raises(Unauthorized):
        svc.create_product(1234, product_input())


@pytest.mark.parametrize("overrides", [
    {"price": 0},
    {"price": -1.0},
    {"price": "12"},
    {"stock_quantity": -1},
    {"stock_quantity": None},
    {"min_stock": -5},
    {"sku": "   "},
    {"name": ""},
    {"sector_id": 42},
])
def test_invalid_input_is_rejected_before_any_write(overrides):
    svc, repo, alerts = make_service()
    with pytest.raises(ValidationError):
        svc.create_product(7, product_input(**overrides))
    assert repo.products == {}
    assert alerts.triggered == []


@pytest.mark.parametrize("field", ["price", "stock_quantity", "min_stock"])
@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_numbers_are_rejected_before_any_write(field, value):
    svc, repo, alerts = make_service()
    with pytest.raises(ValidationError) as info:
        svc.create_product(7, product_input(**{field: value}))
    assert info.value.detail == f"{field} must be numeric"
    assert repo.products == {}
    assert alerts.triggered == []


def test_list_low_stock_orders_by_stock_ascending():
    svc, _, _ = make_service()
    svc.create_product(7, product_input(sku="A", stock_quantity=8))
    svc.create_product(7, product_input(sku="B", stock_quantity=2))
    svc.create_product(7, product_input(sku="C", stock_quantity=30))
    svc.create_product(7, product_input(sku="D", stock_quantity=10))
    assert [p.sku for p in svc.list_low_stock_products()] == ["B", "A", "D"]


def test_list_skus_reports_normalized_form():
    svc, _, _ = make_service()
    svc.create_product(7, product_input(sku="x-9"))
    assert svc.list_skus() == [{"id": 1, "name": "Widget", "sku": "X-9", "normalized_sku": "X-9"}]
