from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from receipt_points.main import create_app
from receipt_points.models import Item, Receipt
from receipt_points.store.repository import ReceiptStore
from receipt_points.utils.money import parse_money


def build_receipt(retailer="Target", purchase_date="2022-01-02", purchase_time="13:13",
                  total="35.35", items=(("Mountain Dew 12PK", "6.49"),)) -> Receipt:
    return Receipt(
        retailer=retailer,
        purchase_date=purchase_date,
        purchase_time=purchase_time,
        total=total,
        parsed_total=parse_money(total),
        items=tuple(Item(short_description=d, price=p, parsed_price=parse_money(p)) for d, p in items),
    )


@pytest.fixture
def make_receipt():
    return build_receipt


@pytest.fixture
def store():
    return ReceiptStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


@pytest.fixture
def target_payload():
    return {
        "retailer": "Target",
        "purchaseDate": "2022-01-02",
        "purchaseTime": "13:13",
        "total": "35.35",
        "items": [
            {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
            {"shortDescription": "Emils Pizza", "price": "12.25"},
            {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
            {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
            {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
        ],
    }


@pytest.fixture
def corner_market_payload():
    return {
        "retailer": "M&M Corner Market",
        "purchaseDate": "2022-03-20",
        "purchaseTime": "14:33",
        "total": "9.00",
        "items": [
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
            {"shortDescription": "Gatorade", "price": "2.25"},
        ],
    }
