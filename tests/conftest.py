"""
Pytest fixtures and configuration for the Web Shop store tests

This file provides shared fixtures that can be used across all test modules.

Author: TM3
Date: 2025-10-17
"""
import json

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient

from webshop.domain import Category, Customer, Order, OrderItem, Product, ShopData
from webshop.main import create_app
from webshop.repositories.shop_repository import ShopRepository


@pytest.fixture
def sample_snapshot():
    """
    Provides a small snapshot: category C1 with an Acme and a Zenith product,
    an empty category C2, customer Cust1 with no orders and customer Cust2
    with one order
    """
    return ShopData(
        product_categories=[
            Category(
                id="C1",
                name="Tools",
                products=[
                    Product(id="P1", name="Hammer", manufacturer="Acme Corp", price=Decimal("19.90")),
                    Product(id="P2", name="Wrench", manufacturer="Zenith", price=Decimal("12.50")),
                ]
            ),
            Category(id="C2", name="Garden", products=[]),
        ],
        customers=[
            Customer(id="Cust1", first_name="Aino", last_name="Virtanen"),
            Customer(
                id="Cust2",
                first_name="Mikko",
                last_name="Korhonen",
                orders=[
                    Order(
                        id="O1",
                        status="delivered",
                        items=[OrderItem(product_id="P1", quantity=2, unit_price=Decimal("19.90"))]
                    )
                ]
            ),
        ]
    )


@pytest.fixture
def repository(sample_snapshot):
    """Provides a ready repository over the sample snapshot"""
    return ShopRepository(sample_snapshot)


@pytest.fixture
def unready_repository():
    """Provides a repository whose snapshot never loaded"""
    return ShopRepository()


@pytest.fixture
def snapshot_file(tmp_path):
    """
    Writes a snapshot JSON file in the external (camelCase) format
    and returns its path
    """
    data = {
        "productCategories": [
            {
                "id": "C1",
                "name": "Tools",
                "products": [
                    {"id": "P1", "name": "Hammer", "manufacturer": "Acme Corp", "price": 19.9}
                ]
            }
        ],
        "customers": [
            {
                "id": "Cust1",
                "firstName": "Aino",
                "lastName": "Virtanen",
                "orders": [
                    {
                        "id": "O1",
                        "orderDate": "2025-09-14",
                        "items": [{"productId": "P1", "quantity": 1, "unitPrice": 19.9}]
                    }
                ]
            }
        ]
    }
    path = tmp_path / "shopdata.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def client(repository):
    """Provides a TestClient for an app serving the sample repository"""
    return TestClient(create_app(repository=repository))


@pytest.fixture
def unready_client(unready_repository):
    """Provides a TestClient for an app whose store is not ready"""
    return TestClient(create_app(repository=unready_repository))
