"""
Unit tests for ShopRepository customer and order operations

Author: TM3
Date: 2025-10-17
"""
import pytest
from datetime import date
from unittest.mock import patch

from webshop.core.exceptions import EntityNotFoundError, SnapshotLoadError, StoreNotReadyError
from webshop.domain import Customer, CustomerUpdate, Order, OrderItem, OrderUpdate
from webshop.repositories.shop_repository import ShopRepository


class TestCustomerOperations:
    """Test customer CRUD"""

    def test_list_customers(self, repository):
        assert [c.id for c in repository.list_customers()] == ["Cust1", "Cust2"]

    def test_get_customer(self, repository):
        customer = repository.get_customer("Cust2")

        assert customer.full_name == "Mikko Korhonen"

    def test_get_customer_raises_when_missing(self, repository):
        with pytest.raises(EntityNotFoundError):
            repository.get_customer("X")

    def test_find_customer_returns_none_when_missing(self, repository):
        assert repository.find_customer("X") is None

    def test_add_customer(self, repository):
        customer = Customer(id="Cust3", first_name="Liisa", last_name="Mäkinen")

        assert repository.add_customer(customer) is customer
        assert repository.get_customer("Cust3") is customer

    def test_replace_customer_without_orders_keeps_orders(self, repository):
        """Test names are overwritten and orders kept when none are sent"""
        # Arrange
        existing = repository.get_customer("Cust2")

        # Act
        replaced = repository.replace_customer(
            "Cust2", CustomerUpdate(first_name="Matti", last_name="Nieminen")
        )

        # Assert
        assert replaced is existing
        assert replaced.first_name == "Matti"
        assert replaced.last_name == "Nieminen"
        assert [o.id for o in replaced.orders] == ["O1"]

    def test_replace_customer_with_orders_replaces_them(self, repository):
        update = CustomerUpdate(
            first_name="Mikko",
            last_name="Korhonen",
            orders=[Order(id="O5"), Order(id="O6")]
        )

        replaced = repository.replace_customer("Cust2", update)

        assert [o.id for o in replaced.orders] == ["O5", "O6"]

    def test_replace_customer_with_empty_orders_keeps_orders(self, repository):
        """Test an empty orders list is treated like a missing one"""
        update = CustomerUpdate(first_name="Mikko", last_name="Korhonen", orders=[])

        replaced = repository.replace_customer("Cust2", update)

        assert [o.id for o in replaced.orders] == ["O1"]

    def test_replace_customer_raises_when_missing(self, repository):
        with pytest.raises(EntityNotFoundError):
            repository.replace_customer("X", CustomerUpdate(first_name="A", last_name="B"))

    def test_remove_customer(self, repository):
        assert repository.remove_customer("Cust1") is True
        assert repository.remove_customer("Cust1") is False
        assert repository.find_customer("Cust1") is None


class TestOrderOperations:
    """Test order lookups and mutation through their customer"""

    def test_add_then_get_order(self, repository):
        """Test an order added to a customer with no orders can be fetched"""
        # Arrange
        order = Order(id="O9")

        # Act
        repository.add_order("Cust1", order)

        # Assert
        assert repository.get_order("Cust1", "O9") is order
        with pytest.raises(EntityNotFoundError) as exc_info:
            repository.get_order("Cust1", "O404")
        assert exc_info.value.entity == "Order"

    def test_list_orders(self, repository):
        assert [o.id for o in repository.list_orders("Cust2")] == ["O1"]
        assert repository.list_orders("Cust1") == []

    def test_list_orders_raises_for_missing_customer(self, repository):
        with pytest.raises(EntityNotFoundError) as exc_info:
            repository.list_orders("X")

        assert exc_info.value.entity == "Customer"

    @pytest.mark.parametrize("call", [
        lambda r: r.get_order("X", "O1"),
        lambda r: r.add_order("X", Order(id="O9")),
        lambda r: r.replace_order("X", "O1", OrderUpdate(status="cancelled")),
        lambda r: r.remove_order("X", "O1"),
    ])
    def test_order_operations_raise_for_missing_customer(self, repository, call):
        with pytest.raises(EntityNotFoundError):
            call(repository)

    def test_replace_order_updates_in_place(self, repository):
        existing = repository.get_order("Cust2", "O1")

        updated = repository.replace_order(
            "Cust2", "O1", OrderUpdate(status="cancelled", order_date=date(2025, 10, 1))
        )

        assert updated is existing
        assert updated.status == "cancelled"
        assert updated.order_date == date(2025, 10, 1)
        assert updated.item_count == 1

    def test_replace_order_items(self, repository):
        items = [OrderItem(product_id="P2", quantity=3)]

        updated = repository.replace_order("Cust2", "O1", OrderUpdate(items=items))

        assert [i.product_id for i in updated.items] == ["P2"]
        assert isinstance(updated.items[0], OrderItem)

    def test_remove_order(self, repository):
        assert repository.remove_order("Cust2", "O1") is True
        assert repository.remove_order("Cust2", "O1") is False
        assert repository.list_orders("Cust2") == []


class TestCustomerOperationsWhenNotReady:
    """Test the customer family fails the same way as the category family"""

    @pytest.mark.parametrize("call", [
        lambda r: r.list_customers(),
        lambda r: r.get_customer("Cust1"),
        lambda r: r.add_customer(Customer(id="C", first_name="A", last_name="B")),
        lambda r: r.replace_customer("Cust1", CustomerUpdate(first_name="A", last_name="B")),
        lambda r: r.remove_customer("Cust1"),
        lambda r: r.list_orders("Cust1"),
        lambda r: r.get_order("Cust1", "O1"),
        lambda r: r.add_order("Cust1", Order(id="O9")),
        lambda r: r.replace_order("Cust1", "O1", OrderUpdate(status="x")),
        lambda r: r.remove_order("Cust1", "O1"),
    ])
    def test_operation_raises_store_not_ready(self, unready_repository, call):
        with pytest.raises(StoreNotReadyError):
            call(unready_repository)

    def test_find_customer_returns_none(self, unready_repository):
        """Test the lenient lookup reports an absent customer, not an error"""
        assert unready_repository.find_customer("X") is None


class TestFromFile:
    """Test building a repository from a snapshot file"""

    def test_from_file_loads_snapshot(self, snapshot_file):
        repo = ShopRepository.from_file(snapshot_file)

        assert repo.is_ready is True
        assert repo.get_product("C1", "P1").manufacturer == "Acme Corp"
        assert repo.get_order("Cust1", "O1").order_date == date(2025, 9, 14)

    def test_from_file_missing_file_is_not_ready(self, tmp_path):
        repo = ShopRepository.from_file(tmp_path / "missing.json")

        assert repo.is_ready is False
        with pytest.raises(StoreNotReadyError):
            repo.list_categories()
        assert repo.find_customer("X") is None

    def test_from_file_malformed_file_is_not_ready(self, tmp_path):
        path = tmp_path / "shopdata.json"
        path.write_text("{not json", encoding="utf-8")

        repo = ShopRepository.from_file(path)

        assert repo.is_ready is False

    @patch('webshop.repositories.shop_repository.load_snapshot')
    def test_from_file_logs_load_failure(self, mock_load, caplog):
        """Test the loader error is logged, not raised"""
        mock_load.side_effect = SnapshotLoadError("shopdata.json", "boom")

        repo = ShopRepository.from_file("shopdata.json")

        assert repo.is_ready is False
        assert "Could not load shop data" in caplog.text
