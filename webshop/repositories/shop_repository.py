"""
Shop Repository - In-memory Data Access for the Web Shop

Holds the two top-level collections (product categories and customers)
loaded from a snapshot and serves CRUD operations against them. All
mutations are memory-only.

A repository built without a snapshot is not ready: every operation
except the lenient find_* lookups raises StoreNotReadyError.

Author: TM3
Date: 2025-10-17
"""
import logging
from pathlib import Path
from typing import List, Optional, Union

from webshop.core.exceptions import (
    EntityNotFoundError,
    SnapshotLoadError,
    StoreNotReadyError,
)
from webshop.domain.category import Category, CategoryUpdate
from webshop.domain.customer import Customer, CustomerUpdate
from webshop.domain.order import Order, OrderUpdate
from webshop.domain.product import Product, ProductUpdate
from webshop.domain.shop_data import ShopData
from webshop.loaders.snapshot_loader import load_snapshot

logger = logging.getLogger(__name__)


def _remove_first(items: list, entity_id: str) -> bool:
    for index, item in enumerate(items):
        if item.id == entity_id:
            del items[index]
            return True
    return False


class ShopRepository:
    """
    Repository for categories, products, customers and orders

    Lookups scan in insertion order and return the first match.
    Inserts never check for duplicate ids.
    """

    def __init__(self, snapshot: Optional[ShopData] = None):
        self._categories: Optional[List[Category]] = None
        self._customers: Optional[List[Customer]] = None

        if snapshot is not None:
            self._categories = snapshot.product_categories
            self._customers = snapshot.customers

    @classmethod
    def from_file(cls, path: Optional[Union[str, Path]] = None) -> "ShopRepository":
        """
        Build a repository from a snapshot file

        A failed load is logged and yields a repository that is not ready;
        the loader error is not re-raised.

        Args:
            path: Snapshot JSON file (defaults to the packaged shopdata.json)

        Returns:
            ShopRepository, ready if the snapshot loaded
        """
        try:
            snapshot = load_snapshot(path)
        except SnapshotLoadError:
            logger.exception("Could not load shop data, store is not ready")
            return cls()

        logger.info(
            f"Loaded shop data: {len(snapshot.product_categories)} categories, "
            f"{len(snapshot.customers)} customers"
        )
        return cls(snapshot)

    @property
    def is_ready(self) -> bool:
        return self._categories is not None and self._customers is not None

    def _require_categories(self, operation: str) -> List[Category]:
        if self._categories is None:
            raise StoreNotReadyError(operation, "Could not get categories")
        return self._categories

    def _require_customers(self, operation: str) -> List[Customer]:
        if self._customers is None:
            raise StoreNotReadyError(operation, "Could not get customers")
        return self._customers

    # ------------------------------------------------------------------
    # Categories
    # ------------------------------------------------------------------

    def list_categories(self) -> List[Category]:
        return list(self._require_categories("list_categories"))

    def find_category(self, category_id: str) -> Optional[Category]:
        """
        Find category by ID

        Returns:
            Category or None if not found or the store is not ready
        """
        if self._categories is None:
            return None
        return next((c for c in self._categories if c.id == category_id), None)

    def get_category(self, category_id: str) -> Category:
        """
        Get category by ID

        Raises:
            StoreNotReadyError: If no snapshot is loaded
            EntityNotFoundError: If no category has this id
        """
        categories = self._require_categories("get_category")
        category = next((c for c in categories if c.id == category_id), None)
        if category is None:
            raise EntityNotFoundError("Category", category_id)
        return category

    def add_category(self, category: Category) -> Category:
        self._require_categories("add_category").append(category)
        return category

    def replace_category(self, category_id: str, update: CategoryUpdate) -> Category:
        """
        Replace a category's name and, if supplied, its products

        The existing category object is updated in place and returned.
        """
        category = self.get_category(category_id)
        category.name = update.name

        # Missing or empty products leave the current ones in place
        if update.products:
            category.products = list(update.products)

        return category

    def remove_category(self, category_id: str) -> bool:
        """Remove the first category with this id; False if there was none"""
        return _remove_first(self._require_categories("remove_category"), category_id)

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def list_products(self, category_id: str, manufacturer: Optional[str] = None) -> List[Product]:
        """
        Get products in a category, optionally filtered by manufacturer

        Args:
            category_id: Category to list
            manufacturer: Case-sensitive substring the manufacturer must
                contain; None or "" returns every product

        Returns:
            Matching products in insertion order
        """
        category = self.get_category(category_id)
        if not manufacturer:
            return list(category.products)
        return [p for p in category.products if manufacturer in p.manufacturer]

    def get_product(self, category_id: str, product_id: str) -> Product:
        category = self.get_category(category_id)
        product = category.find_product(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)
        return product

    def add_product(self, category_id: str, product: Product) -> Product:
        category = self.get_category(category_id)
        return category.add_product(product)

    def replace_product(self, category_id: str, product_id: str, update: ProductUpdate) -> Product:
        """Update an existing product in place and return it"""
        product = self.get_product(category_id, product_id)
        return product.apply_update(update)

    def remove_product(self, category_id: str, product_id: str) -> bool:
        category = self.get_category(category_id)
        return category.remove_product(product_id)

    # ------------------------------------------------------------------
    # Customers
    # ------------------------------------------------------------------

    def list_customers(self) -> List[Customer]:
        return list(self._require_customers("list_customers"))

    def find_customer(self, customer_id: str) -> Optional[Customer]:
        """
        Find customer by ID

        Returns:
            Customer or None if not found or the store is not ready
        """
        if self._customers is None:
            return None
        return next((c for c in self._customers if c.id == customer_id), None)

    def get_customer(self, customer_id: str) -> Customer:
        """
        Get customer by ID

        Raises:
            StoreNotReadyError: If no snapshot is loaded
            EntityNotFoundError: If no customer has this id
        """
        customers = self._require_customers("get_customer")
        customer = next((c for c in customers if c.id == customer_id), None)
        if customer is None:
            raise EntityNotFoundError("Customer", customer_id)
        return customer

    def add_customer(self, customer: Customer) -> Customer:
        self._require_customers("add_customer").append(customer)
        return customer

    def replace_customer(self, customer_id: str, update: CustomerUpdate) -> Customer:
        """
        Replace a customer's details and, if supplied, their orders

        The existing customer object is updated in place and returned.
        """
        customer = self.get_customer(customer_id)
        customer.first_name = update.first_name
        customer.last_name = update.last_name
        if 'email' in update.model_fields_set:
            customer.email = update.email

        # Missing or empty orders leave the current ones in place
        if update.orders:
            customer.orders = list(update.orders)

        return customer

    def remove_customer(self, customer_id: str) -> bool:
        return _remove_first(self._require_customers("remove_customer"), customer_id)

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    def list_orders(self, customer_id: str) -> List[Order]:
        return list(self.get_customer(customer_id).orders)

    def get_order(self, customer_id: str, order_id: str) -> Order:
        customer = self.get_customer(customer_id)
        order = customer.find_order(order_id)
        if order is None:
            raise EntityNotFoundError("Order", order_id)
        return order

    def add_order(self, customer_id: str, order: Order) -> Order:
        customer = self.get_customer(customer_id)
        return customer.add_order(order)

    def replace_order(self, customer_id: str, order_id: str, update: OrderUpdate) -> Order:
        """Update an existing order in place and return it"""
        order = self.get_order(customer_id, order_id)
        return order.apply_update(update)

    def remove_order(self, customer_id: str, order_id: str) -> bool:
        customer = self.get_customer(customer_id)
        return customer.remove_order(order_id)
