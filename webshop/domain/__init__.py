"""
Domain Layer - Business Entities

Pydantic models for the web shop entities and their update schemas.

Author: TM3
Date: 2025-10-17
"""
from webshop.domain.product import Product, ProductUpdate
from webshop.domain.category import Category, CategoryUpdate
from webshop.domain.order import Order, OrderItem, OrderUpdate
from webshop.domain.customer import Customer, CustomerUpdate
from webshop.domain.shop_data import ShopData

__all__ = [
    'Product', 'ProductUpdate',
    'Category', 'CategoryUpdate',
    'Order', 'OrderItem', 'OrderUpdate',
    'Customer', 'CustomerUpdate',
    'ShopData',
]
