"""
Repository Layer - Data Access

Repositories hold the in-memory shop data and return domain models.

Author: TM3
Date: 2025-10-17
"""
from webshop.repositories.shop_repository import ShopRepository

__all__ = ['ShopRepository']
