"""
Category Domain Model

A product category owns an ordered list of products.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List

from webshop.domain.product import Product


class Category(BaseModel):
    """
    Category domain model - a named group of products

    Fields:
        id: Category ID (unique among categories)
        name: Display name
        products: Products in insertion order
    """

    id: str = Field(..., description="Category ID")
    name: str = Field(..., description="Category display name")
    products: List[Product] = Field(default_factory=list, description="Products in this category")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    @property
    def product_count(self) -> int:
        """Number of products in the category"""
        return len(self.products)

    def find_product(self, product_id: str) -> Optional[Product]:
        """First product with the given id, or None"""
        return next((p for p in self.products if p.id == product_id), None)

    def add_product(self, product: Product) -> Product:
        """Append a product (duplicate ids are not rejected)"""
        self.products.append(product)
        return product

    def remove_product(self, product_id: str) -> bool:
        """Remove the first product with the given id"""
        for index, product in enumerate(self.products):
            if product.id == product_id:
                del self.products[index]
                return True
        return False

    def to_dict(self) -> dict:
        """Convert to dictionary with products serialized"""
        data = self.model_dump(by_alias=True, exclude={'products'})
        data['products'] = [product.to_dict() for product in self.products]
        data['productCount'] = self.product_count
        return data


class CategoryUpdate(BaseModel):
    """
    Schema for replacing a category

    The name is always overwritten. Products are replaced only when the
    caller supplies a non-empty list; leaving it out or sending an empty
    list keeps the existing products.
    """
    name: str
    products: Optional[List[Product]] = None
