"""
Product Domain Model

Represents a product entity in the web shop catalog.
A product always belongs to exactly one category.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional
from decimal import Decimal


class Product(BaseModel):
    """
    Product domain model - represents a product in a category

    Fields:
        id: Product ID (unique within its owning category)
        name: Product name
        manufacturer: Manufacturer name, used by the manufacturer filter
        price: Selling price
        description: Product description (optional)
    """

    id: str = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    manufacturer: str = Field("", description="Manufacturer name")
    price: Decimal = Field(Decimal('0'), description="Selling price", ge=0)
    description: Optional[str] = Field(None, description="Product description")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    def apply_update(self, update: "ProductUpdate") -> "Product":
        """
        Copy the fields explicitly set on update onto this product

        The product keeps its identity: the same object is mutated and
        returned, so references held by the owning category stay valid.
        """
        for field in update.model_fields_set:
            setattr(self, field, getattr(update, field))
        return self

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        data = self.model_dump(by_alias=True)

        # Convert Decimal to float for JSON compatibility
        if data.get('price') is not None:
            data['price'] = float(data['price'])

        return data


class ProductUpdate(BaseModel):
    """Schema for updating an existing product (only set fields are applied)"""
    name: Optional[str] = None
    manufacturer: Optional[str] = None
    price: Optional[Decimal] = Field(None, ge=0)
    description: Optional[str] = None

    @field_validator("name", "manufacturer", "price")
    @classmethod
    def reject_null(cls, value, info):
        # Leave the field out to keep it; null is not a valid value
        if value is None:
            raise ValueError(f"{info.field_name} may not be null")
        return value
