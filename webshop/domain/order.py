"""
Order Domain Models

An order belongs to exactly one customer and holds its line items.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, List
from datetime import date
from decimal import Decimal


class OrderItem(BaseModel):
    """
    Order Item domain model - represents a line item in an order

    Fields:
        product_id: Product ordered
        quantity: Number of units ordered
        unit_price: Price per unit at order time
    """

    product_id: str = Field(..., alias="productId", description="Product ID")
    quantity: int = Field(1, description="Quantity ordered", ge=1)
    unit_price: Decimal = Field(Decimal('0'), alias="unitPrice", description="Price per unit", ge=0)

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    @property
    def subtotal(self) -> Decimal:
        """Line total"""
        return self.unit_price * self.quantity

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        data = self.model_dump(by_alias=True)
        data['unitPrice'] = float(data['unitPrice'])
        data['subtotal'] = float(self.subtotal)
        return data


class Order(BaseModel):
    """
    Order domain model - represents a customer order

    Fields:
        id: Order ID (unique within its owning customer)
        order_date: Date the order was placed (optional)
        status: Order status (pending, shipped, delivered, cancelled)
        items: Line items
    """

    id: str = Field(..., description="Order ID")
    order_date: Optional[date] = Field(None, alias="orderDate", description="Order date")
    status: str = Field("pending", description="Order status")
    items: List[OrderItem] = Field(default_factory=list, description="Order items")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    # Computed properties
    @property
    def item_count(self) -> int:
        """Total number of items in order"""
        return len(self.items)

    @property
    def total(self) -> Decimal:
        """Sum of all line totals"""
        return sum((item.subtotal for item in self.items), Decimal('0'))

    def apply_update(self, update: "OrderUpdate") -> "Order":
        """Copy the fields explicitly set on update onto this order, in place"""
        for field in update.model_fields_set:
            setattr(self, field, getattr(update, field))
        return self

    def to_dict(self) -> dict:
        """
        Convert to dictionary with computed fields

        Returns dict with all fields plus computed properties
        """
        data = self.model_dump(by_alias=True, exclude={'items'})

        if data.get('orderDate'):
            data['orderDate'] = data['orderDate'].isoformat()

        data['items'] = [item.to_dict() for item in self.items]
        data['itemCount'] = self.item_count
        data['total'] = float(self.total)

        return data


class OrderUpdate(BaseModel):
    """Schema for updating an existing order (only set fields are applied)"""
    order_date: Optional[date] = Field(None, alias="orderDate")
    status: Optional[str] = None
    items: Optional[List[OrderItem]] = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("status", "items")
    @classmethod
    def reject_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} may not be null")
        return value
