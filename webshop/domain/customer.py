"""
Customer Domain Model

A customer owns an ordered list of orders.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List

from webshop.domain.order import Order


class Customer(BaseModel):
    """
    Customer domain model

    Fields:
        id: Customer ID (unique among customers)
        first_name: First name
        last_name: Last name
        email: Contact email (optional)
        orders: Orders in insertion order
    """

    id: str = Field(..., description="Customer ID")
    first_name: str = Field(..., alias="firstName", description="First name")
    last_name: str = Field(..., alias="lastName", description="Last name")
    email: Optional[str] = Field(None, description="Customer email")
    orders: List[Order] = Field(default_factory=list, description="Customer orders")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def find_order(self, order_id: str) -> Optional[Order]:
        """First order with the given id, or None"""
        return next((o for o in self.orders if o.id == order_id), None)

    def add_order(self, order: Order) -> Order:
        """Append an order (duplicate ids are not rejected)"""
        self.orders.append(order)
        return order

    def remove_order(self, order_id: str) -> bool:
        """Remove the first order with the given id"""
        for index, order in enumerate(self.orders):
            if order.id == order_id:
                del self.orders[index]
                return True
        return False

    def to_dict(self) -> dict:
        data = self.model_dump(by_alias=True, exclude={'orders'})
        data['fullName'] = self.full_name
        data['orders'] = [order.to_dict() for order in self.orders]
        return data


class CustomerUpdate(BaseModel):
    """
    Schema for replacing a customer

    Names are always overwritten. Orders are replaced only when the caller
    supplies a non-empty list; leaving it out or sending an empty list
    keeps the existing orders.
    """
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: Optional[str] = None
    orders: Optional[List[Order]] = None

    model_config = ConfigDict(populate_by_name=True)
