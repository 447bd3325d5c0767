"""
Shop data snapshot: everything the store holds, as read from shopdata.json.
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import List

from webshop.domain.category import Category
from webshop.domain.customer import Customer


class ShopData(BaseModel):
    product_categories: List[Category] = Field(default_factory=list, alias="productCategories")
    customers: List[Customer] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)
