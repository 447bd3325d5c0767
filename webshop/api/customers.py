"""
Customers API Endpoints
Handles customers and their orders

Author: TM3
Date: 2025-10-17
"""
from fastapi import APIRouter, Depends

from webshop.api.deps import get_repository
from webshop.domain.customer import Customer, CustomerUpdate
from webshop.domain.order import Order, OrderUpdate
from webshop.repositories.shop_repository import ShopRepository

router = APIRouter()


@router.get("/")
async def list_customers(repo: ShopRepository = Depends(get_repository)):
    """Get all customers with their orders"""
    customers = repo.list_customers()
    return {
        "status": "success",
        "count": len(customers),
        "data": [customer.to_dict() for customer in customers]
    }


@router.post("/", status_code=201)
async def create_customer(customer: Customer, repo: ShopRepository = Depends(get_repository)):
    created = repo.add_customer(customer)
    return {"status": "success", "data": created.to_dict()}


@router.get("/{customer_id}")
async def get_customer(customer_id: str, repo: ShopRepository = Depends(get_repository)):
    customer = repo.get_customer(customer_id)
    return {"status": "success", "data": customer.to_dict()}


@router.put("/{customer_id}")
async def replace_customer(
    customer_id: str,
    update: CustomerUpdate,
    repo: ShopRepository = Depends(get_repository)
):
    """
    Replace a customer

    Names are always replaced. Orders are replaced only when the request
    body includes an orders list.
    """
    customer = repo.replace_customer(customer_id, update)
    return {"status": "success", "data": customer.to_dict()}


@router.delete("/{customer_id}")
async def delete_customer(customer_id: str, repo: ShopRepository = Depends(get_repository)):
    removed = repo.remove_customer(customer_id)
    return {"status": "success", "removed": removed}


@router.get("/{customer_id}/orders")
async def list_orders(customer_id: str, repo: ShopRepository = Depends(get_repository)):
    orders = repo.list_orders(customer_id)
    return {
        "status": "success",
        "count": len(orders),
        "data": [order.to_dict() for order in orders]
    }


@router.post("/{customer_id}/orders", status_code=201)
async def create_order(customer_id: str, order: Order, repo: ShopRepository = Depends(get_repository)):
    created = repo.add_order(customer_id, order)
    return {"status": "success", "data": created.to_dict()}


@router.get("/{customer_id}/orders/{order_id}")
async def get_order(customer_id: str, order_id: str, repo: ShopRepository = Depends(get_repository)):
    order = repo.get_order(customer_id, order_id)
    return {"status": "success", "data": order.to_dict()}


@router.put("/{customer_id}/orders/{order_id}")
async def update_order(
    customer_id: str,
    order_id: str,
    update: OrderUpdate,
    repo: ShopRepository = Depends(get_repository)
):
    order = repo.replace_order(customer_id, order_id, update)
    return {"status": "success", "data": order.to_dict()}


@router.delete("/{customer_id}/orders/{order_id}")
async def delete_order(customer_id: str, order_id: str, repo: ShopRepository = Depends(get_repository)):
    removed = repo.remove_order(customer_id, order_id)
    return {"status": "success", "removed": removed}
