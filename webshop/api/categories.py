"""
Categories API Endpoints
Handles product categories and the products inside them

Author: TM3
Date: 2025-10-17
"""
from fastapi import APIRouter, Depends, Query
from typing import Optional

from webshop.api.deps import get_repository
from webshop.domain.category import Category, CategoryUpdate
from webshop.domain.product import Product, ProductUpdate
from webshop.repositories.shop_repository import ShopRepository

router = APIRouter()


@router.get("/")
async def list_categories(repo: ShopRepository = Depends(get_repository)):
    """Get all product categories"""
    categories = repo.list_categories()
    return {
        "status": "success",
        "count": len(categories),
        "data": [category.to_dict() for category in categories]
    }


@router.post("/", status_code=201)
async def create_category(category: Category, repo: ShopRepository = Depends(get_repository)):
    created = repo.add_category(category)
    return {"status": "success", "data": created.to_dict()}


@router.get("/{category_id}")
async def get_category(category_id: str, repo: ShopRepository = Depends(get_repository)):
    category = repo.get_category(category_id)
    return {"status": "success", "data": category.to_dict()}


@router.put("/{category_id}")
async def replace_category(
    category_id: str,
    update: CategoryUpdate,
    repo: ShopRepository = Depends(get_repository)
):
    """
    Replace a category

    The name is always replaced. Products are replaced only when the
    request body includes a products list.
    """
    category = repo.replace_category(category_id, update)
    return {"status": "success", "data": category.to_dict()}


@router.delete("/{category_id}")
async def delete_category(category_id: str, repo: ShopRepository = Depends(get_repository)):
    removed = repo.remove_category(category_id)
    return {"status": "success", "removed": removed}


@router.get("/{category_id}/products")
async def list_products(
    category_id: str,
    manufacturer: Optional[str] = Query(None, description="Filter by manufacturer (substring match)"),
    repo: ShopRepository = Depends(get_repository)
):
    """Get products in a category, optionally filtered by manufacturer"""
    products = repo.list_products(category_id, manufacturer)
    return {
        "status": "success",
        "count": len(products),
        "data": [product.to_dict() for product in products]
    }


@router.post("/{category_id}/products", status_code=201)
async def create_product(
    category_id: str,
    product: Product,
    repo: ShopRepository = Depends(get_repository)
):
    created = repo.add_product(category_id, product)
    return {"status": "success", "data": created.to_dict()}


@router.get("/{category_id}/products/{product_id}")
async def get_product(category_id: str, product_id: str, repo: ShopRepository = Depends(get_repository)):
    product = repo.get_product(category_id, product_id)
    return {"status": "success", "data": product.to_dict()}


@router.put("/{category_id}/products/{product_id}")
async def update_product(
    category_id: str,
    product_id: str,
    update: ProductUpdate,
    repo: ShopRepository = Depends(get_repository)
):
    product = repo.replace_product(category_id, product_id, update)
    return {"status": "success", "data": product.to_dict()}


@router.delete("/{category_id}/products/{product_id}")
async def delete_product(category_id: str, product_id: str, repo: ShopRepository = Depends(get_repository)):
    removed = repo.remove_product(category_id, product_id)
    return {"status": "success", "removed": removed}
