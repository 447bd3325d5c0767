"""
FastAPI dependencies
"""
from fastapi import Request

from webshop.repositories.shop_repository import ShopRepository


def get_repository(request: Request) -> ShopRepository:
    """
    FastAPI dependency returning the repository owned by the app

    Usage:
        @router.get("/")
        async def list_items(repo: ShopRepository = Depends(get_repository)):
            ...
    """
    return request.app.state.repository
