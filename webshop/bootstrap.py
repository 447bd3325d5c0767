"""
Composition root: builds the shop repository from settings.

The application owns the repository instance and hands it to whatever
needs it; nothing here is cached at module level.
"""
from typing import Optional

from webshop.core.config import Settings, settings as default_settings
from webshop.repositories.shop_repository import ShopRepository


def build_repository(settings: Optional[Settings] = None) -> ShopRepository:
    """Load the configured snapshot into a new repository"""
    settings = settings or default_settings
    return ShopRepository.from_file(settings.SHOPDATA_PATH)
