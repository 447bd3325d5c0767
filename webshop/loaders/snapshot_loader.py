"""
Snapshot Loader

Reads the shop data JSON file and validates it into a ShopData snapshot.

Author: TM3
Date: 2025-10-17
"""
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from webshop.core.exceptions import SnapshotLoadError
from webshop.domain.shop_data import ShopData

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
SNAPSHOT_FILENAME = "shopdata.json"


def default_snapshot_path() -> Path:
    """Path of the shopdata.json shipped with the package"""
    return DATA_DIR / SNAPSHOT_FILENAME


def load_snapshot(path: Optional[Union[str, Path]] = None) -> ShopData:
    """
    Load and validate a shop data snapshot

    Args:
        path: JSON file to read (defaults to the packaged shopdata.json)

    Returns:
        ShopData with categories and customers in file order

    Raises:
        SnapshotLoadError: If the file is missing, unreadable or malformed
    """
    snapshot_path = Path(path) if path is not None else default_snapshot_path()

    try:
        raw = snapshot_path.read_text(encoding="utf-8")
    except OSError as e:
        raise SnapshotLoadError(str(snapshot_path), f"Could not read {snapshot_path}: {e}") from e

    try:
        return ShopData.model_validate_json(raw)
    except ValidationError as e:
        raise SnapshotLoadError(
            str(snapshot_path),
            f"Invalid shop data in {snapshot_path}: {e.error_count()} error(s)"
        ) from e
