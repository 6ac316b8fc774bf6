"""
Boundary operations used by the request layer.
"""
import logging

from app.schemas import Receipt
from app.scoring import calculate_points
from app.store import BaseReceiptStore

logger = logging.getLogger(__name__)


def register_receipt(store: BaseReceiptStore, receipt: Receipt) -> str:
    """Store a decoded receipt and return its new identifier."""
    logger.info("Register: retailer=%s  items=%d", receipt.retailer, len(receipt.items))
    return store.put(receipt)


def get_points(store: BaseReceiptStore, receipt_id: str) -> int:
    """Score the receipt registered under ``receipt_id``.

    Raises ``ReceiptNotFoundError`` for an unknown identifier.
    """
    receipt = store.get(receipt_id)
    points = calculate_points(receipt)
    logger.info("Receipt %s scored %d points", receipt_id, points)
    return points
