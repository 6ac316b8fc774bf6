"""
Points calculator.

Applies every rule in ``RULES`` to a receipt and sums the results.
Pure and deterministic: no I/O, no shared state.
"""
import logging

from app.schemas import Receipt
from app.scoring.rules import RULES

logger = logging.getLogger(__name__)


def score_breakdown(receipt: Receipt) -> dict[str, int]:
    """Return each rule's contribution, keyed by rule name."""
    return {name: rule(receipt) for name, rule in RULES}


def calculate_points(receipt: Receipt) -> int:
    breakdown = score_breakdown(receipt)
    points = sum(breakdown.values())
    logger.debug("Scored %s: %d %s", receipt.retailer, points, breakdown)
    return points
