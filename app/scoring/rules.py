"""
Deterministic scoring rules.

Each rule maps a receipt to a non-negative integer and is evaluated
independently of the others. A field that cannot be parsed makes its rule
score 0; no rule ever raises on bad input.
"""
from __future__ import annotations

import logging
import math
import re
from decimal import Context, Decimal, localcontext
from typing import Callable

from app.schemas import Receipt

logger = logging.getLogger(__name__)

ALNUM_RE = re.compile(r"[A-Za-z0-9]")
INT_RE = re.compile(r"[+-]?[0-9]+")
# Plain ASCII decimal, at most 18 digits either side of the point
AMOUNT_RE = re.compile(r"[+-]?(?:[0-9]{1,18}(?:\.[0-9]{0,18})?|\.[0-9]{1,18})")
# Wide enough that every rule's arithmetic on a parsed amount is exact
AMOUNT_CONTEXT = Context(prec=50)

ROUND_TOTAL_POINTS = 50
QUARTER_TOTAL_POINTS = 25
QUARTERS_PER_DOLLAR = 4
ITEM_PAIR_POINTS = 5
DESCRIPTION_LENGTH_FACTOR = 3
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------

def parse_amount(text: str) -> Decimal | None:
    """Parse a plain decimal amount exactly; ``None`` for anything else.

    Exponents, underscores, surrounding whitespace and non-ASCII digits are
    all rejected.
    """
    if not AMOUNT_RE.fullmatch(text):
        return None
    return Decimal(text)


def parse_int(text: str) -> int | None:
    if not INT_RE.fullmatch(text):
        return None
    return int(text)


def purchase_day(date_text: str) -> int | None:
    """Day-of-month from a ``YYYY-MM-DD`` string."""
    parts = date_text.split("-")
    if len(parts) != 3:
        return None
    return parse_int(parts[2])


def purchase_hour_minute(time_text: str) -> tuple[int, int] | None:
    parts = time_text.split(":")
    if len(parts) != 2:
        return None
    hour, minute = parse_int(parts[0]), parse_int(parts[1])
    if hour is None or minute is None:
        return None
    return hour, minute


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------

def score_retailer_name(receipt: Receipt) -> int:
    """One point per ASCII letter or digit in the retailer name."""
    return len(ALNUM_RE.findall(receipt.retailer))


def score_round_total(receipt: Receipt) -> int:
    """50 points if the total has no cents."""
    total = parse_amount(receipt.total)
    if total is None:
        logger.debug("Unparseable total %r", receipt.total)
        return 0
    with localcontext(AMOUNT_CONTEXT):
        is_round = total == total.to_integral_value()
    return ROUND_TOTAL_POINTS if is_round else 0


def score_quarter_total(receipt: Receipt) -> int:
    """25 points if the total is a multiple of 0.25."""
    total = parse_amount(receipt.total)
    if total is None:
        return 0
    with localcontext(AMOUNT_CONTEXT):
        quarters = total * QUARTERS_PER_DOLLAR
        is_quarter = quarters == quarters.to_integral_value()
    return QUARTER_TOTAL_POINTS if is_quarter else 0


def score_item_pairs(receipt: Receipt) -> int:
    """5 points for every two items."""
    return (len(receipt.items) // 2) * ITEM_PAIR_POINTS


def score_item_descriptions(receipt: Receipt) -> int:
    """``ceil(price * 0.2)`` points per item whose trimmed description is a multiple of 3 UTF-8 bytes long."""
    points = 0
    for item in receipt.items:
        if len(item.short_description.strip().encode("utf-8")) % DESCRIPTION_LENGTH_FACTOR != 0:
            continue
        price = parse_amount(item.price)
        if price is None:
            logger.debug("Unparseable price %r for item %r", item.price, item.short_description)
            continue
        try:
            with localcontext(AMOUNT_CONTEXT):
                points += math.ceil(price * DESCRIPTION_PRICE_MULTIPLIER)
        except ArithmeticError:
            logger.debug("Price %r out of range for item %r", item.price, item.short_description)
    return points


def score_odd_day(receipt: Receipt) -> int:
    """6 points if the purchase day is odd."""
    day = purchase_day(receipt.purchase_date)
    if day is None:
        logger.debug("Unparseable purchase date %r", receipt.purchase_date)
        return 0
    return ODD_DAY_POINTS if day % 2 != 0 else 0


def score_afternoon_purchase(receipt: Receipt) -> int:
    """10 points for purchases from 14:00 up to (not including) 16:00."""
    parsed = purchase_hour_minute(receipt.purchase_time)
    if parsed is None:
        logger.debug("Unparseable purchase time %r", receipt.purchase_time)
        return 0
    hour, minute = parsed
    if hour == 14 or (hour == 15 and minute < 60):
        return AFTERNOON_POINTS
    return 0


# Evaluation order; the sum does not depend on it.
RULES: list[tuple[str, Callable[[Receipt], int]]] = [
    ("retailer_name", score_retailer_name),
    ("round_total", score_round_total),
    ("quarter_total", score_quarter_total),
    ("item_pairs", score_item_pairs),
    ("item_descriptions", score_item_descriptions),
    ("odd_day", score_odd_day),
    ("afternoon_purchase", score_afternoon_purchase),
]
