"""Loyalty points calculation for submitted receipts.

``score`` adds up seven independent rules. A field that fails to parse
makes only its own rule award zero; the failure is logged and recorded in
the rule's ``detail`` so ``score_breakdown`` can explain the result.
"""

import logging
import math
from fractions import Fraction
from typing import Optional

from src.model.PointsModel import PointsBreakdown
from src.model.ReceiptModel import Receipt
from src.points.parsing import FieldParseError, parse_amount, parse_day, parse_hour_minute

logger = logging.getLogger(__name__)

ROUND_TOTAL_POINTS = 50
QUARTER_TOTAL_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
DESCRIPTION_LENGTH_FACTOR = 3
DESCRIPTION_PRICE_MULTIPLIER = Fraction(1, 5)


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _retailer_points(receipt: Receipt, breakdown: PointsBreakdown) -> None:
    count = sum(1 for char in receipt.retailer if _is_ascii_alnum(char))
    breakdown.add("retailer", count, f"retailer name has {count} alphanumeric characters")


def _parse_total(receipt: Receipt) -> Optional[Fraction]:
    try:
        return parse_amount(receipt.total, "total")
    except FieldParseError as e:
        logger.warning("Skipping total rules: %s", e)
        return None


def _round_total_points(total: Optional[Fraction], breakdown: PointsBreakdown) -> None:
    if total is None:
        breakdown.add("round_total", 0, "total could not be parsed")
    elif total.denominator == 1:
        breakdown.add("round_total", ROUND_TOTAL_POINTS, "total is a round dollar amount")
    else:
        breakdown.add("round_total", 0, "total has cents")


def _quarter_total_points(total: Optional[Fraction], breakdown: PointsBreakdown) -> None:
    if total is None:
        breakdown.add("quarter_total", 0, "total could not be parsed")
        return

    scaled = total * 100
    cents = round(scaled)
    if scaled == cents and cents % 25 == 0:
        breakdown.add("quarter_total", QUARTER_TOTAL_POINTS, "total is a multiple of 0.25")
    else:
        breakdown.add("quarter_total", 0, "total is not a multiple of 0.25")


def _item_pair_points(receipt: Receipt, breakdown: PointsBreakdown) -> None:
    pairs = len(receipt.items) // 2
    breakdown.add("item_pairs", pairs * ITEM_PAIR_POINTS, f"{pairs} pairs @ {ITEM_PAIR_POINTS} points each")


def _description_points(receipt: Receipt, breakdown: PointsBreakdown) -> None:
    points = 0
    notes = []
    for index, item in enumerate(receipt.items):
        description = item.short_description.strip()
        if len(description) % DESCRIPTION_LENGTH_FACTOR != 0:
            continue

        try:
            price = parse_amount(item.price, "price")
        except FieldParseError as e:
            logger.warning("Skipping description bonus for item %d: %s", index, e)
            notes.append(f"item {index}: price could not be parsed")
            continue
        if price < 0:
            logger.warning("Skipping description bonus for item %d: negative price %r", index, item.price)
            notes.append(f"item {index}: negative price")
            continue

        bonus = math.ceil(price * DESCRIPTION_PRICE_MULTIPLIER)
        points += bonus
        notes.append(f"{description!r} is {len(description)} characters, price {item.price} earns {bonus}")

    breakdown.add("item_descriptions", points, "; ".join(notes))


def _odd_day_points(receipt: Receipt, breakdown: PointsBreakdown) -> None:
    try:
        day = parse_day(receipt.purchase_date)
    except FieldParseError as e:
        logger.warning("Skipping purchase day rule: %s", e)
        breakdown.add("odd_day", 0, "purchase date could not be parsed")
        return

    if day % 2:
        breakdown.add("odd_day", ODD_DAY_POINTS, f"purchase day {day} is odd")
    else:
        breakdown.add("odd_day", 0, f"purchase day {day} is even")


def _afternoon_points(receipt: Receipt, breakdown: PointsBreakdown) -> None:
    try:
        hour, minute = parse_hour_minute(receipt.purchase_time)
    except FieldParseError as e:
        logger.warning("Skipping purchase time rule: %s", e)
        breakdown.add("afternoon", 0, "purchase time could not be parsed")
        return

    # strictly after 14:00 and strictly before 16:00
    if (hour == 14 and minute > 0) or hour == 15:
        breakdown.add("afternoon", AFTERNOON_POINTS, f"purchase time {hour:02d}:{minute:02d} is between 2pm and 4pm")
    else:
        breakdown.add("afternoon", 0, f"purchase time {hour:02d}:{minute:02d} is outside 2pm-4pm")


def score_breakdown(receipt: Receipt) -> PointsBreakdown:
    breakdown = PointsBreakdown()
    _retailer_points(receipt, breakdown)

    total = _parse_total(receipt)
    _round_total_points(total, breakdown)
    _quarter_total_points(total, breakdown)

    _item_pair_points(receipt, breakdown)
    _description_points(receipt, breakdown)
    _odd_day_points(receipt, breakdown)
    _afternoon_points(receipt, breakdown)
    return breakdown


def score(receipt: Receipt) -> int:
    breakdown = score_breakdown(receipt)
    for result in breakdown.rules:
        logger.debug("%d points - %s: %s", result.points, result.rule, result.detail)
    logger.debug("%d points total", breakdown.total)
    return breakdown.total
