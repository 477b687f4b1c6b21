# receipt_points/rules/ruleset.py
from __future__ import annotations

import re
from decimal import Decimal, ROUND_CEILING, localcontext
from functools import partial
from typing import Callable, NamedTuple, Tuple

from ..models import Receipt

# -----------------------------
# Tunables
# -----------------------------
ROUND_TOTAL_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
POINTS_PER_ITEM_PAIR = 5
DESCRIPTION_MULTIPLE = 3
DESCRIPTION_PRICE_FACTOR = Decimal("0.2")
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
AFTERNOON_HOURS = (14, 15)

_DAY_RE = re.compile(r"[-/]([0-9]{1,2})$")
_TIME_RE = re.compile(r"([0-9]{1,2}):([0-9]{2})")


class RuleResult(NamedTuple):
    points: int
    notes: Tuple[str, ...] = ()


def _wide_mul(a: Decimal, b: Decimal) -> Decimal:
    """Exact product of two decimals, whatever their digit count."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(a.as_tuple().digits) + len(b.as_tuple().digits))
        return a * b

def _is_whole(value: Decimal) -> bool:
    return value == value.to_integral_value()

def _is_alnum(ch: str, count_underscore: bool) -> bool:
    if ch == "_":
        return count_underscore
    return ch.isascii() and ch.isalnum()

# -----------------------------
# Rules
# -----------------------------
def retailer_name_points(receipt: Receipt, count_underscore: bool = False) -> RuleResult:
    """One point per letter or digit in the retailer name."""
    count = sum(1 for ch in receipt.retailer if _is_alnum(ch, count_underscore))
    return RuleResult(count, (f"Retailer name has {count} alphanumeric characters, adding {count} points",))

def round_total_points(receipt: Receipt) -> RuleResult:
    if not _is_whole(receipt.parsed_total):
        return RuleResult(0)
    return RuleResult(ROUND_TOTAL_POINTS, (f"Total is a round dollar amount, adding {ROUND_TOTAL_POINTS} points",))

def quarter_multiple_points(receipt: Receipt) -> RuleResult:
    if not _is_whole(_wide_mul(receipt.parsed_total, Decimal(4))):
        return RuleResult(0)
    return RuleResult(QUARTER_MULTIPLE_POINTS, (f"Total is a multiple of 0.25, adding {QUARTER_MULTIPLE_POINTS} points",))

def item_count_points(receipt: Receipt) -> RuleResult:
    n = len(receipt.items)
    points = (n // 2) * POINTS_PER_ITEM_PAIR
    return RuleResult(points, (f"There are {n} items, adding {points} points",))

def description_length_points(receipt: Receipt) -> RuleResult:
    """
    For every item whose trimmed description length is a multiple of 3,
    add price * 0.2 rounded up to the next whole point.
    """
    total = 0
    notes = []
    for item in receipt.items:
        desc = item.short_description.strip()
        if len(desc) % DESCRIPTION_MULTIPLE:
            continue
        points = int(_wide_mul(item.parsed_price, DESCRIPTION_PRICE_FACTOR).to_integral_value(rounding=ROUND_CEILING))
        total += points
        notes.append(f"'{desc}' length {len(desc)} is a multiple of {DESCRIPTION_MULTIPLE}, adding {points} points")
    return RuleResult(total, tuple(notes))

def purchase_day_of_month(purchase_date: str) -> int | None:
    m = _DAY_RE.search(purchase_date)
    return int(m.group(1)) if m else None

def odd_day_points(receipt: Receipt) -> RuleResult:
    day = purchase_day_of_month(receipt.purchase_date)
    if day is None or day % 2 == 0:
        return RuleResult(0)
    return RuleResult(ODD_DAY_POINTS, (f"Purchase day {day} is odd, adding {ODD_DAY_POINTS} points",))

def purchase_hour(purchase_time: str) -> int | None:
    m = _TIME_RE.fullmatch(purchase_time)
    if not m:
        return None
    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        return None
    return hour

def afternoon_points(receipt: Receipt) -> RuleResult:
    hour = purchase_hour(receipt.purchase_time)
    if hour not in AFTERNOON_HOURS:
        return RuleResult(0)
    return RuleResult(AFTERNOON_POINTS, (f"Purchase was between 2pm and 4pm, adding {AFTERNOON_POINTS} points",))

Rule = Callable[[Receipt], RuleResult]

def ruleset(count_underscore: bool = False) -> Tuple[Tuple[str, Rule], ...]:
    """Rules keyed by breakdown field, in the order rationale is reported."""
    return (
        ("alphanumeric", partial(retailer_name_points, count_underscore=count_underscore)),
        ("roundTotal", round_total_points),
        ("multipleTotal", quarter_multiple_points),
        ("numberOfItems", item_count_points),
        ("descriptionMultiple", description_length_points),
        ("oddDay", odd_day_points),
        ("purchaseTime", afternoon_points),
    )
