# scoring.py
from __future__ import annotations
from typing import List, Optional, Tuple

from ..errors import InvalidMonetaryValue
from ..logging import get_logger
from ..models import Item, Receipt
from ..rules.engine import build_breakdown, score_receipt
from ..schemas import ReceiptIn, ScoreBreakdown
from ..store.repository import ReceiptStore
from ..utils.money import parse_money

logger = get_logger(__name__)


def receipt_from_payload(payload: ReceiptIn) -> Receipt:
    """
    Parse every monetary field of a submitted receipt.
    The first invalid total or price raises InvalidMonetaryValue, so a
    receipt is only ever built from fully parsed values.
    """
    parsed_total = parse_money(payload.total, "total")
    items = tuple(
        Item(
            short_description=i.short_description,
            price=i.price,
            parsed_price=parse_money(i.price, "price"),
        )
        for i in payload.items
    )
    return Receipt(
        retailer=payload.retailer,
        purchase_date=payload.purchase_date,
        purchase_time=payload.purchase_time,
        total=payload.total,
        parsed_total=parsed_total,
        items=items,
    )


class ScoringService:
    """Submit receipts and score them against the points rules."""

    def __init__(self, store: ReceiptStore, count_underscore: bool = False):
        self.store = store
        self.count_underscore = count_underscore

    def submit(self, payload: ReceiptIn) -> str:
        try:
            receipt = receipt_from_payload(payload)
        except InvalidMonetaryValue as e:
            logger.warning("Rejected receipt from %r: %s", payload.retailer, e)
            raise
        return self.store.put(receipt)

    def score(self, receipt_id: str, with_trace: bool = False) -> Tuple[int, Optional[ScoreBreakdown]]:
        receipt = self.store.get(receipt_id)
        result = score_receipt(receipt, count_underscore=self.count_underscore)
        if not with_trace:
            return result.points, None
        return result.points, build_breakdown(result)

    def list_receipts(self) -> List[Receipt]:
        return self.store.list()
