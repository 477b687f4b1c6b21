"""Domain records for submitted receipts."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Tuple


@dataclass(frozen=True)
class Item:
    short_description: str
    price: str                  # as submitted
    parsed_price: Decimal


@dataclass(frozen=True)
class Receipt:
    retailer: str
    purchase_date: str          # YYYY-MM-DD
    purchase_time: str          # HH:MM, 24h
    total: str                  # as submitted
    parsed_total: Decimal
    items: Tuple[Item, ...] = field(default_factory=tuple)
    id: str | None = None       # assigned by the store

    def with_id(self, receipt_id: str) -> Receipt:
        if self.id is not None:
            raise ValueError(f"receipt already has id {self.id!r}")
        return replace(self, id=receipt_id)
