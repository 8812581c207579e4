"""Orders and the enumerations that describe them."""

from __future__ import annotations

import itertools
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class Strategy(Enum):
    """Kind of participant that sent an order."""

    QUANT_LONG_TERM = 0
    HIGH_FREQUENCY = 1
    HEDGE_FUND = 2
    ALGORITHMIC_TRADING = 3
    INVESTMENT_BANK = 4
    PENSION_FUND = 5
    INSURANCE_COMPANY = 6
    OTHER = 7


class OrderType(Enum):
    MARKET = 0
    LIMIT = 1


class OrderSide(Enum):
    BUY = 0
    SELL = 1


class OrderStatus(Enum):
    PENDING = 0
    FILLED = 1
    CANCELLED = 2
    REJECTED = 3


# Identifiers are seeded from the clock and strictly increase within a process.
_ids = itertools.count(time.time_ns() + 1)


def _next_id() -> int:
    return next(_ids)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Order:
    """A single order; a new order is pending and gets a unique id."""

    strategy: Strategy = Strategy.OTHER
    quantity: int = 0
    price: float = 0.0
    side: OrderSide = OrderSide.BUY
    order_type: OrderType = OrderType.MARKET
    status: OrderStatus = field(default=OrderStatus.PENDING, init=False)
    order_id: int = field(default_factory=_next_id, init=False)
    created_at: datetime = field(default_factory=_now, init=False, compare=False)