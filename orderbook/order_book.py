"""A price-level order book with FIFO matching."""

from __future__ import annotations

import copy
from collections import deque

from .order import Order, OrderSide, OrderType


class OrderBook:
    """Bids and asks kept as FIFO queues per price level."""

    def __init__(self) -> None:
        self._bids: dict[float, deque[Order]] = {}
        self._asks: dict[float, deque[Order]] = {}

    def _levels(self, side: OrderSide) -> dict[float, deque[Order]]:
        return self._bids if side is OrderSide.BUY else self._asks

    def add_order(self, order: Order) -> None:
        """Rest a copy of the order at its price level."""
        levels = self._levels(order.side)
        levels.setdefault(order.price, deque()).append(copy.copy(order))

    def remove_order(self, order: Order) -> None:
        """Remove the resting order with the same id, if it is there."""
        if order.side is OrderSide.BUY and order.price not in self._bids:
            # A buy with no bid level at its price is looked up among the asks.
            levels = self._asks
        else:
            levels = self._levels(order.side)
        queue = levels.get(order.price)
        if queue is None:
            return
        found = next((o for o in queue if o.order_id == order.order_id), None)
        if found is not None:
            queue.remove(found)
        if not queue:
            del levels[order.price]

    def update_order(self, order: Order) -> None:
        """Replace the resting version of the order with this one."""
        self.remove_order(order)
        self.add_order(order)

    def cancel_order(self, order: Order) -> None:
        self.remove_order(order)

    def best_bid(self) -> float:
        if not self._bids:
            raise LookupError("No bids available")
        return max(self._bids)

    def best_ask(self) -> float:
        if not self._asks:
            raise LookupError("No asks available")
        return min(self._asks)

    def bids_at(self, price: float) -> list[Order]:
        """Copies of the bids resting at a price, oldest first."""
        return [copy.copy(o) for o in self._bids.get(price, ())]

    def asks_at(self, price: float) -> list[Order]:
        """Copies of the asks resting at a price, oldest first."""
        return [copy.copy(o) for o in self._asks.get(price, ())]

    def match_orders(self, incoming: Order) -> int:
        """Fill the incoming order against the opposite side.

        The incoming order's quantity is reduced by what trades; an unfilled
        limit order then rests in the book. Returns the quantity traded.
        """
        if incoming.side is OrderSide.BUY:
            levels = self._asks
            prices = sorted(levels)

            def blocked(price: float) -> bool:
                return incoming.price < price

        else:
            levels = self._bids
            prices = sorted(levels, reverse=True)

            def blocked(price: float) -> bool:
                return incoming.price > price

        is_limit = incoming.order_type is OrderType.LIMIT
        total = 0
        for price in prices:
            if incoming.quantity <= 0:
                break
            if is_limit and blocked(price):
                break
            queue = levels[price]
            while queue and incoming.quantity > 0:
                resting = queue[0]
                traded = min(incoming.quantity, resting.quantity)
                incoming.quantity -= traded
                resting.quantity -= traded
                total += traded
                if resting.quantity == 0:
                    queue.popleft()
            if not queue:
                del levels[price]

        if incoming.quantity > 0 and is_limit:
            self.add_order(incoming)
        return total