"""A matching engine that feeds queued orders to a book on a worker thread."""

from __future__ import annotations

import copy
import threading
from collections import deque
from typing import Optional

from .order import Order
from .order_book import OrderBook


class MatchingEngine:
    """Queues orders and matches them one at a time in the background.

    Closing the engine stops the worker; orders still queued are dropped.
    """

    def __init__(self) -> None:
        self.book = OrderBook()
        self._queue: deque[Order] = deque()
        self._cond = threading.Condition()
        self._stopping = False
        self._busy = False
        self._thread = threading.Thread(
            target=self._match_loop, name="matching-engine", daemon=True
        )
        self._thread.start()

    def process_order(self, order: Order) -> None:
        """Queue a copy of the order; the caller's order is left unchanged."""
        with self._cond:
            if self._stopping:
                raise RuntimeError("matching engine is closed")
            self._queue.append(copy.copy(order))
            self._cond.notify_all()

    def _idle(self) -> bool:
        return not self._queue and not self._busy

    def wait_until_idle(self, timeout: Optional[float] = None) -> bool:
        """Wait until every queued order is matched; False on timeout or close."""
        with self._cond:
            self._cond.wait_for(lambda: self._stopping or self._idle(), timeout)
            return self._idle()

    def close(self) -> None:
        with self._cond:
            self._stopping = True
            self._cond.notify_all()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join()

    def __enter__(self) -> "MatchingEngine":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _match_loop(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._queue or self._stopping)
                if self._stopping or not self._queue:
                    return
                order = self._queue.popleft()
                self._busy = True
            try:
                self.book.match_orders(order)
            finally:
                with self._cond:
                    self._busy = False
                    self._cond.notify_all()