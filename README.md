# orderbook

An in-memory limit order book with price-time priority matching. It also has
a matching engine that feeds orders to a book from a background thread.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Orders

`orderbook.order` defines `Order` and the enumerations that describe it.

```python
from orderbook.order import Order, OrderSide, OrderStatus, OrderType, Strategy

order = Order(Strategy.HIGH_FREQUENCY, 100, 50.25, OrderSide.BUY, OrderType.LIMIT)
order.quantity          # 100
order.order_type        # OrderType.LIMIT
order.status            # OrderStatus.PENDING
order.order_id          # unique, increasing identifier assigned at creation
order.created_at        # timezone-aware UTC datetime
```

`Order` is a mutable dataclass. The constructor takes these fields in order:
`strategy`, `quantity`, `price`, `side` and `order_type`. Their defaults are
`Strategy.OTHER`, `0`, `0.0`, `OrderSide.BUY` and `OrderType.MARKET`.
`status`, `order_id` and `created_at` are set by the class. You can assign to
any field afterwards. Quantities and prices are not validated, so zero and
negative values are accepted.

The enumerations are:

- `Strategy` names who sent the order: `QUANT_LONG_TERM`, `HIGH_FREQUENCY`,
  `HEDGE_FUND`, `ALGORITHMIC_TRADING`, `INVESTMENT_BANK`, `PENSION_FUND`,
  `INSURANCE_COMPANY` or `OTHER`.
- `OrderSide` is `BUY` or `SELL`.
- `OrderType` is `MARKET` or `LIMIT`.
- `OrderStatus` is `PENDING`, `FILLED`, `CANCELLED` or `REJECTED`.

## The order book

`orderbook.order_book.OrderBook` keeps bids and asks as FIFO queues, one queue
per price level.

```python
from orderbook.order_book import OrderBook

book = OrderBook()
book.add_order(Order(Strategy.OTHER, 150, 51.0, OrderSide.SELL, OrderType.LIMIT))
book.best_ask()         # 51.0
book.asks_at(51.0)      # list of the orders resting at 51.0, oldest first

market_buy = Order(Strategy.OTHER, 100, 0.0, OrderSide.BUY, OrderType.MARKET)
book.match_orders(market_buy)   # returns 100, the quantity traded
market_buy.quantity     # 0
book.asks_at(51.0)[0].quantity  # 50 left resting
```

- `add_order` rests a copy of the order at its price. Changing the order later
  does not change the book.
- `best_bid()` returns the highest bid price and `best_ask()` the lowest ask
  price. Either one raises `LookupError` when its side of the book is empty.
- `bids_at(price)` and `asks_at(price)` return copies of the orders resting at
  that exact price. They return an empty list when there are none.
- `match_orders(incoming)` fills the incoming order against the opposite side:
  - Fills go best price first, and oldest order first within a price.
  - It reduces the quantity of the incoming order and of each resting order it
    trades with.
  - A resting order that reaches zero is removed, and so is a price level with
    no orders left.
  - A limit order stops at its limit price. Whatever is left of it rests on the
    book.
  - A market order trades as far as the book allows, and what is left is not
    kept.
  - The return value is the total quantity traded.
  - Order statuses are not changed.
- `remove_order` and `cancel_order` take out the resting order that has the
  same `order_id`, at the given order's side and price. If no such order is
  resting, they do nothing.
- `update_order` removes the resting version of the order and adds the given
  one in its place. The updated order goes to the back of its price level.

## The matching engine

`orderbook.matching_engine.MatchingEngine` queues orders and matches them one
at a time on a worker thread. The matching is done against its own
`OrderBook`, which is available as `engine.book`. The engine is a context
manager, and leaving the block stops the worker.

```python
from orderbook.matching_engine import MatchingEngine

with MatchingEngine() as engine:
    engine.process_order(Order(Strategy.OTHER, 150, 51.0, OrderSide.SELL, OrderType.LIMIT))
    engine.process_order(Order(Strategy.OTHER, 100, 0.0, OrderSide.BUY, OrderType.MARKET))
    engine.wait_until_idle(1.0)      # True once every queued order is matched
    engine.book.best_ask()           # 51.0
```

- `process_order` queues a copy of the order, so the caller's order is left
  unchanged. It may be called from any number of threads. Once the engine is
  closed it raises `RuntimeError`.
- `wait_until_idle(timeout)` blocks until the queue is empty and no order is
  being matched. It returns `False` if the timeout passes or the engine is
  closed first.
- `close()` stops the worker and waits for it to finish. Orders still queued
  at that point are dropped.

## Command line

```
internal-order-book
```

The same entry point can be started with `python -m orderbook.cli`. It creates
an empty order book, prints a status line and exits with status 0. It takes no
options other than `--help`.

## What this package does not do

- Everything is kept in memory; nothing is saved.
- The command line does not take orders and does not show the book.
- Matching returns only the quantity traded. No trade or fill records are
  produced, and order statuses are left as they were.