"""In-memory limit order book with price-time priority matching and a threaded matching engine."""

__version__ = "0.1.0"
__all__ = ["order", "order_book", "matching_engine", "cli"]