"""Command-line entry point."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .order_book import OrderBook


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start an empty order book and report it."""
    parser = argparse.ArgumentParser(prog="orderbook", description="Start an empty order book.")
    parser.parse_args(argv)
    _book = OrderBook()
    print("Order added and saved to file.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())