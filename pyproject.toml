[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orderbook"
version = "0.1.0"
description = "An in-memory limit order book with price-time priority matching and a threaded matching engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["order book", "matching engine", "trading", "limit order", "market order"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
internal-order-book = "orderbook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["orderbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
