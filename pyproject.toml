[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orderbook_types"
version = "0.1.0"
description = "Value types for a tick-based limit orderbook: 256-bit coins, bank send messages, orders, orderbook pairs and tick state."
requires-python = ">=3.10"
dependencies = []
keywords = ["orderbook", "limit-order", "exchange", "tick", "trading"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[tool.hatch.build.targets.wheel]
packages = ["orderbook_types"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
