"""Root conftest — shared test configuration."""

import os

# Pin settings so a developer .env never changes expected prices
os.environ.setdefault("STANDARD_PRICE", "20")
os.environ.setdefault("SPECIAL_PRICE", "15")
os.environ.setdefault("CURRENCY", "EUR")
os.environ.setdefault("LOG_FORMAT", "text")
