"""Chart of accounts storage and services."""

__version__ = "0.1.0"
