"""Event data vocabulary and source-header license utilities."""

__version__ = "0.1.0"
