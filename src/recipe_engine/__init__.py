"""Recipe import and ingredient reconciliation service."""

__version__ = "0.1.0"
