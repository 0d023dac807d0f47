"""Array techniques, positional operations, searches and a bounded stack."""

__version__ = "0.1.0"
__all__ = ["arrays", "operations", "searching", "stack"]