"""API routes package"""

from . import entries, summary, parse, health

__all__ = ["entries", "summary", "parse", "health"]
