"""
Domain layer - Cookbook entries, resolution results, schemas, and enums.
"""

from domain import enums, models, schemas

__all__ = ["enums", "models", "schemas"]
