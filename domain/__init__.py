"""
Domain layer - Business entities, models, schemas, and mappers.
"""

from domain import models, schemas

__all__ = ["models", "schemas"]
