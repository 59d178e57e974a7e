"""ORM model exports for convenient imports elsewhere in the app."""

from currency_api.models.base import Base
from currency_api.models.currency import Currency

__all__ = [
    "Base",
    "Currency",
]
