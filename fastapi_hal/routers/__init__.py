"""Routers for HAL services."""

from .base import HALRouter

__all__ = ["HALRouter"]
