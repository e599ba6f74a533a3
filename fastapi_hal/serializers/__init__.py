"""Serializers for HAL resources."""

from .base import HALSerializer

__all__ = ["HALSerializer"]
