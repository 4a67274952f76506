"""Services for checker integration."""

from .checker import CheckerService

__all__ = ["CheckerService"]
