"""Aggregate application use cases."""

from .notifications import InvalidRequest, PushDispatcher

__all__ = [
    "InvalidRequest",
    "PushDispatcher",
]
