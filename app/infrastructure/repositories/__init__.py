"""Repository implementations for infrastructure layer."""

from .push_subscription_repository import PushSubscriptionRepository

__all__ = ["PushSubscriptionRepository"]
