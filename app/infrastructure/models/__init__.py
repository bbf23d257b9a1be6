"""ORM models used by the application infrastructure."""

from .push_subscription import PushSubscriptionModel

__all__ = ["PushSubscriptionModel"]
