"""Push notification adapters for the infrastructure layer."""

from .delivery import WebPushDeliveryAdapter
from .directory import SubscriptionDirectory
from .web_push import SendResult, WebPushSender

__all__ = [
    "SendResult",
    "SubscriptionDirectory",
    "WebPushDeliveryAdapter",
    "WebPushSender",
]
