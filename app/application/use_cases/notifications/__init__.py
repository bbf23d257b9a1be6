"""Use cases for fanning push notifications out to recipients."""

from .aggregation import fold_outcomes, merge_summaries, summarize_outcome
from .deep_links import resolve_deep_link
from .dispatch import (
    DeliveryTransport,
    EndpointDirectory,
    InvalidRequest,
    PushDispatcher,
    validate_batch,
)
from .payload import build_notification_payload, get_notification_profile

__all__ = [
    "DeliveryTransport",
    "EndpointDirectory",
    "InvalidRequest",
    "PushDispatcher",
    "build_notification_payload",
    "fold_outcomes",
    "get_notification_profile",
    "merge_summaries",
    "resolve_deep_link",
    "summarize_outcome",
    "validate_batch",
]
