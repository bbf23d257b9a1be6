"""Outcomes of a single push delivery attempt."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .push_endpoint import PushEndpoint


@dataclass(frozen=True)
class Delivered:
    """The push service accepted the message."""

    endpoint: PushEndpoint


@dataclass(frozen=True)
class Expired:
    """The push service reported the subscription as gone."""

    endpoint: PushEndpoint


@dataclass(frozen=True)
class Failed:
    """Delivery failed for any other reason (network, auth, payload...)."""

    endpoint: PushEndpoint
    error: str


DeliveryOutcome = Union[Delivered, Expired, Failed]


__all__ = ["Delivered", "DeliveryOutcome", "Expired", "Failed"]
