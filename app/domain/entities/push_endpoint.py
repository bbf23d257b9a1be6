"""Domain entity describing a Web Push delivery target."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PushEndpoint:
    """A browser or device subscription registered by a recipient.

    ``address`` is the push service URL; ``p256dh`` and ``auth`` are the keys
    the browser generated when subscribing and are required to encrypt the
    message.
    """

    address: str
    p256dh: str
    auth: str

    @property
    def is_complete(self) -> bool:
        return bool(self.address and self.p256dh and self.auth)

    @property
    def key_material(self) -> dict[str, str]:
        return {"p256dh": self.p256dh, "auth": self.auth}


__all__ = ["PushEndpoint"]
