"""Aggregated counters reported at the end of a push batch."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BatchSummary:
    """Number of deliveries per outcome across a batch."""

    sent: int = 0
    expired: int = 0
    errors: int = 0

    @property
    def total(self) -> int:
        return self.sent + self.expired + self.errors

    def merge(self, other: "BatchSummary") -> "BatchSummary":
        """Return the sum of both summaries."""

        return BatchSummary(
            sent=self.sent + other.sent,
            expired=self.expired + other.expired,
            errors=self.errors + other.errors,
        )

    __add__ = merge

    def to_response(self) -> dict[str, object]:
        return {
            "success": True,
            "sent": self.sent,
            "expired": self.expired,
            "errors": self.errors,
        }


__all__ = ["BatchSummary"]
