"""Fold delivery outcomes into batch counters."""

from __future__ import annotations

from functools import reduce
from typing import Iterable

from app.domain.entities import (
    BatchSummary,
    Delivered,
    DeliveryOutcome,
    Expired,
    Failed,
)

_SENT = BatchSummary(sent=1)
_EXPIRED = BatchSummary(expired=1)
_ERROR = BatchSummary(errors=1)


def summarize_outcome(outcome: DeliveryOutcome) -> BatchSummary:
    """Return the single-delivery summary for ``outcome``."""

    if isinstance(outcome, Delivered):
        return _SENT
    if isinstance(outcome, Expired):
        return _EXPIRED
    if isinstance(outcome, Failed):
        return _ERROR
    raise TypeError(f"Unsupported delivery outcome: {outcome!r}")


def merge_summaries(summaries: Iterable[BatchSummary]) -> BatchSummary:
    return reduce(BatchSummary.merge, summaries, BatchSummary())


def fold_outcomes(outcomes: Iterable[DeliveryOutcome]) -> BatchSummary:
    """Reduce ``outcomes`` into a summary; the order of the items is irrelevant."""

    return merge_summaries(summarize_outcome(outcome) for outcome in outcomes)


__all__ = ["fold_outcomes", "merge_summaries", "summarize_outcome"]
