"""Fan a notification out to every active endpoint of a set of recipients."""

from __future__ import annotations

import logging
from functools import partial
from typing import Any, Awaitable, Callable, Protocol, Sequence, TypeVar

import anyio

from app.config import Settings
from app.domain.entities import (
    BatchSummary,
    DeliveryOutcome,
    Expired,
    Failed,
    NotificationIntent,
    NotificationPayload,
    PushEndpoint,
)

from .aggregation import fold_outcomes, merge_summaries
from .payload import build_notification_payload

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Missing required fields: type, user_ids, title, body"

T = TypeVar("T")


class InvalidRequest(ValueError):
    """Raised when a batch lacks one of its required fields."""


class EndpointDirectory(Protocol):
    async def list_active_endpoints(self, recipient_id: str) -> Sequence[PushEndpoint]:
        ...

    async def retire(self, address: str) -> bool:
        ...


class DeliveryTransport(Protocol):
    async def deliver(
        self, endpoint: PushEndpoint, payload: NotificationPayload
    ) -> DeliveryOutcome:
        ...


def validate_batch(intent: NotificationIntent, recipient_ids: Sequence[str]) -> None:
    """Raise :class:`InvalidRequest` unless the batch can be dispatched."""

    if not (intent.type and intent.title and intent.body and recipient_ids):
        raise InvalidRequest(REQUIRED_FIELDS_MESSAGE)


def _leaf_errors(error: BaseException) -> list[BaseException]:
    if isinstance(error, BaseExceptionGroup):
        leaves: list[BaseException] = []
        for child in error.exceptions:
            leaves.extend(_leaf_errors(child))
        return leaves
    return [error]


async def run_concurrently(calls: Sequence[Callable[[], Awaitable[T]]]) -> list[T]:
    """Await every call inside one task group and return results in call order.

    The first failure cancels the calls still running; the group waits for
    them to stop before the failure is raised.
    """

    results: list[Any] = [None] * len(calls)

    async def _run(index: int, call: Callable[[], Awaitable[T]]) -> None:
        results[index] = await call()

    async with anyio.create_task_group() as task_group:
        for index, call in enumerate(calls):
            task_group.start_soon(_run, index, call)
    return results


class PushDispatcher:
    """Deliver one notification intent to many recipients.

    Recipients are handled concurrently and so are the endpoints of each
    recipient. Every recipient yields its own immutable :class:`BatchSummary`
    and the partial results are merged once all of them finish, so there are
    no shared counters to protect. An unexpected fault in any recipient
    cancels the rest of the batch before it is raised.
    """

    def __init__(
        self,
        settings: Settings,
        directory: EndpointDirectory,
        transport: DeliveryTransport,
    ) -> None:
        self._settings = settings
        self._directory = directory
        self._transport = transport

    def build_payload(self, intent: NotificationIntent) -> NotificationPayload:
        return build_notification_payload(
            intent,
            base_url=self._settings.app_url,
            icon=self._settings.notification_icon,
            badge=self._settings.notification_badge,
        )

    async def dispatch(
        self, intent: NotificationIntent, recipient_ids: Sequence[str]
    ) -> BatchSummary:
        """Send ``intent`` to ``recipient_ids`` and return the delivery counters."""

        validate_batch(intent, recipient_ids)
        payload = self.build_payload(intent)

        logger.info("Sending %s to %d user(s)", intent.type, len(recipient_ids))
        try:
            partials = await run_concurrently(
                [
                    partial(self._dispatch_to_recipient, recipient_id, payload)
                    for recipient_id in recipient_ids
                ]
            )
        except BaseExceptionGroup as group:
            first, *others = _leaf_errors(group)
            for other in others:
                logger.error("Additional fault in push batch", exc_info=other)
            raise first from None
        summary = merge_summaries(partials)
        logger.info(
            "Results: %d sent, %d expired, %d errors",
            summary.sent,
            summary.expired,
            summary.errors,
        )
        return summary

    async def _dispatch_to_recipient(
        self, recipient_id: str, payload: NotificationPayload
    ) -> BatchSummary:
        endpoints = await self._directory.list_active_endpoints(recipient_id)
        if not endpoints:
            logger.info("No active subscriptions for user %s", recipient_id)
            return BatchSummary()

        logger.info(
            "Sending to %d subscription(s) for user %s", len(endpoints), recipient_id
        )
        outcomes = await run_concurrently(
            [partial(self._transport.deliver, endpoint, payload) for endpoint in endpoints]
        )

        expired = [outcome for outcome in outcomes if isinstance(outcome, Expired)]
        if expired:
            await run_concurrently(
                [partial(self._directory.retire, outcome.endpoint.address) for outcome in expired]
            )
        for outcome in outcomes:
            if isinstance(outcome, Failed):
                logger.error(
                    "Push delivery failed for user %s: %s", recipient_id, outcome.error
                )

        return fold_outcomes(outcomes)


__all__ = [
    "DeliveryTransport",
    "EndpointDirectory",
    "InvalidRequest",
    "PushDispatcher",
    "REQUIRED_FIELDS_MESSAGE",
    "run_concurrently",
    "validate_batch",
]
