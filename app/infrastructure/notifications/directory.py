"""Async access to the push subscription store used by the dispatcher."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from anyio import to_thread
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.entities import PushEndpoint
from app.infrastructure.repositories import PushSubscriptionRepository

logger = logging.getLogger(__name__)


class SubscriptionDirectory:
    """Look up and retire subscriptions without letting store errors escape.

    Every call opens its own session, runs the blocking query in a worker
    thread and closes the session before returning.
    """

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    async def list_active_endpoints(self, recipient_id: str) -> Sequence[PushEndpoint]:
        """Return the active endpoints of ``recipient_id`` or ``[]`` on failure."""

        try:
            return await to_thread.run_sync(self._list_active, recipient_id)
        except SQLAlchemyError as exc:
            logger.warning(
                "Error fetching subscriptions for user %s: %s", recipient_id, exc
            )
            return []

    async def retire(self, address: str) -> bool:
        """Mark ``address`` inactive; retiring twice is a successful no-op."""

        try:
            changed = await to_thread.run_sync(self._deactivate, address)
        except SQLAlchemyError as exc:
            logger.error("Error retiring subscription %s: %s", address, exc)
            return False
        if changed:
            logger.info("Marked subscription %s as inactive", address)
        return True

    def _list_active(self, recipient_id: str) -> Sequence[PushEndpoint]:
        session = self._session_factory()
        try:
            return PushSubscriptionRepository(session).list_active_for_user(recipient_id)
        finally:
            session.close()

    def _deactivate(self, address: str) -> int:
        session = self._session_factory()
        try:
            return PushSubscriptionRepository(session).deactivate_by_endpoint(address)
        except SQLAlchemyError:
            session.rollback()
            raise
        finally:
            session.close()


__all__ = ["SubscriptionDirectory"]
