"""Persistence helpers for push subscriptions."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import true
from sqlalchemy.orm import Session

from app.domain.entities import PushEndpoint
from app.infrastructure.models import PushSubscriptionModel
from app.utils import now_in_app_naive_datetime


class PushSubscriptionRepository:
    """Read and retire :class:`PushEndpoint` records of a user."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_active_for_user(self, user_id: str) -> Sequence[PushEndpoint]:
        query = (
            self.session.query(PushSubscriptionModel)
            .filter(PushSubscriptionModel.user_id == str(user_id))
            .filter(PushSubscriptionModel.active == true())
            .order_by(PushSubscriptionModel.id)
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, user_id: str, endpoint: PushEndpoint) -> PushEndpoint:
        model = PushSubscriptionModel(
            user_id=str(user_id),
            endpoint=endpoint.address,
            p256dh=endpoint.p256dh,
            auth=endpoint.auth,
            active=True,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def deactivate_by_endpoint(self, address: str) -> int:
        """Mark subscriptions pointing at ``address`` inactive.

        Returns the number of rows that changed; already inactive rows are
        left untouched.
        """

        updated = (
            self.session.query(PushSubscriptionModel)
            .filter(PushSubscriptionModel.endpoint == address)
            .filter(PushSubscriptionModel.active == true())
            .update(
                {
                    PushSubscriptionModel.active: False,
                    PushSubscriptionModel.updated_at: now_in_app_naive_datetime(),
                },
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    @staticmethod
    def _to_entity(model: PushSubscriptionModel) -> PushEndpoint:
        return PushEndpoint(
            address=model.endpoint or "",
            p256dh=model.p256dh or "",
            auth=model.auth or "",
        )


__all__ = ["PushSubscriptionRepository"]
