"""FastAPI dependency utilities."""

from fastapi import Depends

from app.application.use_cases.notifications import PushDispatcher
from app.config import Settings, get_settings
from app.infrastructure.database import get_session_factory
from app.infrastructure.notifications import (
    SubscriptionDirectory,
    WebPushDeliveryAdapter,
    WebPushSender,
)


def build_push_dispatcher(settings: Settings) -> PushDispatcher:
    """Wire the dispatcher with the SQL directory and the Web Push transport."""

    return PushDispatcher(
        settings,
        SubscriptionDirectory(get_session_factory()),
        WebPushDeliveryAdapter(settings, WebPushSender(settings)),
    )


def get_push_dispatcher(settings: Settings = Depends(get_settings)) -> PushDispatcher:
    """Return the dispatcher used by the push endpoints."""

    return build_push_dispatcher(settings)
