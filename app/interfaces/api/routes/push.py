"""Endpoint that fans a notification out to the subscriptions of many users."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.application.use_cases.notifications import InvalidRequest, PushDispatcher
from app.interfaces.api.dependencies import get_push_dispatcher
from app.interfaces.api.schemas import ErrorResponse, SendPushRequest, SendPushResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["push"])


@router.post(
    "/send-push",
    response_model=SendPushResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def send_push(
    request: SendPushRequest,
    dispatcher: PushDispatcher = Depends(get_push_dispatcher),
) -> SendPushResponse | JSONResponse:
    """Deliver a notification to every active subscription of ``user_ids``."""

    try:
        summary = await dispatcher.dispatch(request.to_intent(), request.recipient_ids())
    except InvalidRequest as exc:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)}
        )
    except Exception as exc:
        logger.exception("Unexpected error while dispatching push notifications")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc) or "Internal server error"},
        )

    return SendPushResponse(
        sent=summary.sent, expired=summary.expired, errors=summary.errors
    )
