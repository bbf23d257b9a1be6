"""Pydantic models describing the push batch endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.domain.entities import NotificationIntent


class SendPushRequest(BaseModel):
    """Batch submitted by the client application.

    Every field is optional at the schema level so a missing one is reported
    with the same message the dispatcher uses for empty values.
    """

    model_config = ConfigDict(populate_by_name=True)

    type: str | None = Field(default=None, description="Tipo de notificación")
    user_ids: list[str | int] | None = Field(
        default=None,
        validation_alias=AliasChoices("user_ids", "recipient_ids", "recipientIds"),
        description="Usuarios destinatarios",
    )
    title: str | None = None
    body: str | None = None
    data: dict[str, Any] | None = None

    def to_intent(self) -> NotificationIntent:
        return NotificationIntent(
            type=self.type or "",
            title=self.title or "",
            body=self.body or "",
            data=self.data or {},
        )

    def recipient_ids(self) -> list[str]:
        return [str(user_id) for user_id in self.user_ids or []]


class SendPushResponse(BaseModel):
    """Delivery counters returned once the batch has been processed."""

    success: bool = True
    sent: int
    expired: int
    errors: int


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    message: str
    method: str
    timestamp: str


__all__ = ["ErrorResponse", "HealthResponse", "SendPushRequest", "SendPushResponse"]
