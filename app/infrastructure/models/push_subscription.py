"""SQLAlchemy model for Web Push subscriptions."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class PushSubscriptionModel(Base):
    """Browser subscription registered by a user of the client application."""

    __tablename__ = "push_subscription"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), nullable=False, index=True)
    endpoint = Column(String(768), nullable=False, unique=True)
    p256dh = Column(Text, nullable=False)
    auth = Column(String(255), nullable=False)
    active = Column(
        Boolean,
        nullable=False,
        default=True,
        server_default=expression.true(),
    )
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True, onupdate=now_in_app_naive_datetime)


__all__ = ["PushSubscriptionModel"]
