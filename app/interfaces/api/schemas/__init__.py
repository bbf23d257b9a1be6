from .push import ErrorResponse, HealthResponse, SendPushRequest, SendPushResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "SendPushRequest",
    "SendPushResponse",
]
