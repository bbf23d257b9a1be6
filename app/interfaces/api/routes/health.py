from fastapi import APIRouter, Request

from app.interfaces.api.schemas import HealthResponse
from app.utils import now_in_app_timezone

router = APIRouter(prefix="/api", tags=["health"])


@router.api_route("/test", methods=["GET", "POST"], response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    return HealthResponse(
        message="Backend is working!",
        method=request.method,
        timestamp=now_in_app_timezone().isoformat(),
    )
