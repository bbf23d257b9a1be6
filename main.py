import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.application.use_cases.notifications.dispatch import REQUIRED_FIELDS_MESSAGE
from app.interfaces.api.routes import register_routes
from app.infrastructure.database import dispose_engine, initialize_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicializa la base de datos al arrancar y libera los recursos al cerrar."""

    initialize_database()
    yield
    dispose_engine()


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info("Rejected malformed push request: %s", exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": REQUIRED_FIELDS_MESSAGE},
    )


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = "Method not allowed"
    else:
        message = exc.detail
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


def create_app() -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI."""

    app = FastAPI(lifespan=lifespan)

    # Las peticiones llegan desde la PWA y desde funciones de otros dominios.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)

    register_routes(app)
    return app


app = create_app()
