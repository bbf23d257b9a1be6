"""Utility script to send a push notification batch from the command line."""

from __future__ import annotations

import argparse
import asyncio
import json

from app.application.use_cases.notifications import InvalidRequest
from app.config import get_settings
from app.domain.entities import NotificationIntent, NotificationType
from app.infrastructure.database import dispose_engine, initialize_database
from app.interfaces.api.dependencies import build_push_dispatcher


def _parse_data_item(raw: str) -> tuple[str, str]:
    key, separator, value = raw.partition("=")
    if not separator or not key:
        raise argparse.ArgumentTypeError(f"Se esperaba clave=valor, se recibió '{raw}'")
    return key, value


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the push batch."""

    parser = argparse.ArgumentParser(
        description="Send a push notification to every active subscription of the given users.",
    )
    parser.add_argument(
        "--type",
        required=True,
        help=f"Tipo de notificación (conocidos: {', '.join(t.value for t in NotificationType)})",
    )
    parser.add_argument("--title", required=True, help="Título de la notificación")
    parser.add_argument("--body", required=True, help="Texto de la notificación")
    parser.add_argument(
        "--user",
        dest="users",
        action="append",
        default=[],
        help="Identificador del usuario destinatario (se puede repetir)",
    )
    parser.add_argument(
        "--data",
        action="append",
        type=_parse_data_item,
        default=[],
        help="Dato adicional en formato clave=valor, por ejemplo job_id=42 (se puede repetir)",
    )
    return parser.parse_args()


def main() -> None:
    """Dispatch the batch described by the command line arguments."""

    args = parse_args()
    intent = NotificationIntent(
        type=args.type, title=args.title, body=args.body, data=dict(args.data)
    )

    initialize_database()
    dispatcher = build_push_dispatcher(get_settings())
    try:
        summary = asyncio.run(dispatcher.dispatch(intent, args.users))
    except InvalidRequest as exc:
        raise SystemExit(f"No se pudo enviar la notificación: {exc}") from exc
    finally:
        dispose_engine()

    print(json.dumps(summary.to_response()))


if __name__ == "__main__":
    main()
