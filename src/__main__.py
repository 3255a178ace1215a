"""Run the diagnostics server with uvicorn: ``python -m src``."""

from __future__ import annotations

import argparse

import uvicorn

from src.app import create_app
from src.config import get_settings
from src.middleware import configure_structured_logging


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="LAMP diagnostics server")
    parser.add_argument("--host", default=settings.app_host, help="Bind address (APP_HOST)")
    parser.add_argument("--port", type=int, default=settings.app_port, help="Bind port (APP_PORT)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development only)")
    args = parser.parse_args(argv)

    configure_structured_logging(settings)

    if args.reload:
        uvicorn.run("src.app:app", host=args.host, port=args.port, reload=True)
        return

    uvicorn.run(create_app(settings), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
