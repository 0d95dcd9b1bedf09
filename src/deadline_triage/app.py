"""Application factory for the FastAPI service."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import PROJECT_ROOT, Settings, get_settings
from .logging_settings import parse_logging_settings
from .routers.triage import router as triage_router
from .triage import TriageService

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _configure_logging(settings: Settings) -> None:
    """Configure logging from LOG_LEVEL/LOG_FILE and the logging settings file."""
    # Load .env file first to ensure LOG_FILE is available
    load_dotenv()

    log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    settings_path = settings.logging_settings_path
    if not settings_path.is_absolute():
        settings_path = PROJECT_ROOT / settings_path
    file_settings = parse_logging_settings(settings_path)

    handlers: list[logging.Handler] = []

    log_file = os.getenv("LOG_FILE") or file_settings.log_file
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        handlers.append(file_handler)

    if file_settings.terminal_level is not None:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(file_settings.terminal_level)
        console_handler.setFormatter(
            logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT)
        )
        handlers.append(console_handler)

    logging.basicConfig(
        level=log_level,
        handlers=handlers or [logging.NullHandler()],
        force=True,  # Override any existing configuration
    )

    # Module loggers inherit this level, so "off" silences the whole package.
    engine_logger = logging.getLogger("deadline_triage")
    if file_settings.engine_level is None:
        engine_logger.setLevel(logging.CRITICAL + 1)
    else:
        engine_logger.setLevel(file_settings.engine_level)

    logging.getLogger("uvicorn").setLevel(log_level)
    logging.getLogger("uvicorn.access").setLevel(log_level)
    logging.getLogger("uvicorn.error").setLevel(log_level)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    # Configure logging first thing
    _configure_logging(settings)

    triage_service = TriageService(
        tactical_kinds=settings.tactical_kinds,
        deadline_agents=settings.deadline_agents,
        highlight_duration_ms=settings.highlight_duration_ms,
    )
    chat_provider = settings.chat_provider_config()

    app = FastAPI(
        title="Deadline Triage Backend",
        version="0.1.0",
        description="Deadline resolution and task triage for the planning canvas.",
    )

    app.state.settings = settings
    app.state.triage_service = triage_service
    app.state.chat_provider = chat_provider

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(triage_router)

    @app.get("/health", tags=["health"])
    async def healthcheck() -> dict[str, str]:
        return {
            "status": "ok",
            "chat_provider": chat_provider.provider,
            "chat_model": chat_provider.model,
        }

    return app


__all__ = ["create_app"]
