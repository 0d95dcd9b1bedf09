"""Console entrypoint serving the triage API through uvicorn."""

from __future__ import annotations

import uvicorn

from .config import get_settings


def main() -> None:
    """Serve ``create_app`` on the configured host and port."""

    settings = get_settings()
    uvicorn.run(
        "deadline_triage.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,
    )


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main()
