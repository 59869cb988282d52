"""Server Entry Point — run the SiteList API under uvicorn.

Usage:
    sitelist-api                     # console script
    uvicorn app.main:app --port 8080 # equivalent, default settings
"""

import uvicorn

from app.config import Settings, get_settings
from app.main import create_app


def serve(settings: Settings | None = None) -> None:
    """Build the app from ``settings`` and serve it until interrupted."""
    settings = settings or get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    serve()
