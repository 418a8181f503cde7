"""
QuirkNotes Backend — Server Entry Point
=========================================

Usage:
    python -m quirknotes
    quirknotes            (console script installed with the package)

Binds to BACKEND_HOST:BACKEND_PORT (default 0.0.0.0:4000).
"""

import uvicorn

from quirknotes.config import settings


def main() -> None:
    uvicorn.run(
        "quirknotes.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
