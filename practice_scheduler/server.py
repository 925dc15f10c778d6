"""Run the API under Uvicorn.

Usage:
    practice-scheduler
    # or
    python -m practice_scheduler.server
"""

import uvicorn

from practice_scheduler.config import get_settings


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "practice_scheduler.main:app",
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    run()
