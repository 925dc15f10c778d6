import logging

from fastapi import FastAPI

from practice_scheduler.config import get_settings
from practice_scheduler.controllers.events import router as events_router
from practice_scheduler.controllers.health import router as health_router
from practice_scheduler.errors import register_exception_handlers
from practice_scheduler.lifespan import lifespan
from practice_scheduler.middleware import HTTPLogMiddleware, PermissiveCORSMiddleware

settings = get_settings()

logging.basicConfig(
    level=settings.logging.level,
    format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
)


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Practice Scheduler API", version="1.0.0", lifespan=lifespan)

    if settings.debug.request:
        logging.getLogger("practice_scheduler.http").setLevel(logging.DEBUG)
        app.add_middleware(HTTPLogMiddleware)

    # Added last so it wraps everything, including the request logger.
    app.add_middleware(PermissiveCORSMiddleware, headers=settings.cors.headers)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(events_router)
    return app


app = create_app()
