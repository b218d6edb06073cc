import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from brewers import router as brewers_router
from core import db
from core.config import Settings, load_settings
from core.errors import install_exception_handlers
from core.middleware import RequestTimeoutMiddleware
from migrations import runner as migration_runner
from recipes import router as recipes_router
from roasts import router as roasts_router
from tags import router as tags_router
from users import router as users_router

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def create_app(settings: Settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(_: FastAPI):
        # Initialize the DB pool once per process.
        await db.init_pool(settings)
        try:
            if settings.run_migrations:
                await migration_runner.run_pending(settings)
            yield
        finally:
            await db.close_pool()

    app = FastAPI(lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(RequestTimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)
    if settings.cors_permissive:
        # Any origin may call the API from the browser.
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )

    install_exception_handlers(app)

    app.include_router(roasts_router.router, tags=["roasts"])
    app.include_router(brewers_router.router, tags=["brewers"])
    app.include_router(users_router.router, tags=["users"])
    app.include_router(recipes_router.router, tags=["recipes"])
    app.include_router(tags_router.router, tags=["tags"])

    @app.get("/")
    def root() -> dict:
        return {"status": "ok"}

    return app


settings = load_settings()
configure_logging(settings.log_level)
app = create_app(settings)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
