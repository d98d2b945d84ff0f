import logging
import log_config  # noqa: F401  logger 설정 모듈

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from common.llm import CompletionClient
from db import build_engine, build_session_factory, create_tables
from routers import blog_router, suggestion_router, system_router
from settings import Settings, settings

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def create_app(
    app_settings: Optional[Settings] = None,
    completion_client: Optional[CompletionClient] = None,
) -> FastAPI:
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(app_settings)
        create_tables(engine)
        app.state.session_factory = build_session_factory(engine)
        logger.info(f"Database ready at {app_settings.DB_PATH}")
        try:
            yield
        finally:
            engine.dispose()

    app = FastAPI(title="AI Blog API", lifespan=lifespan)
    app.state.settings = app_settings
    app.state.completion_client = completion_client or CompletionClient.from_settings(app_settings)

    if not app_settings.FRONTEND_URL:
        logger.warning("FRONTEND_URL is not defined. Defaulting to localhost:5173")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[app_settings.cors_origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(blog_router.router, prefix="/api/blogs", tags=["Blog API"])
    app.include_router(suggestion_router.router, prefix="/api", tags=["AI Suggestion API"])
    app.include_router(system_router.router, prefix="/api", tags=["System API"])

    # SPA는 API 라우터 뒤에 마운트
    if STATIC_DIR.is_dir():
        app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")

    return app


app = create_app()


def run() -> None:
    logger.info(f"Backend running on http://localhost:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
