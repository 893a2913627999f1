import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from concessionaria.config import settings
from concessionaria.database import create_tables, engine, safe_database_url
from concessionaria.logging_config import setup_logging
from concessionaria.routers.vehicles import router as vehicles_router
from concessionaria.utils.exceptions import register_exception_handlers
from concessionaria.utils.response import success_response

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    if settings.create_tables:
        await create_tables()
    logger.info("Record store ready at %s", safe_database_url())
    yield
    await engine.dispose()


app = FastAPI(
    title="Concessionária API",
    description="API REST do estoque de veículos da concessionária",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(vehicles_router, prefix="/api")


@app.get("/api/test")
async def api_test():
    return success_response(
        message="API funcionando!",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


# Mounted last so API routes win; anything it cannot serve falls to the route list
if os.path.isdir(settings.frontend_dir):
    app.mount("/", StaticFiles(directory=settings.frontend_dir, html=True), name="frontend")
else:
    logger.warning("Frontend directory %s not found, static files disabled", settings.frontend_dir)


def run() -> None:
    import uvicorn

    setup_logging(settings.log_level)
    logger.info("Listening on http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
