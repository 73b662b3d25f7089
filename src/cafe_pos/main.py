import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api import auth, health
from .api.routes.items import router as items_router
from .api.routes.orders import router as orders_router
from .config import settings
from .db.session import init_models
from .exceptions import CafePosError, ReferenceNotFound
from .utils.logging import configure_logging

logger = structlog.get_logger(__name__)


async def cafe_pos_error_handler(request: Request, exc: CafePosError):
    content = {"error": exc.code}
    if isinstance(exc, ReferenceNotFound):
        content["item_id"] = exc.item_id
    return JSONResponse(status_code=exc.status_code, content=content)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"error": "invalid_body"})


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Cafe POS")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CafePosError, cafe_pos_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Подключаем роуты
    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(items_router)
    app.include_router(orders_router)

    @app.on_event("startup")
    async def on_startup():
        if settings.CREATE_SCHEMA:
            await init_models()
        logger.info("application_started", database=settings.DATABASE_URL.split("://", 1)[0])

    @app.on_event("shutdown")
    async def on_shutdown():
        logger.info("application_stopped")

    return app


app = create_app()


def run():
    uvicorn.run("cafe_pos.main:app", host=settings.HOST, port=settings.PORT)
