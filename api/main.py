import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from auth import router as auth_router
from core import db, schema
from core.settings import Settings
from products import router as products_router

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    # A failed connect leaves the API up; store-backed routes answer 500.
    try:
        await db.init_pool(settings.database_url)
        if settings.init_schema:
            await schema.create_tables()
    except db.StoreError:
        logger.exception("db_startup_failed")
    try:
        yield
    finally:
        await db.close_pool()


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("request_rejected path=%s errors=%s", request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request.", "errors": jsonable_encoder(exc.errors())},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    if settings.uses_default_secret:
        logger.warning("jwt_secret_default in use; set JWT_SECRET")

    app = FastAPI(lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(auth_router.router, tags=["auth"])
    app.include_router(products_router.router, tags=["products"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


# Served with `uvicorn main:create_app --factory`; nothing is built at import time.
if __name__ == "__main__":
    import uvicorn

    _settings = Settings.from_env()
    uvicorn.run(create_app(_settings), host=_settings.host, port=_settings.port)
