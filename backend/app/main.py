# app/main.py
import asyncio
import logging
import os
from contextlib import asynccontextmanager

import stripe
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

# Routers
from app.routes.admin import admin_router
from app.routes.auth import auth_router
from app.routes.favorites import favorites_router
from app.routes.lessons import lessons_router
from app.routes.payments import payments_router
from app.routes.reports import reports_router
from app.routes.users import users_router

# Error Handlers
from lifelessons.core.error_handlers import (
    generic_exception_handler,
    http_exception_handler,
    upstream_exception_handler,
    validation_exception_handler,
)
from lifelessons.core.config import settings
from lifelessons.core.log_config import setup_logging
from lifelessons.db.database import create_client, ensure_indexes

logger = logging.getLogger(__name__)


def create_app(db=None) -> FastAPI:
    """
    Build the API. ``db`` is the database handle every route receives;
    when omitted a Motor client is opened from settings at startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = None
        if db is None:
            client = create_client()
            app.state.db = client[settings.DB_NAME]
        else:
            app.state.db = db

        try:
            # 5-second timeout so a dead database doesn't block boot
            await asyncio.wait_for(ensure_indexes(app.state.db), timeout=5)
            logger.info("MongoDB connected successfully.")
        except Exception as e:
            logger.error("MongoDB connection failed: %s", e)

        yield

        if client is not None:
            client.close()

    app = FastAPI(title="Digital Life Lessons API", lifespan=lifespan)

    # ------------------------
    # CORS
    # ------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ------------------------
    # Routes
    # ------------------------
    app.include_router(auth_router, prefix="/auth")
    app.include_router(users_router)
    app.include_router(lessons_router)
    app.include_router(reports_router)
    app.include_router(favorites_router)
    app.include_router(payments_router)
    app.include_router(admin_router)

    # ------------------------
    # Exception handlers
    # ------------------------
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(PyMongoError, upstream_exception_handler)
    app.add_exception_handler(stripe.StripeError, upstream_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # ------------------------
    # Health & root
    # ------------------------
    @app.get("/")
    async def root():
        return {"message": "Digital Life Lessons Server is Active"}

    @app.get("/healthz")
    async def healthz():
        return {"status": "ok"}

    return app


setup_logging()
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", settings.PORT)))
