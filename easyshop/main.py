# easyshop/main.py
from contextlib import asynccontextmanager
import logging

from fastapi.middleware.cors import CORSMiddleware
from fastapi import FastAPI

from easyshop.core.config import get_settings
from easyshop.core.errors import register_exception_handlers
from easyshop.database import create_db_and_tables

# Import models so SQLModel metadata is populated before create_all()
from easyshop.models import user as _user_models  # noqa: F401
from easyshop.models import profile as _profile_models  # noqa: F401
from easyshop.models import category as _category_models  # noqa: F401
from easyshop.models import product as _product_models  # noqa: F401
from easyshop.models import cart as _cart_models  # noqa: F401


# Routers
from easyshop.routers.categories import router as categories_router
from easyshop.routers.products import router as products_router
from easyshop.routers.cart import router as cart_router
from easyshop.routers.profile import router as profile_router

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Verify DB connectivity and create tables.

    Shutdown:
      - No special cleanup needed for sync engine.
    """
    logger.info("Startup: connecting to database...")
    try:
        create_db_and_tables()
        logger.info("Startup: DB connection OK, tables verified.")
    except Exception as e:
        logger.error(f"Startup: DB connection FAILED: {e}")
        raise
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(categories_router, prefix=settings.API_PREFIX)
app.include_router(products_router, prefix=settings.API_PREFIX)
app.include_router(cart_router, prefix=settings.API_PREFIX)
app.include_router(profile_router, prefix=settings.API_PREFIX)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "easyshop-backend"}
