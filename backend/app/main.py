"""
FastAPI application entry point for the BoutiqueChat backend.

Public catalog reads, admin-only writes behind a bearer token, and an
image upload pass-through. Tables are created on startup.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from slowapi.errors import RateLimitExceeded
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.config import settings
from app.core.logging_config import setup_logging
from app.core.rate_limit import limiter
from app.database import engine, init_db
from app.routers import auth, categories, products, uploads
from app.routers import settings as settings_router

setup_logging(
    level=settings.LOG_LEVEL,
    enable_file=settings.ENABLE_FILE_LOGGING,
    log_dir=settings.LOG_DIR,
    prefix="boutique_api",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(f"Catalog database ready ({engine.url.render_as_string(hide_password=True)})")
    yield
    logger.info("BoutiqueChat API stopped")


app = FastAPI(
    title="BoutiqueChat API",
    description="Catalog, settings and admin API for the BoutiqueChat storefront",
    version="1.0.0",
    lifespan=lifespan,
)
app.state.limiter = limiter


@app.exception_handler(RateLimitExceeded)
async def login_rate_limit_handler(request: Request, exc: RateLimitExceeded):
    client = request.client.host if request.client else "unknown"
    logger.warning(f"Rate limit hit on {request.url.path} from {client}")
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={"detail": f"Too many attempts ({exc.detail}). Please try again later."},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)

# Register routers
app.include_router(categories.router, prefix="/api/categories", tags=["categories"])
app.include_router(products.router, prefix="/api/products", tags=["products"])
app.include_router(settings_router.router, prefix="/api/settings", tags=["settings"])
app.include_router(uploads.router, prefix="/api/uploads", tags=["uploads"])
app.include_router(auth.router, prefix="/api/auth", tags=["auth"])


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal Server Error"},
    )


@app.get("/")
async def root():
    """Root endpoint for health check."""
    return {"message": "BoutiqueChat API", "status": "running"}


@app.get("/health")
async def health():
    """Liveness plus a database round trip."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "database": "unavailable"},
        )
    return {"status": "healthy", "database": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )
