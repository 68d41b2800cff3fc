from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from app.core.config import settings
from app.core.database import AsyncSessionLocal, close_db, init_db
from app.core.exception_handlers import setup_exception_handlers
from app.core.logging_config import logger
from app.core.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from app.core.rate_limiter import limiter, rate_limit_exceeded_handler
from app.api.v1.router import api_router
from app.db.seed_data import seed_default_profiles
from slowapi.errors import RateLimitExceeded

PLACEHOLDER_SECRETS = {"", "CHANGE_ME", "changeme", "secret", "your-secret-key"}


async def validate_critical_config():
    """Validate critical configuration at startup - fail fast if missing"""
    errors = []

    if not settings.DATABASE_URL:
        errors.append("DATABASE_URL is not set")

    if settings.SECRET_KEY in PLACEHOLDER_SECRETS:
        errors.append("SECRET_KEY is not set or using default value")

    if settings.JWT_SECRET_KEY in PLACEHOLDER_SECRETS:
        errors.append("JWT_SECRET_KEY is not set or using default value")

    if errors:
        for err in errors:
            logger.critical(f"[Startup] CRITICAL: {err}")
        raise RuntimeError(f"Missing critical configuration: {', '.join(errors)}")

    if settings.is_production and settings.DEBUG:
        logger.warning("[Startup] WARNING: DEBUG is enabled in production")

    logger.info("[Startup] Critical configuration validated")
    return True


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown"""
    logger.info("=" * 60)
    logger.info(f"Starting {settings.APP_NAME}...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"API Version: {settings.API_VERSION}")
    logger.info("=" * 60)

    await validate_critical_config()

    await init_db()
    logger.info("[Startup] Database tables ready")

    if settings.SEED_DEFAULT_PROFILES:
        async with AsyncSessionLocal() as db:
            await seed_default_profiles(db)

    yield

    logger.info(f"Shutting down {settings.APP_NAME}...")
    await close_db()


app = FastAPI(
    title=settings.APP_NAME,
    description="Role-based tracking of candidate profiles, targets, progress and leads",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
    redirect_slashes=False  # Prevent 307 redirects that break CORS
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

# Domain errors and last-resort 500 handler
setup_exception_handlers(app)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "X-Response-Time", "Content-Disposition"],
)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "app_name": settings.APP_NAME,
        "version": "1.0.0",
        "environment": settings.ENVIRONMENT
    }


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME} API",
        "docs": "/docs",
        "api": f"/api/{settings.API_VERSION}",
    }


app.include_router(api_router, prefix=f"/api/{settings.API_VERSION}")


def run():
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run()
