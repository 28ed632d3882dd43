from fastapi import FastAPI
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables before settings are read elsewhere
load_dotenv()

from ministry_fit.core.logging_config import setup_logging  # noqa: E402
from ministry_fit.core.settings import settings  # noqa: E402
from ministry_fit.core.question_bank import QUESTION_BANK  # noqa: E402
from ministry_fit.core.ministries import MINISTRY_CATALOG  # noqa: E402
from ministry_fit.routes import assessment, health  # noqa: E402

# Set up logging first
logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("=" * 50)
    logger.info("Ministry Fit API starting up")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"CORS origins: {settings.cors_origins}")
    logger.info(f"Question bank: {len(QUESTION_BANK)} questions, {len(MINISTRY_CATALOG)} ministries")
    logger.info("=" * 50)
    yield
    logger.info("Ministry Fit API shutting down gracefully")


app = FastAPI(
    title="Ministry Fit API",
    description="Spiritual gifts, DISC, literacy and skill scoring with ministry recommendations",
    version=settings.app_version,
    docs_url="/docs" if settings.docs_enabled else None,
    redoc_url="/redoc" if settings.docs_enabled else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_origins != ["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(health.router, tags=["Health"])
app.include_router(assessment.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "message": "Ministry Fit API",
        "version": settings.app_version,
        "environment": settings.environment,
        "docs_url": "/docs" if settings.docs_enabled else None,
        "health_check": "/health",
        "status": "running",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8000,
        log_level="info" if settings.is_development else "warning",
    )
