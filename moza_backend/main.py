"""
Main FastAPI application entry point.
Sets up the API, middleware, error handling and routes.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from moza_backend.core.config import settings
from moza_backend.core.exceptions import BankingError, PersistenceError, Unauthenticated
from moza_backend.core.logging_config import get_logger, setup_logging
from moza_backend.database import engine, Base
from moza_backend.api import accounts, auth, cards, private, transfers, users
import moza_backend.models  # noqa: F401  registers tables on Base.metadata

setup_logging()
logger = get_logger(__name__)

# Create database tables
Base.metadata.create_all(bind=engine)

# Initialize FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=settings.DESCRIPTION,
    docs_url="/docs",  # Swagger UI
    redoc_url="/redoc"  # ReDoc UI
)

# CORS middleware (allows frontend to call API)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BankingError)
async def banking_error_handler(request: Request, exc: BankingError):
    """
    Render domain errors as {"detail": message} with their status code.
    """
    if isinstance(exc, PersistenceError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)

    headers = None
    if isinstance(exc, Unauthenticated):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers
    )


@app.get("/")
def root():
    """
    Root endpoint - service banner.
    """
    return {
        "message": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "running",
        "docs": "/docs",
        "endpoints": {
            "auth": f"{settings.API_PREFIX}/auth",
            "accounts": f"{settings.API_PREFIX}/banking/accounts",
            "cards": f"{settings.API_PREFIX}/banking/cards",
            "transfer": f"{settings.API_PREFIX}/banking/transfer"
        }
    }


@app.get("/health")
def health_check():
    """
    Health check endpoint for monitoring.
    """
    return {
        "status": "healthy",
        "database": "connected"
    }


@app.get(settings.API_PREFIX + "/")
def hello():
    """
    API status endpoint.
    """
    return {"status": "success", "message": "API is running"}


# Include API routers
app.include_router(auth.router, prefix=settings.API_PREFIX)
app.include_router(users.router, prefix=settings.API_PREFIX)
app.include_router(private.router, prefix=settings.API_PREFIX)
app.include_router(accounts.router, prefix=settings.API_PREFIX)
app.include_router(cards.router, prefix=settings.API_PREFIX)
app.include_router(transfers.router, prefix=settings.API_PREFIX)
