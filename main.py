"""
Activities & Events - FastAPI Backend
Main application entry point
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
import uvicorn

from app.core.config import settings
from app.core.db import engine, Base, SessionLocal
from app.core.errors import AppError
from app.core.seed import initialize
from app.api import routes_activities, routes_events, routes_public
from app.utils.responses import app_error_response, error_response
from app.utils.security import apply_security_headers, get_client_ip, rate_limit_check

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

RATE_LIMIT_EXEMPT_PATHS = {"/health"}

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    # Create database tables
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")

    if settings.SEED_ON_STARTUP:
        db = SessionLocal()
        try:
            initialize(db, clear_first=settings.SEED_CLEAR_FIRST)
        except Exception:
            db.rollback()
            logger.error("An error occurred while seeding the database", exc_info=True)
        finally:
            db.close()

    yield
    logger.info("Application shutdown")

# Create FastAPI application
app = FastAPI(
    title="Activities & Events API",
    description="CRUD backend for activities and events with groups, people and tags",
    version="1.0.0",
    lifespan=lifespan
)

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return app_error_response(exc)

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("Rejected malformed request to %s", request.url.path)
    return error_response(
        message="Invalid request",
        error_code="bad_request",
        details=jsonable_encoder(exc.errors()),
        status_code=400
    )

@app.middleware("http")
async def rate_limit_middleware(request: Request, call_next):
    if request.url.path not in RATE_LIMIT_EXEMPT_PATHS:
        client_ip = get_client_ip(request)
        allowed, retry_after = rate_limit_check(client_ip)
        if not allowed:
            logger.warning("Rate limit exceeded for %s", client_ip)
            return error_response(
                message="Rate limit exceeded. Please try again later.",
                error_code="rate_limited",
                status_code=429,
                headers={"Retry-After": str(retry_after)}
            )
    return await call_next(request)

@app.middleware("http")
async def security_headers_middleware(request: Request, call_next):
    response = await call_next(request)
    apply_security_headers(response)
    return response

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if settings.HTTPS_REDIRECT:
    app.add_middleware(HTTPSRedirectMiddleware)

# Include routers
app.include_router(routes_public.router, tags=["public"])
app.include_router(routes_activities.router, prefix="/api/activities", tags=["activities"])
app.include_router(routes_events.router, prefix="/api/events", tags=["events"])

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
        server_header=False
    )
