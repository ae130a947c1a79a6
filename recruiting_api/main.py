"""
FastAPI application entry point.

- Mounts all routers under /api
- Adds CORS for the configured origins
- Turns request validation and database errors into the error envelope
- Auto-creates database tables on startup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from recruiting_api.config import settings
from recruiting_api.database import Base, engine
from recruiting_api.domain import messages
from recruiting_api.routers import addresses, candidates, companies, job_openings, lookups, relations, reports
from recruiting_api.routers.common import failure

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create database tables on startup (if they don't exist yet)."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))
    yield


app = FastAPI(
    title=settings.APP_TITLE,
    description="Companies, candidates, job openings and candidate scoring",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handlers
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and path parameters answer 400 with the usual envelope."""
    errors = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    return failure(request, errors, 400)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return failure(request, [messages.UNEXPECTED_ERROR.format(exc)], 500)


# Mount all routers under /api
app.include_router(companies.router, prefix="/api", tags=["companies"])
app.include_router(candidates.router, prefix="/api", tags=["candidates"])
app.include_router(addresses.router, prefix="/api", tags=["addresses"])
app.include_router(lookups.router, prefix="/api", tags=["lookups"])
app.include_router(job_openings.router, prefix="/api", tags=["job openings"])
app.include_router(relations.router, prefix="/api", tags=["relations"])
app.include_router(reports.router, prefix="/api", tags=["reports"])


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "message": f"{settings.APP_TITLE} is running"}
