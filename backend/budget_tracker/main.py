import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import api_router
from .api.errors import RequestDataError, json_safe, validation_message_for
from .config import load_settings
from .storage import open_storage, close_storage

logger = logging.getLogger(__name__)

settings = load_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    open_storage(settings)
    yield
    # Cleanup on shutdown
    close_storage()


app = FastAPI(
    title="Budget Tracker",
    description="Monthly budget categories, expenses and income recaps",
    version="0.1.0",
    lifespan=lifespan
)

# CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as {message}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Invalid request bodies and parameters are a 400, not FastAPI's 422."""
    return JSONResponse(
        status_code=400,
        content={
            "message": validation_message_for(request.scope.get("endpoint")),
            "errors": json_safe(jsonable_encoder(exc.errors())),
        },
    )


@app.exception_handler(RequestDataError)
async def request_data_error_handler(request: Request, exc: RequestDataError):
    return JSONResponse(
        status_code=400,
        content=json_safe(jsonable_encoder({
            "message": exc.message,
            "errors": exc.errors,
            **exc.extra,
        })),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


# API routes
app.include_router(api_router, prefix="/api")


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}
