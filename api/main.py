"""
Campus Routing API - FastAPI application.

Start with `python run_api.py`; interactive docs are served at /docs.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from campus_routing import __version__
from api.routes.routing import router as routing_router
from api.services.routing_service import routing_service

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    health = routing_service.get_health_status()
    if health.graph_loaded:
        logger.info(f"Serving {health.node_count} path nodes and {health.place_count} places")
    else:
        logger.warning("Path network not loaded, routes will report location_not_found")
    yield


app = FastAPI(
    title="Campus Routing API",
    description="Typo-tolerant campus place search and shortest walking routes.",
    version=__version__,
    lifespan=lifespan
)

# The map front end is served from a different origin
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["GET", "POST"])


def error_response(status_code: int, error: str, message: str, details=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "message": message, "details": details}
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Validation error for {request.url.path}: {exc.errors()}")
    # 'ctx' and 'input' may hold values JSON cannot encode
    errors = [{key: error[key] for key in ('type', 'loc', 'msg') if key in error} for error in exc.errors()]
    return error_response(422, "validation_error", "Request validation failed", {"errors": errors})


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unexpected error for {request.url.path}")
    return error_response(500, "internal_server_error", "An unexpected error occurred")


app.include_router(routing_router)


@app.get("/", tags=["general"])
async def root():
    return {
        "api": "Campus Routing API",
        "version": __version__,
        "documentation": "/docs",
        "health_check": "/api/campus/health"
    }
