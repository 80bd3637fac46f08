"""
geobounds server

Bounding boxes and Morton codes for radius queries over HTTP.
"""

import argparse
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geobounds import __version__
from geobounds.api import api_router
from geobounds.api.errors import input_error_handler
from geobounds.config import settings
from geobounds.geo import EARTH_RADIUS_KM, MORTON_BITS
from geobounds.validation import InputError

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("geobounds")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Logs the active configuration on startup and shutdown.
    """
    logger.info(f"Starting geobounds server v{__version__}")
    logger.info(f"Server URL: {settings.server_url}")
    logger.info(f"Earth radius: {EARTH_RADIUS_KM} km, max query radius: {settings.max_radius_km} km")
    logger.info(f"Morton codes: {MORTON_BITS} bits per axis")

    yield

    logger.info("Shutting down geobounds server")


# Create the FastAPI application
app = FastAPI(
    title="geobounds",
    description="Bounding boxes and Morton codes for radius queries",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Add CORS middleware for browser clients
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(InputError, input_error_handler)

# Include all API routes
app.include_router(api_router)


@app.get("/", tags=["root"])
async def root():
    """Root endpoint with basic server info."""
    return {
        "name": "geobounds",
        "version": __version__,
        "server": settings.server_url,
        "docs": f"{settings.server_url}/docs",
    }


@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


def run():
    """Run the server using uvicorn."""
    parser = argparse.ArgumentParser(description="geobounds server")
    parser.add_argument(
        "-p", "--port",
        type=int,
        default=None,
        help=f"Port to listen on (default: {settings.port}, or GEOBOUNDS_PORT env var)"
    )
    parser.add_argument(
        "-H", "--host",
        type=str,
        default=None,
        help=f"Host to bind to (default: {settings.host}, or GEOBOUNDS_HOST env var)"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development"
    )
    args = parser.parse_args()

    # Command line args override config/env vars
    host = args.host if args.host is not None else settings.host
    port = args.port if args.port is not None else settings.port

    uvicorn.run(
        "geobounds.main:app",
        host=host,
        port=port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
