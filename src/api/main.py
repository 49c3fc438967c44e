"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables from .env file
# Must be called before importing modules that read env vars at import time
load_dotenv()

# main.py is at <root>/src/api/main.py, src is 2 levels up
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.errors import register_error_handlers
from api.routes import health, users
from utils.logging import setup_structured_logging
from adapter.mongodb import connection
from adapter.mongodb.indexes import ensure_all_indexes

setup_structured_logging()

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = _src_path.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "Users API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the MongoDB client at startup and close it at shutdown."""
    client = connection.connect()
    app.state.mongo_client = client
    if client:
        if ensure_all_indexes(connection.get_database(client)):
            logger.info("MongoDB indexes verified/created successfully")
        else:
            logger.warning("Failed to create some MongoDB indexes")
    else:
        logger.warning("MongoDB unavailable, user routes will answer 503")

    yield  # App runs here

    connection.close(client)
    app.state.mongo_client = None


app = FastAPI(
    title=SERVICE_NAME,
    description="REST resource for user records",
    version=VERSION,
    lifespan=lifespan,
)

# Comma-separated origins, or "*" (credentials are then disabled)
cors_origins_env = os.getenv("CORS_ORIGINS", "*")

if cors_origins_env == "*":
    cors_origins = ["*"]
    allow_credentials = False
else:
    cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]
    allow_credentials = True
    logger.info(f"CORS configured with specific origins: {cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(users.router)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 3000))
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        access_log=False  # structured logging covers requests
    )
