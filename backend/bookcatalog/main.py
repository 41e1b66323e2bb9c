"""
Book Catalog Backend - FastAPI Application

A small catalog of books with user registration, JWT login and
owner-only mutations.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookcatalog.config import get_settings
from bookcatalog.core.errors import register_exception_handlers
from bookcatalog.core.logging import configure_logging
from bookcatalog.database.connections import get_mongo_client, close_connections
from bookcatalog.database.indexes import create_indexes
from bookcatalog.routers import auth, books, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Configure logging
    - Initialize the database connection
    - Create indexes

    Shutdown:
    - Close the database connection
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("Starting up Book Catalog Backend...")

    try:
        client = await get_mongo_client()
        await create_indexes(client[settings.mongo_db_name])
        logger.info("Database indexes created")
    except Exception as e:
        logger.warning("Database initialization warning: %s", e)

    yield

    logger.info("Shutting down Book Catalog Backend...")
    await close_connections()
    logger.info("Database connections closed")


app = FastAPI(
    title="Book Catalog API",
    description="""
## Book Catalog API

### Features
- **Authentication**: Username/password registration and JWT login
- **Books**: Public catalog reads, owner-only updates and deletes

### Authentication
Protected endpoints require a JWT bearer token:
```
Authorization: Bearer your_jwt_token
```

Obtain a token via `POST /auth/login`. Tokens expire after one hour.
    """,
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(books.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Book Catalog API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }
