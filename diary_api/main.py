import logging
from typing import Optional
from fastapi import FastAPI, APIRouter, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from diary_api.core.database import Database
from diary_api.core.settings import settings
from diary_api.exceptions import StorageError
from diary_api.api_v1.endpoints import posts, activities, junk_food, progress

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting up Diary API Service...")
    database: Optional[Database] = getattr(app.state, "database", None)
    if database is None:
        database = Database.from_settings(settings)
        app.state.database = database
    try:
        await database.ping()
    except StorageError as e:
        logger.error(f"Failed to connect to the document store: {e.__cause__}")
        await database.dispose()
        raise

    yield

    # Shutdown
    logger.info("Shutting down Diary API Service...")
    await database.dispose()

async def storage_error_handler(request: Request, exc: StorageError):
    """Log the storage failure and answer with a generic 500."""
    logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )

def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the application; a prepared database handle may be passed in."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Read-only API for diary posts, activity and junk food logs, and daily progress.",
        version=settings.VERSION,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        docs_url=f"{settings.API_V1_STR}/docs",
        redoc_url=f"{settings.API_V1_STR}/redoc",
        lifespan=lifespan
    )
    if database is not None:
        app.state.database = database

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StorageError, storage_error_handler)

    # Create API v1 router
    api_v1_router = APIRouter(prefix=settings.API_V1_STR)

    # Include all endpoint routers
    api_v1_router.include_router(posts.router, prefix="/posts", tags=["Posts"])
    api_v1_router.include_router(activities.router, prefix="/activities", tags=["Activities"])
    api_v1_router.include_router(junk_food.router, prefix="/junkFood", tags=["Junk Food"])
    api_v1_router.include_router(progress.router, prefix="/progress", tags=["Progress"])

    # Include the v1 router in the main app
    app.include_router(api_v1_router)

    # Root endpoint
    @app.get("/", tags=["Root"])
    async def root():
        return {
            "message": "Welcome to the Diary API Service",
            "version": settings.VERSION,
            "docs": f"{settings.API_V1_STR}/docs"
        }

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        return {"status": "healthy", "service": "diary-api"}

    return app

app = create_app()

def run():
    import uvicorn
    logger.info("Starting Uvicorn server for development...")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    run()
