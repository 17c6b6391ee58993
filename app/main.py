from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from app.config import settings
from app.database import Database
from app.features.auth.router import router as auth_router
from app.features.patients.router import router as patients_router
from app.features.notes.router import router as notes_router
from app.routers.health import router as health_router
from app.shared.exceptions import NoteGenerationException
from app.core.logging import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for FastAPI application."""
    # Startup
    logger.info(f"Starting {settings.APP_NAME}...")
    await Database.connect_db()

    if not settings.OPENAI_API_KEY:
        logger.warning("OPENAI_API_KEY is not set; note generation will fail until it is configured")

    logger.info("Application started successfully")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await Database.close_db()
    logger.info("Application shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Clinical note generation and patient directory API",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NoteGenerationException)
async def note_generation_exception_handler(request: Request, exc: NoteGenerationException):
    """Note generation errors use an {"error": ...} body."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


# Register routers
app.include_router(health_router)
app.include_router(auth_router, prefix=settings.API_V1_PREFIX)
app.include_router(patients_router, prefix=settings.API_V1_PREFIX)
app.include_router(notes_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": settings.APP_NAME,
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }
