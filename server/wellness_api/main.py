"""Wellness Journal API - FastAPI application entry point."""
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .database import PersistenceError
from .routes import auth, moods, diary, chat, summaries, stats, profile

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
log = logging.getLogger(__name__)

app = FastAPI(
    title="Wellness Journal API",
    description="Mood logging, diary, chat and AI wellness summaries",
    version="1.0.0",
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router)
app.include_router(moods.router)
app.include_router(diary.router)
app.include_router(chat.router)
app.include_router(summaries.router)
app.include_router(stats.router)
app.include_router(profile.router)


@app.exception_handler(PersistenceError)
async def persistence_error_handler(request: Request, exc: PersistenceError):
    """Report storage failures with a generic message; details stay in the log."""
    log.error("Persistence error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Something went wrong while saving your data. Please try again."},
    )


@app.get("/health")
async def health_check():
    """Health check endpoint for the API."""
    return {"status": "healthy", "service": "wellness-api"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "server.wellness_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
    )
