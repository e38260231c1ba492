import logging

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.config import get_settings, Settings
from app.db.session import get_db
from app.api.v1.endpoints import matchmaking, notifications, profiles, usernames, wishlists

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Player profiles, usernames, compatibility-ranked matchmaking, notifications and venue wishlists",
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for module in (profiles, usernames, matchmaking, notifications, wishlists):
    app.include_router(module.router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


@app.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check endpoint with database connectivity test."""
    try:
        db.execute(text("SELECT 1"))
        db_status = "healthy"
    except Exception as e:
        db_status = f"unhealthy: {str(e)}"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "components": {
            "api": "healthy",
            "database": db_status,
        },
        "version": settings.app_version,
    }


@app.get("/config")
async def get_config(settings: Settings = Depends(get_settings)):
    """Get application configuration (non-sensitive values)."""
    return {
        "app_name": settings.app_name,
        "app_version": settings.app_version,
        "app_env": settings.app_env,
        "matching": {
            "weights": {
                "skill": settings.skill_match_weight,
                "location": settings.location_match_weight,
                "game_type": settings.game_type_match_weight,
                "availability": settings.availability_match_weight,
            },
            "skill_gap_penalty": settings.skill_gap_penalty,
            "location_partial_credit": settings.location_partial_credit,
            "default_match_limit": settings.default_match_limit,
        },
    }
