"""API router composition for all route groups."""

from fastapi import APIRouter

from .routes import search, titles, trending

api_router = APIRouter()
api_router.include_router(trending.router, prefix="/trending", tags=["catalog"])
api_router.include_router(search.router, prefix="/search", tags=["search"])
api_router.include_router(titles.router, prefix="/titles", tags=["titles"])
