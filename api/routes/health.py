"""
Health check endpoint.
"""

import time

from fastapi import APIRouter

from config.settings import settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check():
    """Basic health check endpoint"""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "timestamp": time.time()
    }
