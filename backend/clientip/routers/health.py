"""
Health check endpoints
"""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
async def health_check():
    """Basic liveness probe - returns healthy if the service is running"""
    return {"status": "healthy"}
