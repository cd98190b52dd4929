import time
from fastapi import APIRouter
from ..config import places, service
from ..models.response import HealthResponse, MinScoresResponse

router = APIRouter()

started_at = time.time()

@router.get("/health", response_model=HealthResponse)
@router.head("/health")
async def health_check():
    """Report the service version, its default minimum scores and uptime"""
    return HealthResponse(
        version=service.version,
        min_scores=MinScoresResponse(**places.min_scores().to_dict()),
        uptime=time.time() - started_at
    )
