from fastapi import APIRouter, Depends
import asyncio
import logging
from word_radar.api.dependencies import get_orchestrator
from word_radar.models.base import HealthResponse
from word_radar.utils.config import API_VERSION
from word_radar.utils.orchestrator import RadarOrchestrator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(orchestrator: RadarOrchestrator = Depends(get_orchestrator)):
    loop = asyncio.get_running_loop()
    cache_status = await loop.run_in_executor(None, orchestrator.cache.ping)
    providers = orchestrator.gateway.provider_names

    status = "healthy"
    if cache_status == "error":
        status = "degraded"
        logger.warning("Cache unreachable, serving without cache")

    return HealthResponse(
        status=status,
        version=API_VERSION,
        cache={"status": cache_status},
        providers=providers
    )
