from typing import Any, Dict
from fastapi import APIRouter, Depends, Response, status
import logging
from word_radar.api.dependencies import get_orchestrator
from word_radar.controllers.radar_controller import RadarController
from word_radar.models.base import ErrorResponse
from word_radar.models.radar_model import RadarRequest
from word_radar.utils.orchestrator import RadarOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Word Radar"])


@router.post(
    "/word-radar-data",
    response_model=Dict[str, Any],
    responses={
        200: {
            "description": "Radar classification, or senses to choose from when the word is ambiguous"
        },
        400: {
            "description": "Missing or malformed request fields",
            "model": ErrorResponse
        },
        404: {
            "description": "Word or part of speech not found in the thesaurus",
            "model": ErrorResponse
        },
        500: {
            "description": "Configuration or upstream failure",
            "model": ErrorResponse
        }
    },
    summary="Build a word radar dataset",
    description=(
        "Without synonyms the word is looked up in the thesaurus and its senses are clustered; "
        "a single sense is classified immediately, several are returned for selection. "
        "With synonyms the set is classified directly."
    )
)
async def word_radar_data(
    request: RadarRequest,
    orchestrator: RadarOrchestrator = Depends(get_orchestrator)
) -> Dict[str, Any]:
    return await RadarController.get_radar_data(request, orchestrator)


@router.options("/word-radar-data", include_in_schema=False)
async def word_radar_data_options() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)
