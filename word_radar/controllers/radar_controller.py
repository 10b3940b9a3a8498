from typing import Any, Dict
from fastapi import HTTPException
from word_radar.core.exceptions import ConfigurationError, WordRadarError
from word_radar.models.radar_model import RadarRequest
from word_radar.models.sense_model import ClusteringResult
from word_radar.utils.orchestrator import RadarOrchestrator
import logging

logger = logging.getLogger(__name__)


class RadarController:
    @staticmethod
    async def get_radar_data(request: RadarRequest, orchestrator: RadarOrchestrator) -> Dict[str, Any]:
        """
        Build the radar dataset for a word, or the list of senses to choose from.

        Args:
            request: Parsed request body
            orchestrator: Orchestrator wired with the thesaurus, clusterer, gateway and cache

        Returns:
            Either a classification object or a disambiguation object
            ({senses, additionalSenses, hasMore})
        """
        try:
            result = await orchestrator.handle(request)
        except ConfigurationError as e:
            logger.error(f"Configuration error ({e.config_field}): {e.message}")
            raise HTTPException(status_code=e.status_code, detail=e.message)
        except WordRadarError as e:
            if e.status_code >= 500:
                logger.error(f"Error building radar for '{request.word}': {e.message}")
            else:
                logger.info(f"Rejected radar request for '{request.word}': {e.message}")
            raise HTTPException(status_code=e.status_code, detail=e.message)
        except Exception as e:
            logger.error(f"Unexpected error building radar for '{request.word}': {str(e)}")
            raise HTTPException(status_code=500, detail=str(e))

        if isinstance(result, ClusteringResult):
            return result.model_dump(by_alias=True)

        return result
