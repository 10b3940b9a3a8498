from functools import lru_cache
from word_radar.services.llm_gateway import build_openrouter_gateway
from word_radar.services.sense_clusterer import SenseClusterer
from word_radar.services.thesaurus import MerriamWebsterThesaurus
from word_radar.utils.cache import RadarCache
from word_radar.utils.config import (
    SENSE_PRIMARY_COUNT, SENSE_MAX_TOTAL, SENSE_SIMILARITY_THRESHOLD
)
from word_radar.utils.orchestrator import RadarOrchestrator


@lru_cache(maxsize=1)
def get_cache() -> RadarCache:
    return RadarCache()


@lru_cache(maxsize=1)
def get_orchestrator() -> RadarOrchestrator:
    """
    Orchestrator shared by every request; it holds no per-request state.
    """
    return RadarOrchestrator(
        thesaurus=MerriamWebsterThesaurus(),
        clusterer=SenseClusterer(
            primary_sense_count=SENSE_PRIMARY_COUNT,
            max_total_senses=SENSE_MAX_TOTAL,
            similarity_threshold=SENSE_SIMILARITY_THRESHOLD
        ),
        gateway=build_openrouter_gateway(),
        cache=get_cache()
    )
