import asyncio
import logging
from typing import Any, Dict, List, Optional, Union

from word_radar.core.exceptions import InvalidRequestError, WordNotFoundError
from word_radar.models.radar_model import RadarMode, RadarRequest
from word_radar.models.sense_model import ClusteringResult
from word_radar.services.llm_gateway import LLMGateway
from word_radar.services.prompt_builder import build_prompt
from word_radar.services.sense_clusterer import SenseClusterer
from word_radar.services.thesaurus import MerriamWebsterThesaurus
from word_radar.utils.cache import RadarCache, derive_cache_key

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Word and Part of Speech are required."


class RadarOrchestrator:
    """Decides per request between direct classification and sense discovery.

    A request carrying synonyms is classified straight away (cache first,
    then the LLM gateway). Otherwise the word is looked up in the thesaurus
    and its senses are clustered; a single unambiguous sense is classified
    immediately, anything else is handed back for the user to pick from.
    """

    def __init__(
        self,
        thesaurus: MerriamWebsterThesaurus,
        clusterer: SenseClusterer,
        gateway: LLMGateway,
        cache: RadarCache
    ):
        self.thesaurus = thesaurus
        self.clusterer = clusterer
        self.gateway = gateway
        self.cache = cache
        self.logger = logger

    @staticmethod
    def validate_request(request: RadarRequest) -> None:
        word = (request.word or "").strip()
        if request.mode == RadarMode.SPECTRUM:
            if not word:
                raise InvalidRequestError("Word is required.")
            return

        if not word or not (request.part_of_speech or "").strip():
            raise InvalidRequestError(REQUIRED_FIELDS_MESSAGE)

    async def handle(self, request: RadarRequest) -> Union[Dict[str, Any], ClusteringResult]:
        self.validate_request(request)

        if request.synonyms:
            self.logger.info(
                f"Direct classification for '{request.word}' ({request.part_of_speech}) "
                f"with {len(request.synonyms)} synonyms"
            )
            return await self.classify(request, request.synonyms)

        return await self.discover(request)

    async def discover(self, request: RadarRequest) -> Union[Dict[str, Any], ClusteringResult]:
        loop = asyncio.get_running_loop()
        self.logger.info(f"Discovering senses for '{request.word}' ({request.part_of_speech})")

        entries = await loop.run_in_executor(None, self.thesaurus.lookup, request.word)
        if not entries:
            raise WordNotFoundError(request.word)

        raw_senses = self.thesaurus.entries_to_senses(entries, request.part_of_speech)
        result = self.clusterer.cluster(raw_senses)

        if not result.senses:
            raise WordNotFoundError(request.word, request.part_of_speech)

        if len(result.senses) == 1 and not result.has_more:
            self.logger.info(f"Single sense found for '{request.word}', proceeding to classification")
            return await self.classify(request, result.senses[0].synonyms)

        self.logger.info(
            f"Returning {len(result.senses)} senses for '{request.word}' "
            f"(has_more={result.has_more}) for selection"
        )
        return result

    async def classify(self, request: RadarRequest, synonyms: List[str]) -> Dict[str, Any]:
        loop = asyncio.get_running_loop()
        prompt = build_prompt(
            request.mode,
            request.word,
            synonyms,
            part_of_speech=request.part_of_speech,
            category=request.category,
            antonym=request.antonym
        )

        payload = request.cache_payload()
        payload["synonyms"] = list(synonyms)
        cache_key = derive_cache_key(payload, prompt.text)

        cached: Optional[Any] = await loop.run_in_executor(None, self.cache.get, cache_key)
        if isinstance(cached, dict):
            self.logger.info(f"CACHE HIT for key: {cache_key}")
            classification = cached
        else:
            self.logger.info(f"CACHE MISS for key: {cache_key}. Calling LLM...")
            classification = await loop.run_in_executor(
                None, self.gateway.classify, prompt.system, prompt.user
            )
            stored = await loop.run_in_executor(None, self.cache.put, cache_key, classification)
            if stored:
                self.logger.info(f"Stored new response in cache for key: {cache_key}")

        result = dict(classification)
        result["hub_word"] = request.word
        result["part_of_speech"] = request.part_of_speech
        return result
