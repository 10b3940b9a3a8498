import re
import json
import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional, Sequence

import requests
from pydantic import ValidationError

from word_radar.core.exceptions import ConfigurationError, GatewayError
from word_radar.models.radar_model import RadarClassification
from word_radar.utils.config import (
    OPENROUTER_API_KEY, OPENROUTER_URL, OPENROUTER_MODELS, LLM_TIMEOUT
)

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """A single provider failed; the gateway moves on to the next one."""


class TextCompletionProvider(ABC):
    name: str = "provider"

    @abstractmethod
    def complete(self, system_prompt: str, user_prompt: str) -> str:
        """Return the raw text content of the model's reply."""


class OpenRouterProvider(TextCompletionProvider):

    def __init__(
        self,
        model: str,
        api_key: str = OPENROUTER_API_KEY,
        url: str = OPENROUTER_URL,
        timeout: int = LLM_TIMEOUT,
        session: Optional[requests.Session] = None
    ):
        self.model = model
        self.name = model
        self.api_key = api_key
        self.url = url
        self.timeout = timeout
        self.session = session

    @contextmanager
    def _open_session(self) -> Iterator[requests.Session]:
        # one session per call unless injected; calls run on executor threads
        if self.session is not None:
            yield self.session
            return
        with requests.Session() as session:
            yield session

    def complete(self, system_prompt: str, user_prompt: str) -> str:
        if not self.api_key:
            raise ConfigurationError(
                "OpenRouter API key is not configured.",
                config_field="OPENROUTER_API_KEY"
            )

        payload = {
            "model": self.model,
            "response_format": {"type": "json_object"},
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt}
            ]
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json"
        }

        try:
            with self._open_session() as session:
                response = session.post(self.url, json=payload, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise ProviderError(f"network error: {str(e)}") from e

        if not response.ok:
            raise ProviderError(f"failed with status {response.status_code}: {response.text[:300]}")

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError("returned a non-JSON envelope") from e

        choices = data.get("choices") or []
        content = (choices[0].get("message") or {}).get("content") if choices else None
        if not content:
            raise ProviderError("returned no choices")

        return content


def parse_json_content(text: str) -> Dict[str, Any]:
    """Parse JSON from a model reply, tolerating markdown code fences."""
    text = text.strip()
    if text.startswith('```'):
        text = re.sub(r'^```(?:json)?\s*\n?', '', text)
        text = re.sub(r'\n?\s*```$', '', text)

    parsed = json.loads(text)
    if not isinstance(parsed, dict):
        raise ValueError("top-level JSON value is not an object")
    return parsed


class LLMGateway:
    """Tries each provider in order and returns the first structurally valid classification."""

    def __init__(self, providers: Sequence[TextCompletionProvider]):
        self.providers: List[TextCompletionProvider] = list(providers)

    @property
    def provider_names(self) -> List[str]:
        return [provider.name for provider in self.providers]

    def classify(self, system_prompt: str, user_prompt: str) -> Dict[str, Any]:
        for provider in self.providers:
            logger.info(f"Attempting API call with model: {provider.name}")
            try:
                content = provider.complete(system_prompt, user_prompt)
            except ConfigurationError:
                raise
            except ProviderError as e:
                logger.warning(f"Model '{provider.name}' {str(e)}. Trying next model.")
                continue
            except Exception as e:
                logger.error(f"Unexpected error with model '{provider.name}': {str(e)}")
                continue

            try:
                parsed = parse_json_content(content)
            except ValueError:
                logger.warning(f"Model '{provider.name}' returned unparseable JSON. Trying next model.")
                continue

            try:
                RadarClassification.model_validate(parsed)
            except ValidationError as e:
                logger.warning(
                    f"Model '{provider.name}' returned JSON with an unexpected shape "
                    f"({e.error_count()} errors). Trying next model."
                )
                continue

            logger.info(f"Successfully received response from: {provider.name}")
            return parsed

        raise GatewayError("All AI models failed to provide a valid response. Please try again later.")


def build_openrouter_gateway(
    models: Optional[Sequence[str]] = None,
    api_key: str = OPENROUTER_API_KEY,
    url: str = OPENROUTER_URL,
    timeout: int = LLM_TIMEOUT
) -> LLMGateway:
    providers = [
        OpenRouterProvider(model, api_key=api_key, url=url, timeout=timeout)
        for model in (models or OPENROUTER_MODELS)
    ]
    return LLMGateway(providers)
