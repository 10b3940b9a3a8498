import logging
import os
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()
logging.info("Environment variables loaded from .env file")


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


API_VERSION: str = os.getenv("API_VERSION", "1.0.0")
CORS_ALLOW_ORIGINS: List[str] = _split_list(os.getenv("CORS_ALLOW_ORIGINS", "*"))

# Merriam-Webster thesaurus
MW_THESAURUS_API_KEY: str = os.getenv("MW_THESAURUS_API_KEY", "")
MW_THESAURUS_URL: str = os.getenv(
    "MW_THESAURUS_URL",
    "https://www.dictionaryapi.com/api/v3/references/thesaurus/json"
)
THESAURUS_TIMEOUT: int = int(os.getenv("THESAURUS_TIMEOUT", "10"))
MAX_SYNONYMS_PER_SENSE: int = int(os.getenv("MAX_SYNONYMS_PER_SENSE", "25"))

# OpenRouter gateway
OPENROUTER_API_KEY: str = os.getenv("OPENROUTER_API_KEY", "")
OPENROUTER_URL: str = os.getenv("OPENROUTER_URL", "https://openrouter.ai/api/v1/chat/completions")
DEFAULT_OPENROUTER_MODELS: List[str] = [
    "openrouter/sonoma-sky-alpha",
    "openrouter/sonoma-dusk-alpha",
    "mistralai/mistral-small-3.2-24b-instruct:free",
    "openai/gpt-oss-120b:free",
    "google/gemini-flash-1.5-8b",
]
OPENROUTER_MODELS: List[str] = (
    _split_list(os.getenv("OPENROUTER_MODELS", "")) or DEFAULT_OPENROUTER_MODELS
)
LLM_TIMEOUT: int = int(os.getenv("LLM_TIMEOUT", "60"))

# Sense clustering
SENSE_PRIMARY_COUNT: int = int(os.getenv("SENSE_PRIMARY_COUNT", "3"))
SENSE_MAX_TOTAL: int = int(os.getenv("SENSE_MAX_TOTAL", "8"))
SENSE_SIMILARITY_THRESHOLD: float = float(os.getenv("SENSE_SIMILARITY_THRESHOLD", "0.5"))

# Redis cache
REDIS_HOST: str = os.getenv("REDIS_HOST", "localhost")
REDIS_PORT: int = int(os.getenv("REDIS_PORT", "6379"))
REDIS_DB: int = int(os.getenv("REDIS_DB", "0"))
REDIS_PASSWORD: Optional[str] = os.getenv("REDIS_PASSWORD") or None
CACHE_ENABLED: bool = os.getenv("CACHE_ENABLED", "True").lower() == "true"
CACHE_TTL_SECONDS: int = int(os.getenv("CACHE_TTL_SECONDS", "0"))
CACHE_KEY_PREFIX: str = os.getenv("CACHE_KEY_PREFIX", "word-radar-cache:")
