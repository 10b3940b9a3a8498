from .config import *
from .cache import RadarCache, derive_cache_key

__all__ = [
    # Config
    'API_VERSION',
    'CORS_ALLOW_ORIGINS',
    'MW_THESAURUS_API_KEY',
    'MW_THESAURUS_URL',
    'THESAURUS_TIMEOUT',
    'MAX_SYNONYMS_PER_SENSE',
    'OPENROUTER_API_KEY',
    'OPENROUTER_URL',
    'OPENROUTER_MODELS',
    'LLM_TIMEOUT',
    'SENSE_PRIMARY_COUNT',
    'SENSE_MAX_TOTAL',
    'SENSE_SIMILARITY_THRESHOLD',
    'REDIS_HOST',
    'REDIS_PORT',
    'REDIS_DB',
    'REDIS_PASSWORD',
    'CACHE_ENABLED',
    'CACHE_TTL_SECONDS',
    'CACHE_KEY_PREFIX',

    # Cache
    'RadarCache',
    'derive_cache_key'
]
