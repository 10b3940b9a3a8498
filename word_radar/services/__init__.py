from .sense_clusterer import SenseClusterer, normalize_definition, definition_similarity
from .thesaurus import MerriamWebsterThesaurus
from .llm_gateway import LLMGateway, OpenRouterProvider, TextCompletionProvider, build_openrouter_gateway
from .prompt_builder import Prompt, build_prompt

__all__ = [
    'SenseClusterer',
    'normalize_definition',
    'definition_similarity',
    'MerriamWebsterThesaurus',
    'LLMGateway',
    'OpenRouterProvider',
    'TextCompletionProvider',
    'build_openrouter_gateway',
    'Prompt',
    'build_prompt',
]
