from typing import Any, Dict, Optional


class WordRadarError(Exception):
    """Base exception for all word radar errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self._get_default_error_code()
        self.context: Dict[str, Any] = context or {}

    def _get_default_error_code(self) -> str:
        return "WORD_RADAR_ERROR"

    def add_context(self, key: str, value: Any) -> "WordRadarError":
        if key:
            self.context[key] = value
        return self

    def __str__(self) -> str:
        return self.message or ""


class InvalidRequestError(WordRadarError):
    status_code = 400

    def _get_default_error_code(self) -> str:
        return "INVALID_REQUEST"


class WordNotFoundError(WordRadarError):
    status_code = 404

    def __init__(self, word: str, part_of_speech: Optional[str] = None, **kwargs):
        if part_of_speech:
            message = f'No synonyms found for "{word}" as a {part_of_speech}.'
        else:
            message = f'No entries found for "{word}".'
        super().__init__(message, **kwargs)
        self.word = word
        self.part_of_speech = part_of_speech

    def _get_default_error_code(self) -> str:
        return "WORD_NOT_FOUND"


class ConfigurationError(WordRadarError):
    def __init__(self, message: str, *, config_field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.config_field = config_field

    def _get_default_error_code(self) -> str:
        return "CONFIGURATION_ERROR"


class UpstreamError(WordRadarError):
    def _get_default_error_code(self) -> str:
        return "UPSTREAM_ERROR"


class GatewayError(UpstreamError):
    """Raised when every LLM provider failed to return a usable answer."""

    def _get_default_error_code(self) -> str:
        return "GATEWAY_ERROR"
