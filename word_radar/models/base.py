from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Word and Part of Speech are required."
            }
        }
    )

    error: str = Field(description="Error message")


class HealthResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "version": "1.0.0",
                "cache": {
                    "status": "connected"
                },
                "providers": ["openrouter/sonoma-sky-alpha", "google/gemini-flash-1.5-8b"]
            }
        }
    )

    status: str = Field(description="Overall service status")
    version: str = Field(description="API version")
    cache: Dict[str, Any] = Field(description="Cache connection status")
    providers: List[str] = Field(description="LLM models tried in order")
    message: Optional[str] = Field(default=None, description="Optional message")
