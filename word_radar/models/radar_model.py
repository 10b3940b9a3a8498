from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class RadarMode(str, Enum):
    RADAR = "radar"
    SPECTRUM = "spectrum"


class RadarRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "word": "walk",
                "partOfSpeech": "verb",
                "category": "movement",
                "synonyms": ["stroll", "amble", "saunter"]
            }
        }
    )

    word: Optional[str] = Field(default=None, description="Hub word to build the radar around")
    part_of_speech: Optional[str] = Field(
        default=None,
        alias="partOfSpeech",
        description="Part of speech as used by the thesaurus (noun, verb, adjective...)"
    )
    category: Optional[str] = Field(default=None, description="Optional focus category for one facet")
    synonyms: Optional[List[str]] = Field(
        default=None,
        description="Chosen synonym set; skips discovery when non-empty"
    )
    mode: RadarMode = Field(default=RadarMode.RADAR, description="Radar or antonym spectrum dataset")
    antonym: Optional[str] = Field(default=None, description="Opposite pole for spectrum mode")

    def cache_payload(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "partOfSpeech": self.part_of_speech,
            "category": self.category,
            "synonyms": self.synonyms,
            "mode": self.mode.value,
            "antonym": self.antonym,
        }


class Facet(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str
    key: str
    spectrum_labels: Any = Field(default=None, alias="spectrumLabels")


class RadarWord(BaseModel):
    """Only ``term`` is checked; display fields pass through as the model wrote them."""

    model_config = ConfigDict(extra="allow")

    term: str
    facet: Any = None
    ring: Any = None
    frequency: Any = None
    definition: Any = None
    example: Any = None
    intensities: Any = None


class RadarClassification(BaseModel):
    """Structure the LLM must return; anything beyond these fields is passed through untouched."""

    model_config = ConfigDict(extra="allow")

    hub_word: Optional[str] = None
    part_of_speech: Optional[str] = None
    facets: List[Facet]
    rings: List[Any]
    words: List[RadarWord]
