from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class RawSense(BaseModel):
    """One dictionary sense as supplied by the thesaurus."""

    model_config = ConfigDict(frozen=True)

    definition: str = Field(description="Raw dictionary definition", examples=["to walk slowly"])
    synonyms: List[str] = Field(default_factory=list, description="Synonyms listed for this sense")


class Sense(BaseModel):
    """A processed sense, also used as the accumulator for a cluster of merged senses."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "definition": "to walk slowly and without purpose",
                "synonyms": ["stroll", "amble", "saunter"],
                "cleanDefinition": "to walk slowly and without purpose",
                "synonymCount": 3
            }
        }
    )

    definition: str = Field(description="Most descriptive definition seen for this sense")
    synonyms: List[str] = Field(description="Deduplicated synonyms for this sense")
    clean_definition: str = Field(alias="cleanDefinition", description="Normalized definition used for comparison")
    synonym_count: int = Field(alias="synonymCount", description="Number of synonyms")

    def merge(self, other: "Sense") -> None:
        seen = set(self.synonyms)
        for synonym in other.synonyms:
            if synonym not in seen:
                self.synonyms.append(synonym)
                seen.add(synonym)
        self.synonym_count = len(self.synonyms)

        if len(other.definition) > len(self.definition):
            self.definition = other.definition
            self.clean_definition = other.clean_definition


class ClusteringResult(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "senses": [
                    {
                        "definition": "to walk slowly",
                        "synonyms": ["stroll", "amble"],
                        "cleanDefinition": "to walk slowly",
                        "synonymCount": 2
                    }
                ],
                "additionalSenses": None,
                "hasMore": False
            }
        }
    )

    senses: List[Sense] = Field(default_factory=list, description="Primary senses, richest first")
    additional_senses: Optional[List[Sense]] = Field(
        default=None,
        alias="additionalSenses",
        description="Overflow senses shown on request"
    )
    has_more: bool = Field(default=False, alias="hasMore", description="Whether additional senses exist")
