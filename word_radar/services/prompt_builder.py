from dataclasses import dataclass
from typing import List, Optional

from word_radar.models.radar_model import RadarMode

RADAR_SYSTEM_PROMPT = """You are a linguist creating a Word Radar visualization dataset. You will be given a hub word, a part of speech, and a list of related words. Your task is to filter and classify these words.

REQUIREMENTS:
1.  **FILTER FIRST:** From the provided "Synonyms" list, you MUST select ONLY the words that function as a **{part_of_speech}**. Discard any words that do not fit this grammatical role. For example, if the part of speech is 'verb', discard nouns like 'guardian' or 'lookout'.
2.  Create 3-4 semantic facets (axes) for the hub word.
3.  If a Focus Category is provided, one facet MUST relate to it.
4.  For each word from your **filtered, grammatically-correct list**, generate: facet index, ring (0-3), frequency (0-100), a brief definition, a natural usage example, and intensity scores for all facets.
5.  Ensure the classified words are distributed logically across ALL facets. Do not assign all words to just one facet.

JSON Structure:
{{
  "hub_word": "original word",
  "part_of_speech": "provided part of speech",
  "facets": [
    {{"name": "Semantic Dimension", "key": "dimension_key", "spectrumLabels": ["Low End", "High End"]}}
  ],
  "rings": ["Core", "Common", "Specific", "Nuanced"],
  "words": [
    {{
      "term": "synonym_from_filtered_list",
      "facet": 0,
      "ring": 1,
      "frequency": 65,
      "definition": "Brief, clear definition for this specific synonym.",
      "example": "Natural usage example for the synonym.",
      "intensities": {{"dimension_key": 0.5, "other_key": -0.3}}
    }}
  ]
}}

Return ONLY valid JSON."""

SPECTRUM_SYSTEM_PROMPT = """You are a linguist building a semantic spectrum (cline) for a vocabulary visualization. You will be given a hub word, optionally its part of speech and an opposite pole, and a list of related words.

REQUIREMENTS:
1.  If no opposite pole is provided, choose the most natural antonym of the hub word as the opposite pole.
2.  Create exactly one facet whose spectrumLabels are the hub word's pole and the opposite pole.
3.  Keep only words that belong on the gradient between the two poles{pos_clause}. Add up to 6 well-known words that fill gaps near the opposite pole.
4.  For each kept word, generate: ring (0-3, 0 = closest to the hub word), frequency (0-100), a brief definition, a natural usage example, and an intensity from -1.0 (opposite pole) to 1.0 (hub word pole).
5.  Order the "words" array from the hub word's pole to the opposite pole.

JSON Structure:
{{
  "hub_word": "original word",
  "part_of_speech": "provided part of speech",
  "facets": [
    {{"name": "Spectrum", "key": "spectrum", "spectrumLabels": ["Hub Pole", "Opposite Pole"]}}
  ],
  "rings": ["Core", "Common", "Specific", "Nuanced"],
  "words": [
    {{
      "term": "word_on_the_spectrum",
      "facet": 0,
      "ring": 1,
      "frequency": 65,
      "definition": "Brief, clear definition for this word.",
      "example": "Natural usage example for the word.",
      "intensities": {{"spectrum": 0.4}}
    }}
  ]
}}

Return ONLY valid JSON."""


@dataclass(frozen=True)
class Prompt:
    system: str
    user: str

    @property
    def text(self) -> str:
        return f"{self.system}\n\n{self.user}"


def _format_synonyms(synonyms: List[str]) -> str:
    return "[" + ", ".join(f'"{synonym}"' for synonym in synonyms) + "]"


def build_radar_prompt(
    word: str,
    part_of_speech: str,
    synonyms: List[str],
    category: Optional[str] = None
) -> Prompt:
    system = RADAR_SYSTEM_PROMPT.format(part_of_speech=part_of_speech)
    user = (
        f'Hub Word: "{word}"\nPart of Speech: "{part_of_speech}"\n\n'
        f"Synonyms to filter and classify:\n{_format_synonyms(synonyms)}"
    )
    if category:
        user += f'\n\nFocus Category: "{category}"'

    return Prompt(system=system, user=user)


def build_spectrum_prompt(
    word: str,
    synonyms: List[str],
    part_of_speech: Optional[str] = None,
    antonym: Optional[str] = None,
    category: Optional[str] = None
) -> Prompt:
    pos_clause = f" and function as a **{part_of_speech}**" if part_of_speech else ""
    system = SPECTRUM_SYSTEM_PROMPT.format(pos_clause=pos_clause)

    user = f'Hub Word: "{word}"'
    if part_of_speech:
        user += f'\nPart of Speech: "{part_of_speech}"'
    if antonym:
        user += f'\nOpposite Pole: "{antonym}"'
    user += f"\n\nRelated words to place on the spectrum:\n{_format_synonyms(synonyms)}"
    if category:
        user += f'\n\nFocus Category: "{category}"'

    return Prompt(system=system, user=user)


def build_prompt(
    mode: RadarMode,
    word: str,
    synonyms: List[str],
    part_of_speech: Optional[str] = None,
    category: Optional[str] = None,
    antonym: Optional[str] = None
) -> Prompt:
    if mode == RadarMode.SPECTRUM:
        return build_spectrum_prompt(word, synonyms, part_of_speech, antonym, category)
    return build_radar_prompt(word, part_of_speech, synonyms, category)
