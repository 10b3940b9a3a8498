import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional
from urllib.parse import quote

import requests

from word_radar.core.exceptions import ConfigurationError, UpstreamError
from word_radar.models.sense_model import RawSense
from word_radar.utils.config import (
    MW_THESAURUS_API_KEY, MW_THESAURUS_URL, THESAURUS_TIMEOUT, MAX_SYNONYMS_PER_SENSE
)

DEFAULT_DEFINITION = "General sense"


class MerriamWebsterThesaurus:

    def __init__(
        self,
        api_key: str = MW_THESAURUS_API_KEY,
        base_url: str = MW_THESAURUS_URL,
        timeout: int = THESAURUS_TIMEOUT,
        max_synonyms: int = MAX_SYNONYMS_PER_SENSE,
        session: Optional[requests.Session] = None
    ):
        self.logger = self._setup_logger()
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.max_synonyms = max_synonyms
        self.session = session

    @contextmanager
    def _open_session(self) -> Iterator[requests.Session]:
        # one session per lookup unless injected; lookups run on executor threads
        if self.session is not None:
            yield self.session
            return
        with requests.Session() as session:
            yield session

    def _setup_logger(self):
        logger = logging.getLogger("MerriamWebsterThesaurus")
        logger.setLevel(logging.INFO)

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger

    def lookup(self, word: str) -> List[Dict[str, Any]]:
        """Fetch thesaurus entries for a word.

        The API answers an unknown word with a list of spelling suggestions
        (plain strings); that case is reported as no entries.
        """
        if not self.api_key:
            raise ConfigurationError(
                "Merriam-Webster thesaurus API key is not configured.",
                config_field="MW_THESAURUS_API_KEY"
            )

        url = f"{self.base_url}/{quote(word, safe='')}"
        self.logger.info(f"Looking up '{word}' in thesaurus")

        try:
            with self._open_session() as session:
                response = session.get(url, params={'key': self.api_key}, timeout=self.timeout)
                response.raise_for_status()
                data = response.json()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            raise UpstreamError(f"MW API request failed: {status}") from e
        except requests.exceptions.RequestException as e:
            raise UpstreamError(f"MW API request failed: {str(e)}") from e
        except ValueError as e:
            raise UpstreamError(f"MW API returned invalid JSON: {str(e)}") from e

        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            self.logger.info(f"No thesaurus entries for '{word}'")
            return []

        entries = [entry for entry in data if isinstance(entry, dict)]
        self.logger.info(f"Thesaurus returned {len(entries)} entries for '{word}'")
        return entries

    def entries_to_senses(
        self,
        entries: List[Dict[str, Any]],
        part_of_speech: Optional[str] = None
    ) -> List[RawSense]:
        """Flatten thesaurus entries into one RawSense per listed sense.

        ``shortdef[i]`` pairs with ``meta.syns[i]``. Entries whose functional
        label differs from ``part_of_speech`` are skipped; with no part of
        speech every entry is kept.
        """
        senses: List[RawSense] = []

        for entry in entries:
            if part_of_speech and entry.get('fl') != part_of_speech:
                continue

            definitions = entry.get('shortdef') or []
            synonym_groups = (entry.get('meta') or {}).get('syns') or []

            for index, group in enumerate(synonym_groups):
                definition = definitions[index] if index < len(definitions) else ""
                synonyms = list(dict.fromkeys(s for s in group if isinstance(s, str)))
                senses.append(RawSense(
                    definition=definition or DEFAULT_DEFINITION,
                    synonyms=synonyms[:self.max_synonyms]
                ))

        return senses
