import re
import logging
from typing import Iterable, List, Optional

from word_radar.models.sense_model import ClusteringResult, RawSense, Sense

_MARKUP_PATTERN = re.compile(r"\{[^}]*\}")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_LEADING_COLON_PATTERN = re.compile(r"^(?::\s*)+")
_CLAUSE_BREAK_PATTERN = re.compile(r"[;,]")


def normalize_definition(raw: str) -> str:
    """Reduce a dictionary definition to its lower-cased first clause with markup removed.

    Dictionary entries carry inline tags such as ``{it}...{/it}`` and often open
    with ": ". Only the text before the first ``;`` or ``,`` is kept so that
    multi-clause definitions are compared on their primary clause.
    """
    if not raw:
        return ""

    text = _MARKUP_PATTERN.sub("", raw)
    text = _WHITESPACE_PATTERN.sub(" ", text).strip()
    text = _LEADING_COLON_PATTERN.sub("", text)
    text = _CLAUSE_BREAK_PATTERN.split(text, maxsplit=1)[0]
    return text.strip().lower()


def definition_similarity(a: str, b: str) -> float:
    """Jaccard overlap of the whitespace token sets of two normalized definitions."""
    tokens_a = set(a.split())
    tokens_b = set(b.split())
    union = tokens_a | tokens_b
    if not union:
        return 0.0

    return len(tokens_a & tokens_b) / len(union)


class SenseClusterer:
    def __init__(
        self,
        primary_sense_count: int = 3,
        max_total_senses: int = 8,
        similarity_threshold: float = 0.5
    ):
        if primary_sense_count < 1:
            raise ValueError(f"primary_sense_count must be positive, got {primary_sense_count}")
        if max_total_senses < primary_sense_count:
            raise ValueError(
                f"max_total_senses ({max_total_senses}) must be at least "
                f"primary_sense_count ({primary_sense_count})"
            )
        if not 0.0 <= similarity_threshold <= 1.0:
            raise ValueError(f"similarity_threshold must be within [0, 1], got {similarity_threshold}")

        self.logger = self._setup_logger()
        self.primary_sense_count = primary_sense_count
        self.max_total_senses = max_total_senses
        self.similarity_threshold = similarity_threshold
        self.logger.debug(
            f"SenseClusterer initialized with primary_sense_count={primary_sense_count}, "
            f"max_total_senses={max_total_senses}, similarity_threshold={similarity_threshold}"
        )

    def _setup_logger(self):
        logger = logging.getLogger("SenseClusterer")
        logger.setLevel(logging.INFO)

        if not logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
            handler.setFormatter(formatter)
            logger.addHandler(handler)

        return logger

    @staticmethod
    def process_sense(raw_sense: RawSense) -> Sense:
        return Sense(
            definition=raw_sense.definition,
            synonyms=list(raw_sense.synonyms),
            clean_definition=normalize_definition(raw_sense.definition),
            synonym_count=len(raw_sense.synonyms)
        )

    def find_matching_cluster(self, sense: Sense, clusters: List[Sense]) -> Optional[Sense]:
        for cluster in clusters:
            score = definition_similarity(cluster.clean_definition, sense.clean_definition)
            if score > self.similarity_threshold:
                return cluster
        return None

    def merge_senses(self, processed: List[Sense]) -> List[Sense]:
        """Greedy single pass: each sense joins the first similar cluster or seeds a new one."""
        clusters: List[Sense] = []

        for sense in processed:
            if sense.synonym_count == 0:
                continue

            match = self.find_matching_cluster(sense, clusters)
            if match is not None:
                match.merge(sense)
                continue

            synonyms = list(dict.fromkeys(sense.synonyms))
            clusters.append(Sense(
                definition=sense.definition,
                synonyms=synonyms,
                clean_definition=sense.clean_definition,
                synonym_count=len(synonyms)
            ))

        return clusters

    def paginate(self, clusters: List[Sense]) -> ClusteringResult:
        if not clusters:
            return ClusteringResult(senses=[], has_more=False)

        if len(clusters) <= self.primary_sense_count:
            return ClusteringResult(senses=clusters, has_more=False)

        primary = clusters[:self.primary_sense_count]
        additional = clusters[self.primary_sense_count:self.max_total_senses]
        return ClusteringResult(
            senses=primary,
            additional_senses=additional,
            has_more=len(additional) > 0
        )

    def cluster(self, raw_senses: Iterable[RawSense]) -> ClusteringResult:
        processed = [self.process_sense(raw_sense) for raw_sense in raw_senses]
        processed.sort(key=lambda sense: sense.synonym_count, reverse=True)

        clusters = self.merge_senses(processed)
        clusters.sort(key=lambda cluster: cluster.synonym_count, reverse=True)

        result = self.paginate(clusters)
        shown = len(result.senses) + len(result.additional_senses or [])
        self.logger.info(
            f"Clustered {len(processed)} senses into {len(clusters)} clusters "
            f"({len(result.senses)} primary, {shown - len(result.senses)} additional, "
            f"{len(clusters) - shown} dropped)"
        )
        return result
