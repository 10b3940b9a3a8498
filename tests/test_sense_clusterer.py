import pytest

from word_radar.models.sense_model import RawSense
from word_radar.services.sense_clusterer import (
    SenseClusterer,
    definition_similarity,
    normalize_definition,
)


def _senses(*pairs):
    return [RawSense(definition=definition, synonyms=list(synonyms)) for definition, synonyms in pairs]


class TestNormalizeDefinition:
    def test_strips_markup_colon_and_lowercases(self):
        raw = ": to {it}move{/it} along  on Foot"
        assert normalize_definition(raw) == "to move along on foot"

    def test_truncates_at_first_clause_break(self):
        assert normalize_definition("to walk slowly; to stroll") == "to walk slowly"
        assert normalize_definition("Happy, glad; cheerful") == "happy"

    def test_collapses_whitespace(self):
        assert normalize_definition("  a \t long\n\nway  ") == "a long way"

    def test_empty_and_markup_only(self):
        assert normalize_definition("") == ""
        assert normalize_definition("{bc}{sx|walk||}") == ""

    def test_unmatched_brace_is_kept(self):
        assert normalize_definition("open {brace") == "open {brace"

    @pytest.mark.parametrize("raw", [
        ": : double colon",
        " :leading space then colon",
        "{a}{b} Mixed CASE, tail",
        "{{nested}} text}",
        ";starts with break",
        "",
        "plain",
    ])
    def test_idempotent(self, raw):
        once = normalize_definition(raw)
        assert normalize_definition(once) == once


class TestDefinitionSimilarity:
    def test_identical(self):
        assert definition_similarity("to walk slowly", "to walk slowly") == 1.0

    def test_partial_overlap(self):
        # {to, walk} shared out of {to, walk, slowly, fast}
        assert definition_similarity("to walk slowly", "to walk fast") == pytest.approx(0.5)

    def test_disjoint(self):
        assert definition_similarity("happy", "sad") == 0.0

    def test_both_empty_is_zero(self):
        assert definition_similarity("", "") == 0.0

    def test_one_empty(self):
        assert definition_similarity("", "word") == 0.0

    def test_duplicate_tokens_count_once(self):
        assert definition_similarity("walk walk", "walk") == 1.0

    @pytest.mark.parametrize("a,b", [
        ("to walk slowly", "to walk in a leisurely way"),
        ("a b c", "c d"),
        ("", "x"),
    ])
    def test_symmetric_and_bounded(self, a, b):
        score = definition_similarity(a, b)
        assert score == definition_similarity(b, a)
        assert 0.0 <= score <= 1.0


class TestSenseClusterer:
    def test_rejects_invalid_parameters(self):
        with pytest.raises(ValueError):
            SenseClusterer(primary_sense_count=0)
        with pytest.raises(ValueError):
            SenseClusterer(primary_sense_count=3, max_total_senses=2)
        with pytest.raises(ValueError):
            SenseClusterer(similarity_threshold=1.5)

    def test_empty_input(self):
        result = SenseClusterer().cluster([])
        assert result.senses == []
        assert result.additional_senses is None
        assert result.has_more is False

    def test_zero_synonym_sense_is_dropped(self):
        result = SenseClusterer().cluster(_senses(("x", [])))
        assert result.senses == []
        assert result.has_more is False

    def test_zero_synonym_sense_never_merges_into_a_cluster(self):
        raw = _senses(
            ("to walk slowly", ["stroll", "amble"]),
            ("to walk slowly and with great care", []),
        )
        result = SenseClusterer(similarity_threshold=0.1).cluster(raw)

        assert len(result.senses) == 1
        cluster = result.senses[0]
        assert cluster.definition == "to walk slowly"
        assert cluster.clean_definition == "to walk slowly"
        assert cluster.synonyms == ["stroll", "amble"]
        assert cluster.synonym_count == 2

    def test_single_sense(self):
        result = SenseClusterer(primary_sense_count=3).cluster(_senses(("d", ["a", "b"])))
        assert len(result.senses) == 1
        assert result.senses[0].synonyms == ["a", "b"]
        assert result.senses[0].synonym_count == 2
        assert result.has_more is False
        assert result.additional_senses is None

    def test_walk_senses_stay_apart_at_point_three(self):
        # "to walk slowly" vs "to walk in a leisurely way": {to, walk} / 7 tokens ~ 0.29
        raw = _senses(
            ("to walk slowly", ["stroll", "amble"]),
            ("to walk in a leisurely way", ["saunter"]),
        )
        result = SenseClusterer(similarity_threshold=0.3).cluster(raw)
        assert [sense.synonyms for sense in result.senses] == [["stroll", "amble"], ["saunter"]]

    def test_walk_senses_merge_at_point_two(self):
        raw = _senses(
            ("to walk slowly", ["stroll", "amble"]),
            ("to walk in a leisurely way", ["saunter", "amble"]),
        )
        result = SenseClusterer(similarity_threshold=0.2).cluster(raw)
        assert len(result.senses) == 1
        merged = result.senses[0]
        assert merged.synonyms == ["stroll", "amble", "saunter"]
        assert merged.synonym_count == 3
        # the longer original definition becomes the representative
        assert merged.definition == "to walk in a leisurely way"
        assert merged.clean_definition == "to walk in a leisurely way"

    def test_threshold_is_strict(self):
        raw = _senses(
            ("to walk slowly", ["stroll"]),
            ("to walk fast", ["stride"]),
        )
        assert len(SenseClusterer(similarity_threshold=0.5).cluster(raw).senses) == 2
        assert len(SenseClusterer(similarity_threshold=0.49).cluster(raw).senses) == 1

    def test_shorter_definition_does_not_replace_representative(self):
        raw = _senses(
            ("to walk slowly and calmly", ["stroll", "amble", "mosey"]),
            ("to walk slowly", ["saunter"]),
        )
        result = SenseClusterer(similarity_threshold=0.3).cluster(raw)
        assert len(result.senses) == 1
        assert result.senses[0].definition == "to walk slowly and calmly"

    def test_richest_sense_seeds_the_cluster(self):
        raw = _senses(
            ("to go on foot", ["walk"]),
            ("to go on foot slowly", ["stroll", "amble", "mosey"]),
        )
        result = SenseClusterer(similarity_threshold=0.5).cluster(raw)
        assert len(result.senses) == 1
        assert result.senses[0].synonyms == ["stroll", "amble", "mosey", "walk"]

    def test_first_matching_cluster_wins(self):
        raw = _senses(
            ("red apple fruit", ["a1", "a2", "a3"]),
            ("red apple tree", ["b1", "b2"]),
            ("red apple", ["c1"]),
        )
        # "red apple tree" vs "red apple fruit" is exactly 0.5, so it seeds its own cluster.
        # "red apple" scores 2/3 against both and joins the older one.
        result = SenseClusterer(similarity_threshold=0.5).cluster(raw)
        assert [sense.synonyms for sense in result.senses] == [
            ["a1", "a2", "a3", "c1"],
            ["b1", "b2"],
        ]

    def test_clusters_resorted_after_merging(self):
        raw = _senses(
            ("alpha beta", ["a1", "a2", "a3"]),
            ("gamma delta", ["g1", "g2"]),
            ("gamma delta epsilon", ["g3", "g4"]),
        )
        result = SenseClusterer(similarity_threshold=0.5).cluster(raw)
        assert [sense.synonym_count for sense in result.senses] == [4, 3]
        assert result.senses[0].definition == "gamma delta epsilon"

    def test_pagination_of_nine_distinct_senses(self):
        raw = _senses(*[(f"meaning{i}", [f"syn{i}"]) for i in range(9)])
        result = SenseClusterer(primary_sense_count=3, max_total_senses=8).cluster(raw)
        assert len(result.senses) == 3
        assert len(result.additional_senses) == 5
        assert result.has_more is True
        shown = [s.synonyms[0] for s in result.senses + result.additional_senses]
        assert "syn8" not in shown
        assert shown == [f"syn{i}" for i in range(8)]

    def test_exactly_primary_count_has_no_overflow(self):
        raw = _senses(*[(f"meaning{i}", [f"syn{i}"]) for i in range(3)])
        result = SenseClusterer(primary_sense_count=3).cluster(raw)
        assert len(result.senses) == 3
        assert result.additional_senses is None
        assert result.has_more is False

    def test_synonym_totals_preserved_without_merges(self):
        raw = _senses(
            ("to walk slowly", ["stroll", "amble"]),
            ("to walk slowly too", ["saunter"]),
            ("unrelated", []),
            ("another meaning", ["x", "y", "z"]),
        )
        result = SenseClusterer(similarity_threshold=1.0, max_total_senses=8).cluster(raw)
        total_in = sum(len(sense.synonyms) for sense in raw if sense.synonyms)
        total_out = sum(s.synonym_count for s in result.senses + (result.additional_senses or []))
        assert total_out == total_in

    def test_synonym_totals_never_grow_with_merges(self):
        raw = _senses(
            ("to walk slowly", ["stroll", "amble"]),
            ("to walk slowly around", ["amble", "mosey"]),
            ("to walk", ["walk"]),
        )
        result = SenseClusterer(similarity_threshold=0.3).cluster(raw)
        total_in = sum(len(sense.synonyms) for sense in raw if sense.synonyms)
        total_out = sum(s.synonym_count for s in result.senses + (result.additional_senses or []))
        assert total_out <= total_in

    def test_serializes_with_wire_names(self):
        result = SenseClusterer().cluster(_senses(("d", ["a", "b"])))
        dumped = result.model_dump(by_alias=True)
        assert dumped == {
            "senses": [{
                "definition": "d",
                "synonyms": ["a", "b"],
                "cleanDefinition": "d",
                "synonymCount": 2,
            }],
            "additionalSenses": None,
            "hasMore": False,
        }
