"""Unit tests for query tokenization, whole-word matching and the pre-filter."""

import pytest

from pura_search.core.services.text_matching import (
    clean_word,
    count_matches,
    matches_prefilter,
    split_query,
    tokenize,
)

pytestmark = pytest.mark.unit


class TestTokenize:
    """Tests for split_query, clean_word and tokenize."""

    def test_lowercases_and_splits_on_whitespace_runs(self):
        assert tokenize("Temple   Architecture\tof\nBali") == ["temple", "architecture", "of", "bali"]

    def test_drops_single_character_tokens(self):
        assert tokenize("a temple I visited") == ["temple", "visited"]

    def test_strips_punctuation(self):
        assert tokenize("mind, body!") == ["mind", "body"]

    def test_drops_tokens_empty_after_cleaning(self):
        assert tokenize("-- ?? temple") == ["temple"]

    def test_length_check_happens_before_cleaning(self):
        """'a,' survives the length filter and cleans to 'a'."""
        assert split_query("a, b") == ["a,"]
        assert tokenize("a, b") == ["a"]

    def test_keeps_underscores_digits_and_duplicates(self):
        assert tokenize("pura_besakih 1917 pura_besakih") == [
            "pura_besakih",
            "1917",
            "pura_besakih",
        ]

    def test_unicode_letters_are_word_characters(self):
        assert clean_word("galungan–kuningan") == "galungankuningan"
        assert tokenize("Pénjor") == ["pénjor"]

    def test_empty_and_whitespace_queries(self):
        assert tokenize("") == []
        assert tokenize("   ") == []


class TestCountMatches:
    """Tests for whole-word counting."""

    def test_counts_whole_words_case_insensitively(self):
        assert count_matches("Yoga is yoga. YOGA!", ["yoga"]) == 3

    def test_respects_word_boundaries(self):
        assert count_matches("Hindu temples and a temple", ["temple"]) == 1

    def test_sums_across_query_words(self):
        text = "festival of lights, a festival"
        assert count_matches(text, ["festival", "lights"]) == 3

    def test_repeated_query_word_counts_each_time(self):
        assert count_matches("sacred temple", ["temple", "temple"]) == 2

    def test_skips_words_shorter_than_two_characters(self):
        assert count_matches("a b c a", ["a", "b"]) == 0

    def test_cleans_raw_words(self):
        assert count_matches("mind and body", ["mind,", "body!"]) == 2

    def test_regex_metacharacters_are_literal(self):
        """Cleaned words hold only word characters, so nothing can break the pattern."""
        assert count_matches("c++ and c", ["c++"]) == 0
        assert count_matches("x.y xay", ["x.y"]) == 0

    def test_empty_text_or_words(self):
        assert count_matches("", ["temple"]) == 0
        assert count_matches("temple", []) == 0


class TestMatchesPrefilter:
    """Tests for the substring pre-filter."""

    def test_full_phrase_in_title(self):
        assert matches_prefilter("Vastu Shastra", ["vastu", "shastra"], "Vastu Shastra", "")

    def test_any_word_in_content(self):
        assert matches_prefilter("festival lights", ["festival", "lights"], "", "The lights shone")

    def test_substring_inside_longer_word_passes(self):
        assert matches_prefilter("temple", ["temple"], "", "Hindu temples")

    def test_no_match(self):
        assert not matches_prefilter(
            "nonexistent topic", ["nonexistent", "topic"], "Temple", "Sacred site"
        )

    def test_single_character_query_uses_phrase(self):
        assert matches_prefilter("a", [], "A Guide", "")
        assert not matches_prefilter("q", [], "Temple", "sacred")
