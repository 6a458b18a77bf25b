"""Tests for the compare() dispatcher and bag-of-words similarity."""

import logging

import pytest

import fuzzycompare as fc
from fuzzycompare import Mode


class TestCompareScenarios:
    """Known input/output pairs for each mode."""

    def test_kitten_sitting_levenshtein(self):
        assert fc.compare("kitten", "sitting", Mode.LEVENSHTEIN) == pytest.approx(4 / 7)

    def test_transposition_damerau(self):
        assert fc.compare("ca", "ac", Mode.DAMERAU_LEVENSHTEIN) == 0.75

    def test_transposition_levenshtein(self):
        # Levenshtein pays for a swap with two substitutions: (2 - 2) / 2
        assert fc.compare("ca", "ac", Mode.LEVENSHTEIN) == 0.0

    def test_empty_levenshtein(self):
        assert fc.compare("", "", Mode.LEVENSHTEIN) == 1.0

    def test_word_order_ignored(self):
        assert fc.compare("The Quick Fox", "quick fox the", Mode.BAG_OF_WORDS) == 1.0

    def test_nothing_in_common(self):
        assert fc.compare("abc", "xyz", Mode.LEVENSHTEIN) == 0.0

    def test_default_mode_is_levenshtein(self):
        assert fc.compare("kitten", "sitting") == fc.compare("kitten", "sitting", Mode.LEVENSHTEIN)
        assert fc.compare("ca", "ac") == 0.0

    @pytest.mark.parametrize("mode", list(Mode))
    @pytest.mark.parametrize("text", ["", "a", "hello world", "Some_File-Name.TXT", "日本語"])
    def test_identity(self, mode, text):
        assert fc.compare(text, text, mode) == 1.0


class TestModeSelection:
    """Tests for mode arguments given as strings."""

    @pytest.mark.parametrize(
        "mode", ["damerau_levenshtein", "DAMERAU_LEVENSHTEIN", "Damerau_Levenshtein"]
    )
    def test_string_mode(self, mode):
        assert fc.compare("ca", "ac", mode) == 0.75

    def test_bag_of_words_string(self):
        assert fc.compare("red apple", "apple red", "bag_of_words") == 1.0

    @pytest.mark.parametrize("mode", ["soundex", "", 42, None, 3.5])
    def test_unknown_mode_returns_zero(self, mode):
        assert fc.compare("same", "same", mode) == 0.0

    def test_unknown_mode_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="fuzzycompare.dispatch"):
            fc.compare("a", "b", "jaro")
        assert any("jaro" in record.getMessage() for record in caplog.records)

    def test_invalid_input_checked_before_mode(self):
        with pytest.raises(fc.InvalidArgument):
            fc.compare(None, "a", "not-a-mode")


class TestBagOfWords:
    """Tests for bag_of_words_similarity."""

    def test_partial_overlap(self):
        assert fc.bag_of_words_similarity("red_apple", "Apple pie") == 0.5

    def test_divides_by_larger_token_count(self):
        # 2 shared words, 4 words in the longer string
        assert fc.bag_of_words_similarity("quick brown fox jumps", "quick fox") == 0.5

    def test_repeated_words_count_once_per_match(self):
        # "the" appears twice on the left but only once on the right
        assert fc.bag_of_words_similarity("the cat the hat", "the hat") == 0.5
        assert fc.bag_of_words_similarity("the hat", "the cat the hat") == 0.5

    def test_repeated_words_on_both_sides(self):
        assert fc.bag_of_words_similarity("go go go", "Go_Go") == pytest.approx(2 / 3)

    def test_exact_match_shortcut(self):
        assert fc.bag_of_words_similarity("", "") == 1.0
        assert fc.bag_of_words_similarity("!!!", "!!!") == 1.0

    def test_no_tokens_on_either_side(self):
        # 0/0 is defined as 0.0, not NaN
        assert fc.bag_of_words_similarity("!!!", "???") == 0.0
        assert fc.bag_of_words_similarity("", "  ") == 0.0

    def test_one_side_empty(self):
        assert fc.bag_of_words_similarity("", "hello") == 0.0

    def test_case_and_separators_ignored(self):
        assert fc.bag_of_words_similarity("My_Vacation-Photos", "my vacation photos") == 1.0

    def test_possessive_ignored(self):
        assert fc.bag_of_words_similarity("John's report", "john report") == 1.0

    def test_no_common_words(self):
        assert fc.bag_of_words_similarity("alpha beta", "gamma delta") == 0.0


class TestInvalidArguments:
    """Tests for rejecting missing inputs."""

    @pytest.mark.parametrize("mode", list(Mode))
    def test_none_raises(self, mode):
        with pytest.raises(fc.InvalidArgument):
            fc.compare(None, "hello", mode)
        with pytest.raises(fc.InvalidArgument):
            fc.compare("hello", None, mode)
        with pytest.raises(fc.InvalidArgument):
            fc.compare(None, None, mode)

    def test_invalid_argument_is_type_error(self):
        with pytest.raises(TypeError):
            fc.compare(None, "hello")

    def test_invalid_argument_is_fuzzy_compare_error(self):
        with pytest.raises(fc.FuzzyCompareError):
            fc.compare("hello", b"hello")

    def test_error_names_argument(self):
        with pytest.raises(fc.InvalidArgument, match="s2"):
            fc.compare("hello", None)
